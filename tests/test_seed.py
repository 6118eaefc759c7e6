"""Tests for the sample store written by seed.py."""

import tempfile
import unittest
from pathlib import Path

from backend.store import TABLES, JsonFileStore
from models import Article, Category, Product, Tag
from seed import build_sample_store, seed_store


class TestSampleStore(unittest.TestCase):
    def test_has_every_table(self) -> None:
        tables = build_sample_store()

        self.assertEqual(set(tables), set(TABLES))
        self.assertTrue(all(tables[name] for name in TABLES))

    def test_records_validate_and_slugs_are_unique(self) -> None:
        tables = build_sample_store()
        models = {"categories": Category, "tags": Tag, "products": Product, "articles": Article}

        for name, model in models.items():
            with self.subTest(table=name):
                records = [model.model_validate(row) for row in tables[name]]
                slugs = [record.slug for record in records]
                self.assertEqual(len(slugs), len(set(slugs)))

    def test_references_point_at_existing_rows(self) -> None:
        tables = build_sample_store()
        category_ids = {row["id"] for row in tables["categories"]}
        tag_ids = {row["id"] for row in tables["tags"]}

        for row in tables["products"] + tables["articles"]:
            self.assertIn(row["category_id"], category_ids)
            self.assertTrue(set(row["tag_ids"]) <= tag_ids)


class TestSeedStore(unittest.IsolatedAsyncioTestCase):
    async def test_written_file_loads_into_store(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "store.json"

            with self.assertLogs("seed", level="INFO"):
                seed_store(path)
            store = JsonFileStore.from_path(path)

        product = await store.find_by_slug("products", "figura-timo-sentado-1")
        self.assertIsNotNone(product)
        assert product is not None
        self.assertEqual(product["title"], "Figura Timo sentado")


if __name__ == "__main__":
    unittest.main()
