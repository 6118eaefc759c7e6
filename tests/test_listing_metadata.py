"""Tests for listing page metadata (title, description, robots, canonical)."""

import unittest

from pydantic import ValidationError

from backend.listing.codec import BLOG_LISTING, PRODUCT_LISTING
from backend.listing.metadata import BLOG_COPY, PRODUCT_COPY, ResolvedNames, describe_for_metadata
from models import BlogFilters, PageMetadata, ProductFilters, Robots

_BASE_URL = "https://grimmiz.es/"


def _describe_products(filters: ProductFilters, names: ResolvedNames | None = None, total_pages: int | None = None):
    return describe_for_metadata(
        filters, names, codec=PRODUCT_LISTING, base_url=_BASE_URL, total_pages=total_pages
    )


class TestTitle(unittest.TestCase):
    def test_category_tag_and_page(self) -> None:
        metadata = _describe_products(
            ProductFilters(category="figuras", tag="navidad", page=2),
            ResolvedNames(category_name="Figuras", tag_name="navidad"),
            total_pages=5,
        )

        self.assertEqual(metadata.title, "Figuras #navidad - página 2 de 5 | Grimmiz")

    def test_no_filters_uses_listing_name(self) -> None:
        self.assertEqual(_describe_products(ProductFilters()).title, "Mundo Grimmiz | Grimmiz")
        blog = describe_for_metadata(BlogFilters(), codec=BLOG_LISTING, base_url=_BASE_URL)
        self.assertEqual(blog.title, "Diario Grimmiz | Grimmiz")

    def test_tag_without_category(self) -> None:
        metadata = _describe_products(ProductFilters(tag="timo"), ResolvedNames(tag_name="Timo"))

        self.assertEqual(metadata.title, "Mundo Grimmiz #Timo | Grimmiz")

    def test_first_page_has_no_page_suffix(self) -> None:
        metadata = _describe_products(
            ProductFilters(category="figuras"), ResolvedNames(category_name="Figuras"), total_pages=5
        )

        self.assertEqual(metadata.title, "Figuras | Grimmiz")

    def test_unknown_total_omits_page_suffix(self) -> None:
        metadata = _describe_products(
            ProductFilters(category="figuras", page=3), ResolvedNames(category_name="Figuras"), total_pages=None
        )

        self.assertEqual(metadata.title, "Figuras | Grimmiz")
        self.assertNotIn("Página", metadata.description)

    def test_unresolved_slugs_are_left_out(self) -> None:
        metadata = _describe_products(ProductFilters(category="no-existe", tag="tampoco"), ResolvedNames())

        self.assertEqual(metadata.title, "Mundo Grimmiz | Grimmiz")
        self.assertEqual(metadata.description, PRODUCT_COPY.default_description)


class TestDescription(unittest.TestCase):
    def test_four_templates(self) -> None:
        cases = [
            (ResolvedNames(), PRODUCT_COPY.default_description),
            (
                ResolvedNames(category_name="Figuras"),
                "Descubre todos nuestros productos de figuras en Mundo Grimmiz.",
            ),
            (
                ResolvedNames(tag_name="Navidad"),
                "Explora productos sobre navidad en Mundo Grimmiz.",
            ),
            (
                ResolvedNames(category_name="Figuras", tag_name="Navidad"),
                "Descubre nuestros productos de figuras sobre navidad en Mundo Grimmiz.",
            ),
        ]
        for names, expected in cases:
            with self.subTest(names=names):
                self.assertEqual(_describe_products(ProductFilters(), names).description, expected)

    def test_sort_clause_then_page_clause(self) -> None:
        metadata = describe_for_metadata(
            BlogFilters(category="tutoriales", sort="antiguos", page=2),
            ResolvedNames(category_name="Tutoriales"),
            codec=BLOG_LISTING,
            base_url=_BASE_URL,
            total_pages=3,
        )

        self.assertEqual(
            metadata.description,
            "Artículos de tutoriales en el Diario Grimmiz. "
            "Artículos más antiguos primero. Página 2 de 3.",
        )

    def test_explicit_copy_overrides_listing_default(self) -> None:
        metadata = describe_for_metadata(
            BlogFilters(), codec=BLOG_LISTING, base_url=_BASE_URL, copy=PRODUCT_COPY
        )

        self.assertEqual(metadata.title, "Mundo Grimmiz | Grimmiz")
        self.assertNotEqual(metadata.description, BLOG_COPY.default_description)


class TestIndexability(unittest.TestCase):
    def test_default_sort_is_indexable_with_canonical(self) -> None:
        filters = ProductFilters(category="figuras", page=2)

        metadata = _describe_products(filters, total_pages=4)

        self.assertEqual(metadata.robots, Robots(index=True, follow=True))
        self.assertEqual(metadata.canonical, "https://grimmiz.es/mundo-grimmiz/categoria/figuras/pagina/2")
        self.assertEqual(
            metadata.canonical,
            _BASE_URL.rstrip("/") + PRODUCT_LISTING.build_list_url(filters),
        )

    def test_custom_sort_is_noindex_without_canonical(self) -> None:
        for sort in ("antiguos", "precio-asc", "precio-desc", "titulo-asc", "titulo-desc"):
            with self.subTest(sort=sort):
                metadata = _describe_products(ProductFilters(category="figuras", sort=sort))

                self.assertFalse(metadata.robots.index)
                self.assertFalse(metadata.robots.follow)
                self.assertIsNone(metadata.canonical)

    def test_metadata_model_rejects_mixed_combinations(self) -> None:
        with self.assertRaises(ValidationError):
            PageMetadata(title="t", description="d", robots=Robots(index=True, follow=True))
        with self.assertRaises(ValidationError):
            PageMetadata(
                title="t",
                description="d",
                robots=Robots(index=False, follow=False),
                canonical="https://grimmiz.es/mundo-grimmiz",
            )


if __name__ == "__main__":
    unittest.main()
