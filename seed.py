"""
Seed script: writes a small sample storefront (categories, tags, products,
blog articles) to data/store.json so the API can be run locally.

Usage:
    uv run python seed.py
"""

import json
import logging
from pathlib import Path

from backend.config import SiteConfig
from models import Article, Category, Product, Tag

logger = logging.getLogger(__name__)

_CATEGORIES = [
    ("Figuras de resina", "figuras-de-resina"),
    ("Láminas", "laminas"),
    ("Peluches", "peluches"),
    ("Tutoriales", "tutoriales"),
    ("Novedades", "novedades"),
]

_TAGS = [
    ("Timo", "timo"),
    ("Navidad", "navidad"),
    ("Disney", "disney"),
    ("Acuarela", "acuarela"),
]

# (title, category slug, tag slugs, price)
_PRODUCTS = [
    ("Figura Timo sentado", "figuras-de-resina", ["timo"], 34.9),
    ("Figura Timo con bufanda", "figuras-de-resina", ["timo", "navidad"], 39.9),
    ("Figura dragón dormido", "figuras-de-resina", [], 45.0),
    ("Lámina bosque encantado", "laminas", ["acuarela"], 18.5),
    ("Lámina Timo y Pumba", "laminas", ["timo", "disney"], 22.0),
    ("Lámina noche de invierno", "laminas", ["navidad", "acuarela"], 18.5),
    ("Peluche zorro", "peluches", [], 29.0),
    ("Peluche reno navideño", "peluches", ["navidad"], 31.0),
]

# (title, category slug, tag slugs, published)
_ARTICLES = [
    ("Cómo pintamos una figura de resina", "tutoriales", ["acuarela"], True),
    ("Ideas de regalo hechas a mano", "novedades", ["navidad"], True),
    ("Presentamos a Timo", "novedades", ["timo"], True),
    ("Acuarela para principiantes", "tutoriales", ["acuarela"], True),
    ("Borrador: colección de primavera", "novedades", [], False),
]


def _slugify(title: str, record_id: int) -> str:
    ascii_title = (
        title.lower()
        .replace("á", "a")
        .replace("é", "e")
        .replace("í", "i")
        .replace("ó", "o")
        .replace("ú", "u")
        .replace("ñ", "n")
    )
    words = "".join(ch if ch.isalnum() else " " for ch in ascii_title).split()
    return "-".join(words + [str(record_id)])


def _timestamp(day: int) -> str:
    return f"2024-03-{day:02d}T10:00:00+00:00"


def build_sample_store() -> dict[str, list[dict]]:
    """Sample tables, validated through the record models before being returned."""
    categories = [
        Category(id=i, name=name, slug=slug) for i, (name, slug) in enumerate(_CATEGORIES, start=1)
    ]
    tags = [Tag(id=i, name=name, slug=slug) for i, (name, slug) in enumerate(_TAGS, start=1)]
    category_ids = {c.slug: c.id for c in categories}
    tag_ids = {t.slug: t.id for t in tags}

    products = [
        Product(
            id=i,
            title=title,
            slug=_slugify(title, i),
            description=f"{title}, hecho a mano.",
            price=price,
            main_image_url=f"/images/productos/{_slugify(title, i)}.jpg",
            category_id=category_ids[category],
            tag_ids=[tag_ids[t] for t in tag_slugs],
            created_at=_timestamp(i),
            updated_at=_timestamp(i + 10),
        )
        for i, (title, category, tag_slugs, price) in enumerate(_PRODUCTS, start=1)
    ]
    articles = [
        Article(
            id=i,
            title=title,
            slug=_slugify(title, i),
            excerpt=f"{title}.",
            content=f"<p>{title}.</p>",
            category_id=category_ids[category],
            tag_ids=[tag_ids[t] for t in tag_slugs],
            published=published,
            created_at=_timestamp(i),
            updated_at=_timestamp(i + 10),
        )
        for i, (title, category, tag_slugs, published) in enumerate(_ARTICLES, start=1)
    ]

    return {
        "categories": [c.model_dump() for c in categories],
        "tags": [t.model_dump() for t in tags],
        "products": [p.model_dump() for p in products],
        "articles": [a.model_dump() for a in articles],
    }


def seed_store(path: Path) -> dict[str, list[dict]]:
    tables = build_sample_store()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(tables, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(
        "Wrote %s (%s)",
        path,
        ", ".join(f"{name}={len(rows)}" for name, rows in tables.items()),
    )
    return tables


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    seed_store(SiteConfig.from_env().store_file)
