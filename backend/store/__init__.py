from .store import (
    ARTICLES,
    CATEGORIES,
    PRODUCTS,
    TABLES,
    TAGS,
    CatalogStore,
    JsonFileStore,
    OrderBy,
    Predicate,
    Record,
    StoreError,
)

__all__ = [
    "ARTICLES",
    "CATEGORIES",
    "PRODUCTS",
    "TABLES",
    "TAGS",
    "CatalogStore",
    "JsonFileStore",
    "OrderBy",
    "Predicate",
    "Record",
    "StoreError",
]
