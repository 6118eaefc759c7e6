"""
Data-store collaborator for the storefront.

Listings only need a handful of read operations: look a record up by slug,
count the records matching a predicate, and fetch one ordered page of them.
`CatalogStore` is that contract; `JsonFileStore` implements it over tables
held in memory and loaded from a single JSON document:

    {"categories": [...], "tags": [...], "products": [...], "articles": [...]}

Errors from the store are raised as StoreError and are not handled here.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)

Record = dict[str, Any]

CATEGORIES = "categories"
TAGS = "tags"
PRODUCTS = "products"
ARTICLES = "articles"
TABLES = (CATEGORIES, TAGS, PRODUCTS, ARTICLES)


class StoreError(RuntimeError):
    """The store could not be read or was asked for something it does not hold."""


@dataclass(frozen=True)
class Predicate:
    """Conjunction of column tests: `equals` compares values, `contains` tests list membership."""

    equals: Mapping[str, Any] = field(default_factory=dict)
    contains: Mapping[str, Any] = field(default_factory=dict)

    def matches(self, record: Mapping[str, Any]) -> bool:
        for column, expected in self.equals.items():
            if record.get(column) != expected:
                return False
        for column, member in self.contains.items():
            values = record.get(column) or []
            if member not in values:
                return False
        return True


@dataclass(frozen=True)
class OrderBy:
    column: str
    ascending: bool = True


class CatalogStore(Protocol):
    async def find_by_slug(self, table: str, slug: str) -> Record | None: ...

    async def count_matching(self, table: str, predicate: Predicate) -> int: ...

    async def list_matching(
        self,
        table: str,
        predicate: Predicate,
        order_by: OrderBy,
        offset: int,
        limit: int,
    ) -> list[Record]: ...

    async def list_all(self, table: str, order_by: OrderBy | None = None) -> list[Record]: ...


class JsonFileStore:
    """In-memory tables, typically loaded once from a JSON file."""

    def __init__(self, tables: Mapping[str, list[Record]] | None = None) -> None:
        tables = tables or {}
        self._tables: dict[str, list[Record]] = {
            name: [dict(record) for record in tables.get(name, [])] for name in TABLES
        }

    @classmethod
    def from_path(cls, path: Path) -> "JsonFileStore":
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise StoreError(f"Store file not found: {path}") from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreError(f"Store file {path} could not be read: {exc}") from exc
        if not isinstance(payload, dict):
            raise StoreError(f"Store file {path} must contain a JSON object of tables")

        store = cls(payload)
        logger.info(
            "Loaded store from %s (%s)",
            path,
            ", ".join(f"{name}={len(store._tables[name])}" for name in TABLES),
        )
        return store

    def _table(self, table: str) -> list[Record]:
        try:
            return self._tables[table]
        except KeyError:
            raise StoreError(f"Unknown table: {table}") from None

    async def find_by_slug(self, table: str, slug: str) -> Record | None:
        for record in self._table(table):
            if record.get("slug") == slug:
                return dict(record)
        return None

    async def count_matching(self, table: str, predicate: Predicate) -> int:
        return sum(1 for record in self._table(table) if predicate.matches(record))

    async def list_matching(
        self,
        table: str,
        predicate: Predicate,
        order_by: OrderBy,
        offset: int,
        limit: int,
    ) -> list[Record]:
        rows = [record for record in self._table(table) if predicate.matches(record)]
        rows = _sorted(rows, order_by)
        return [dict(record) for record in rows[offset : offset + limit]]

    async def list_all(self, table: str, order_by: OrderBy | None = None) -> list[Record]:
        rows = list(self._table(table))
        if order_by is not None:
            rows = _sorted(rows, order_by)
        return [dict(record) for record in rows]


def _sorted(rows: list[Record], order_by: OrderBy) -> list[Record]:
    # Ties keep id order in both directions so pages never overlap.
    by_id = sorted(rows, key=lambda record: record.get("id", 0))
    present = [record for record in by_id if record.get(order_by.column) is not None]
    missing = [record for record in by_id if record.get(order_by.column) is None]
    present.sort(key=lambda record: _sort_key(record[order_by.column]), reverse=not order_by.ascending)
    return present + missing


def _sort_key(value: Any) -> Any:
    if isinstance(value, str):
        return value.casefold()
    return value
