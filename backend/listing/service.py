"""
Listing orchestration: filter state + store -> one rendered listing page.

This is the only part of the listing code that talks to the store. Name
lookups, counts and the page query are independent reads and are issued
concurrently. Store errors propagate, except while counting pages for
metadata, where an unknown total just drops the "página N de M" text.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from models import (
    Article,
    ArticleListingPage,
    ArticleSummary,
    FilterLink,
    ListFilters,
    ListingPage,
    PageMetadata,
    Product,
    ProductListingPage,
    ProductSummary,
)
from backend.store import (
    ARTICLES,
    CATEGORIES,
    PRODUCTS,
    TAGS,
    CatalogStore,
    OrderBy,
    Predicate,
    Record,
    StoreError,
)

from .codec import BLOG_LISTING, PRODUCT_LISTING, ListingCodec
from .metadata import BLOG_COPY, PRODUCT_COPY, ListingCopy, ResolvedNames, describe_for_metadata
from .pagination import build_pagination, page_bounds, total_pages

logger = logging.getLogger(__name__)

_RECENT_FIRST = OrderBy("updated_at", ascending=False)


def _product_summary(record: Record) -> ProductSummary:
    product = Product.model_validate(record)
    return ProductSummary(
        id=product.id,
        name=product.title or f"Producto {product.id}",
        slug=product.slug,
        price=product.price,
        image_url=product.main_image_url,
        description=product.description,
    )


def _article_summary(record: Record) -> ArticleSummary:
    article = Article.model_validate(record)
    return ArticleSummary(
        id=article.id,
        title=article.title,
        slug=article.slug,
        excerpt=article.excerpt,
        image_url=article.main_image_url,
        created_at=article.created_at,
    )


@dataclass(frozen=True)
class ListingSpec:
    """Everything that differs between the catalog and the blog listing."""

    codec: ListingCodec
    copy: ListingCopy
    table: str
    summarize: Callable[[Record], BaseModel]
    page_model: type[ListingPage]
    sort_orders: Mapping[str, OrderBy]
    # Columns every listed record must match (e.g. published articles only).
    base_filter: Mapping[str, Any] = field(default_factory=dict)
    category_table: str = CATEGORIES
    tag_table: str = TAGS

    def order_for(self, sort: str) -> OrderBy:
        return self.sort_orders.get(sort, _RECENT_FIRST)


PRODUCT_LISTING_SPEC = ListingSpec(
    codec=PRODUCT_LISTING,
    copy=PRODUCT_COPY,
    table=PRODUCTS,
    summarize=_product_summary,
    page_model=ProductListingPage,
    sort_orders={
        "recientes": _RECENT_FIRST,
        "antiguos": OrderBy("created_at", ascending=True),
        "precio-asc": OrderBy("price", ascending=True),
        "precio-desc": OrderBy("price", ascending=False),
        "titulo-asc": OrderBy("title", ascending=True),
        "titulo-desc": OrderBy("title", ascending=False),
    },
)

BLOG_LISTING_SPEC = ListingSpec(
    codec=BLOG_LISTING,
    copy=BLOG_COPY,
    table=ARTICLES,
    summarize=_article_summary,
    page_model=ArticleListingPage,
    sort_orders={
        "recientes": _RECENT_FIRST,
        "antiguos": OrderBy("created_at", ascending=True),
        "titulo-asc": OrderBy("title", ascending=True),
        "titulo-desc": OrderBy("title", ascending=False),
    },
    base_filter={"published": True},
)


@dataclass(frozen=True)
class _ResolvedFilters:
    category: Record | None = None
    tag: Record | None = None

    @property
    def names(self) -> ResolvedNames:
        return ResolvedNames(
            category_name=self.category.get("name") if self.category else None,
            tag_name=self.tag.get("name") if self.tag else None,
        )


async def _lookup(store: CatalogStore, table: str, slug: str | None) -> Record | None:
    if not slug:
        return None
    return await store.find_by_slug(table, slug)


async def _resolve(store: CatalogStore, spec: ListingSpec, filters: ListFilters) -> _ResolvedFilters:
    category, tag = await asyncio.gather(
        _lookup(store, spec.category_table, filters.category),
        _lookup(store, spec.tag_table, filters.tag),
    )
    return _ResolvedFilters(category=category, tag=tag)


async def resolve_names(store: CatalogStore, spec: ListingSpec, filters: ListFilters) -> ResolvedNames:
    """Display names for the filter slugs; unknown slugs resolve to None."""
    resolved = await _resolve(store, spec, filters)
    return resolved.names


def _predicate(spec: ListingSpec, filters: ListFilters, resolved: _ResolvedFilters) -> Predicate | None:
    """Store predicate for the filters, or None when a slug matches nothing."""
    equals = dict(spec.base_filter)
    contains: dict[str, Any] = {}
    if filters.category:
        if resolved.category is None:
            return None
        equals["category_id"] = resolved.category["id"]
    if filters.tag:
        if resolved.tag is None:
            return None
        contains["tag_ids"] = resolved.tag["id"]
    return Predicate(equals=equals, contains=contains)


async def _count(store: CatalogStore, spec: ListingSpec, predicate: Predicate | None) -> int:
    if predicate is None:
        return 0
    return await store.count_matching(spec.table, predicate)


async def _fetch_page(
    store: CatalogStore,
    spec: ListingSpec,
    filters: ListFilters,
    predicate: Predicate | None,
    page_size: int,
) -> list[Record]:
    if predicate is None:
        return []
    offset, limit = page_bounds(filters.page, page_size)
    return await store.list_matching(
        spec.table, predicate, spec.order_for(filters.sort), offset, limit
    )


async def _listed_categories(store: CatalogStore, spec: ListingSpec) -> list[Record]:
    """Categories, by name, that hold at least one listed record."""
    categories, rows = await asyncio.gather(
        store.list_all(spec.category_table, OrderBy("name")),
        store.list_all(spec.table),
    )
    base = Predicate(equals=spec.base_filter)
    used = {row.get("category_id") for row in rows if base.matches(row)}
    return [category for category in categories if category.get("id") in used]


def _category_links(spec: ListingSpec, filters: ListFilters, categories: list[Record]) -> list[FilterLink]:
    links = [
        FilterLink(
            label="Todas",
            url=spec.codec.category_url(filters, None),
            active=filters.category is None,
        )
    ]
    for category in categories:
        links.append(
            FilterLink(
                label=category["name"],
                value=category["slug"],
                url=spec.codec.category_url(filters, category["slug"]),
                active=filters.category == category["slug"],
            )
        )
    return links


def _sort_links(spec: ListingSpec, filters: ListFilters) -> list[FilterLink]:
    return [
        FilterLink(
            label=label,
            value=sort,
            url=spec.codec.sort_url(filters, sort),
            active=filters.sort == sort,
        )
        for sort, label in spec.copy.sort_options.items()
    ]


async def describe_listing(
    store: CatalogStore,
    spec: ListingSpec,
    filters: ListFilters | Mapping[str, Any],
    *,
    base_url: str,
    page_size: int,
) -> PageMetadata:
    """
    Metadata for a listing view without loading its items.

    This is the metadata-only entry point for callers that render the page
    head separately from the items; the API routes use load_listing, which
    builds the same metadata alongside the page.

    The listing is only counted when the view is past page 1, since that is
    the only case where the title mentions the total.
    """
    filters = spec.codec.coerce(filters)
    resolved = await _resolve(store, spec, filters)

    pages: int | None = None
    if filters.page > 1:
        try:
            count = await _count(store, spec, _predicate(spec, filters, resolved))
        except StoreError as exc:
            logger.warning("Could not count %s for metadata, omitting page total: %s", spec.table, exc)
        else:
            pages = total_pages(count, page_size)

    return describe_for_metadata(
        filters,
        resolved.names,
        codec=spec.codec,
        base_url=base_url,
        total_pages=pages,
        copy=spec.copy,
    )


async def load_listing(
    store: CatalogStore,
    spec: ListingSpec,
    filters: ListFilters | Mapping[str, Any],
    *,
    base_url: str,
    page_size: int,
) -> ListingPage:
    """
    Load one page of a listing with its pager, filter links and metadata.

    A category or tag slug that does not exist keeps its place in the filters
    and simply produces an empty page.
    """
    filters = spec.codec.coerce(filters)
    resolved, categories = await asyncio.gather(
        _resolve(store, spec, filters),
        _listed_categories(store, spec),
    )
    predicate = _predicate(spec, filters, resolved)
    count, rows = await asyncio.gather(
        _count(store, spec, predicate),
        _fetch_page(store, spec, filters, predicate, page_size),
    )
    if predicate is None:
        logger.debug("Unresolved filter slug in %s, listing is empty", filters)

    items = [spec.summarize(row) for row in rows]
    names = resolved.names
    return spec.page_model(
        filters=filters,
        items=items,
        pagination=build_pagination(
            filters, spec.codec, count, page_size, items_on_page=len(items)
        ),
        metadata=describe_for_metadata(
            filters,
            names,
            codec=spec.codec,
            base_url=base_url,
            total_pages=total_pages(count, page_size),
            copy=spec.copy,
        ),
        category_links=_category_links(spec, filters, categories),
        sort_links=_sort_links(spec, filters),
        category_name=names.category_name,
        tag_name=names.tag_name,
    )
