"""
Canonical listing URLs <-> filter state.

Listing pages encode their filters as keyword/value path segments after the
listing's base path, always emitted in the same order and only when they
differ from the default:

    /mundo-grimmiz/categoria/figuras/etiqueta/navidad/orden/precio-asc/pagina/2

Parsing accepts the groups in any order and never fails: unknown keywords,
dangling keywords and invalid values are dropped or defaulted so a stale link
still lands on a listing. Every normalized filter state has exactly one URL,
which is what search engines get as the canonical link.

The old `?categoria=&etiqueta=&orden=&pagina=` query shape is still accepted,
but only so the HTTP layer can answer it with a permanent redirect.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from models import BlogFilters, DEFAULT_SORT, ListFilters, ProductFilters

CATEGORY_KEYWORD = "categoria"
TAG_KEYWORD = "etiqueta"
SORT_KEYWORD = "orden"
PAGE_KEYWORD = "pagina"

# Canonical emission order.
_KEYWORD_TO_FIELD: dict[str, str] = {
    CATEGORY_KEYWORD: "category",
    TAG_KEYWORD: "tag",
    SORT_KEYWORD: "sort",
    PAGE_KEYWORD: "page",
}


@dataclass(frozen=True)
class ListingCodec:
    """Maps one listing's filter state to and from its canonical path."""

    base_path: str
    filters_model: type[ListFilters]

    def parse_list_url(self, segments: Iterable[str]) -> ListFilters:
        """
        Parse path segments (already split on "/") into a filter state.

        A keyword followed by another segment consumes it as its value; any
        other segment is skipped on its own. The first occurrence of a
        keyword wins.
        """
        parts = [segment for segment in segments if segment]
        raw: dict[str, str] = {}
        i = 0
        while i < len(parts):
            field_name = _KEYWORD_TO_FIELD.get(parts[i])
            if field_name is None or i + 1 >= len(parts):
                i += 1
                continue
            raw.setdefault(field_name, parts[i + 1])
            i += 2
        return self.filters_model.model_validate(raw)

    def build_list_url(self, filters: ListFilters | Mapping[str, Any] | None = None) -> str:
        """Canonical path for a filter state; default-valued groups are omitted."""
        state = self.coerce(filters)
        segments = [self.base_path.rstrip("/")]
        if state.category:
            segments += [CATEGORY_KEYWORD, state.category]
        if state.tag:
            segments += [TAG_KEYWORD, state.tag]
        if state.sort != DEFAULT_SORT:
            segments += [SORT_KEYWORD, state.sort]
        if state.page > 1:
            segments += [PAGE_KEYWORD, str(state.page)]
        return "/".join(segments) or "/"

    def segments_of(self, path: str) -> list[str]:
        """Split a listing path back into the filter segments after the base path."""
        base = self.base_path.rstrip("/")
        path = path.split("?", 1)[0].split("#", 1)[0]
        if path == base:
            path = ""
        elif base and path.startswith(base + "/"):
            path = path[len(base) + 1 :]
        return [segment for segment in path.split("/") if segment]

    def is_legacy_query_request(self, query: Mapping[str, Any]) -> bool:
        return any(keyword in query for keyword in _KEYWORD_TO_FIELD)

    def translate_legacy_query(self, query: Mapping[str, Any]) -> ListFilters:
        raw = {
            field_name: query[keyword]
            for keyword, field_name in _KEYWORD_TO_FIELD.items()
            if keyword in query
        }
        return self.filters_model.model_validate(raw)

    def coerce(self, filters: ListFilters | Mapping[str, Any] | None) -> ListFilters:
        """Accept a filter model or a mapping of (partial) fields."""
        if filters is None:
            return self.filters_model()
        if isinstance(filters, self.filters_model):
            return filters
        if isinstance(filters, ListFilters):
            return self.filters_model.model_validate(filters.filter_fields())
        return self.filters_model.model_validate(dict(filters))

    # ------------------------------------------------------------------
    # Navigation helpers used by pagers and filter controls
    # ------------------------------------------------------------------

    def page_url(self, filters: ListFilters, page: int) -> str:
        return self.build_list_url(self._replace(filters, page=page))

    def sort_url(self, filters: ListFilters, sort: str) -> str:
        return self.build_list_url(self._replace(filters, sort=sort, page=1))

    def category_url(self, filters: ListFilters, category: str | None) -> str:
        return self.build_list_url(self._replace(filters, category=category, page=1))

    def tag_url(self, filters: ListFilters, tag: str | None) -> str:
        return self.build_list_url(self._replace(filters, tag=tag, page=1))

    def _replace(self, filters: ListFilters, **changes: Any) -> ListFilters:
        # model_copy skips validation, so rebuild through the model.
        fields = self.coerce(filters).filter_fields()
        fields.update(changes)
        return self.filters_model.model_validate(fields)


PRODUCT_LISTING = ListingCodec(base_path="/mundo-grimmiz", filters_model=ProductFilters)
BLOG_LISTING = ListingCodec(base_path="/diario-grimmiz", filters_model=BlogFilters)


def parse_product_list_url(segments: Iterable[str] = ()) -> ProductFilters:
    return PRODUCT_LISTING.parse_list_url(segments)


def build_product_list_url(filters: ProductFilters | Mapping[str, Any] | None = None) -> str:
    return PRODUCT_LISTING.build_list_url(filters)


def parse_blog_list_url(segments: Iterable[str] = ()) -> BlogFilters:
    return BLOG_LISTING.parse_list_url(segments)


def build_blog_list_url(filters: BlogFilters | Mapping[str, Any] | None = None) -> str:
    return BLOG_LISTING.build_list_url(filters)
