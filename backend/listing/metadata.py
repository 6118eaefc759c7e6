"""
SEO metadata for listing pages: title, description, robots and canonical URL.

Sorted views are duplicates of the default ordering, so they are marked
noindex/nofollow and carry no canonical link; every other view is indexable
and points at its own canonical URL.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from models import ListFilters, PageMetadata, Robots

from .codec import BLOG_LISTING, PRODUCT_LISTING, ListingCodec

TITLE_SUFFIX = " | Grimmiz"


@dataclass(frozen=True)
class ResolvedNames:
    """Display names for the filter slugs; None when a slug did not resolve."""

    category_name: str | None = None
    tag_name: str | None = None


@dataclass(frozen=True)
class ListingCopy:
    """Wording used for one listing's titles and descriptions."""

    site_name: str
    item_noun: str
    default_description: str
    category_description: str
    tag_description: str
    category_tag_description: str
    # Phrase appended to descriptions of sorted views.
    sort_labels: dict[str, str] = field(default_factory=dict)
    # Text of the sort selector entries, in display order.
    sort_options: dict[str, str] = field(default_factory=dict)

    def describe_filters(self, names: ResolvedNames) -> str:
        category = names.category_name.lower() if names.category_name else None
        tag = names.tag_name.lower() if names.tag_name else None
        if category and tag:
            return self.category_tag_description.format(category=category, tag=tag)
        if category:
            return self.category_description.format(category=category)
        if tag:
            return self.tag_description.format(tag=tag)
        return self.default_description


PRODUCT_COPY = ListingCopy(
    site_name="Mundo Grimmiz",
    item_noun="Productos",
    default_description=(
        "Explora nuestra colección completa de productos hechos a mano con amor "
        "en Mundo Grimmiz."
    ),
    category_description="Descubre todos nuestros productos de {category} en Mundo Grimmiz.",
    tag_description="Explora productos sobre {tag} en Mundo Grimmiz.",
    category_tag_description="Descubre nuestros productos de {category} sobre {tag} en Mundo Grimmiz.",
    sort_labels={
        "antiguos": "más antiguos primero",
        "precio-asc": "ordenados por precio, de menor a mayor",
        "precio-desc": "ordenados por precio, de mayor a menor",
        "titulo-asc": "ordenados por título (A-Z)",
        "titulo-desc": "ordenados por título (Z-A)",
    },
    sort_options={
        "recientes": "Más recientes",
        "antiguos": "Más antiguos",
        "precio-asc": "Precio: menor a mayor",
        "precio-desc": "Precio: mayor a menor",
        "titulo-asc": "Título (A-Z)",
        "titulo-desc": "Título (Z-A)",
    },
)

BLOG_COPY = ListingCopy(
    site_name="Diario Grimmiz",
    item_noun="Artículos",
    default_description=(
        "Descubre historias, tutoriales y novedades del mundo de las manualidades "
        "en el Diario Grimmiz."
    ),
    category_description="Artículos de {category} en el Diario Grimmiz.",
    tag_description="Explora artículos sobre {tag} en el Diario Grimmiz.",
    category_tag_description="Artículos de {category} sobre {tag} en el Diario Grimmiz.",
    sort_labels={
        "antiguos": "más antiguos primero",
        "titulo-asc": "ordenados por título (A-Z)",
        "titulo-desc": "ordenados por título (Z-A)",
    },
    sort_options={
        "recientes": "Más recientes",
        "antiguos": "Más antiguos",
        "titulo-asc": "Título (A-Z)",
        "titulo-desc": "Título (Z-A)",
    },
)

_COPY_BY_BASE_PATH = {
    PRODUCT_LISTING.base_path: PRODUCT_COPY,
    BLOG_LISTING.base_path: BLOG_COPY,
}


def copy_for(codec: ListingCodec) -> ListingCopy:
    return _COPY_BY_BASE_PATH[codec.base_path]


def build_title(
    filters: ListFilters,
    names: ResolvedNames,
    copy: ListingCopy,
    total_pages: int | None,
) -> str:
    title = names.category_name or copy.site_name
    if names.tag_name:
        title += f" #{names.tag_name}"
    if filters.page > 1 and total_pages is not None:
        title += f" - página {filters.page} de {total_pages}"
    return title + TITLE_SUFFIX


def build_description(
    filters: ListFilters,
    names: ResolvedNames,
    copy: ListingCopy,
    total_pages: int | None,
) -> str:
    description = copy.describe_filters(names)
    if filters.has_custom_sort:
        label = copy.sort_labels.get(filters.sort, f"ordenados por {filters.sort}")
        description += f" {copy.item_noun} {label}."
    if filters.page > 1 and total_pages is not None:
        description += f" Página {filters.page} de {total_pages}."
    return description


def describe_for_metadata(
    filters: ListFilters,
    names: ResolvedNames | None = None,
    *,
    codec: ListingCodec,
    base_url: str,
    total_pages: int | None = None,
    copy: ListingCopy | None = None,
) -> PageMetadata:
    """
    Build the <head> metadata for a listing view.

    `total_pages` is None when the caller could not count the listing; the
    "página N de M" parts are then left out instead of guessing M.
    """
    names = names or ResolvedNames()
    copy = copy or copy_for(codec)
    indexable = not filters.has_custom_sort
    canonical = base_url.rstrip("/") + codec.build_list_url(filters) if indexable else None

    return PageMetadata(
        title=build_title(filters, names, copy, total_pages),
        description=build_description(filters, names, copy, total_pages),
        robots=Robots(index=indexable, follow=indexable),
        canonical=canonical,
    )
