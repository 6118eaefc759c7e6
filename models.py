import re
from typing import Any, ClassVar, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ProductSort = Literal[
    "recientes",
    "antiguos",
    "precio-asc",
    "precio-desc",
    "titulo-asc",
    "titulo-desc",
]
BlogSort = Literal["recientes", "antiguos", "titulo-asc", "titulo-desc"]

PRODUCT_SORTS: tuple[str, ...] = get_args(ProductSort)
BLOG_SORTS: tuple[str, ...] = get_args(BlogSort)
DEFAULT_SORT = "recientes"

_PAGE_PATTERN = re.compile(r"[0-9]+")


def coerce_page(value: object) -> int:
    """
    Turn a raw page value (int, or string from a URL) into a page number >= 1.
    Anything that is not a positive integer collapses to 1.
    """
    if isinstance(value, bool):
        return 1
    if isinstance(value, int):
        return value if value >= 1 else 1
    if isinstance(value, str):
        raw = value.strip()
        if _PAGE_PATTERN.fullmatch(raw):
            try:
                page = int(raw)
            except ValueError:
                # Past the interpreter's digit limit for int().
                return 1
            return page if page >= 1 else 1
    return 1


def _single_value(value: object) -> object:
    """Repeated query parameters arrive as lists; the last one wins."""
    if isinstance(value, (list, tuple)):
        return value[-1] if value else None
    return value


class ListFilters(BaseModel):
    """
    What a listing page is showing: category, tag, sort order and page.

    Built fresh per request and never persisted. Invalid input is coerced to
    defaults instead of rejected, so every instance is a valid filter state.
    """

    model_config = ConfigDict(frozen=True)

    category: str | None = None
    tag: str | None = None
    sort: str = DEFAULT_SORT
    page: int = 1

    # Overridden by each listing.
    sort_choices: ClassVar[tuple[str, ...]] = ()

    @field_validator("category", "tag", mode="before")
    @classmethod
    def _blank_slug_is_absent(cls, v: object) -> str | None:
        v = _single_value(v)
        if isinstance(v, int) and not isinstance(v, bool):
            v = str(v)
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return None

    @field_validator("page", mode="before")
    @classmethod
    def _coerce_page(cls, v: object) -> int:
        return coerce_page(_single_value(v))

    @field_validator("sort", mode="before")
    @classmethod
    def _fallback_sort(cls, v: object) -> str:
        v = _single_value(v)
        if isinstance(v, str) and v in cls.sort_choices:
            return v
        return DEFAULT_SORT

    @property
    def has_custom_sort(self) -> bool:
        return self.sort != DEFAULT_SORT

    def filter_fields(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "tag": self.tag,
            "sort": self.sort,
            "page": self.page,
        }


class ProductFilters(ListFilters):
    sort_choices: ClassVar[tuple[str, ...]] = PRODUCT_SORTS


class BlogFilters(ListFilters):
    sort_choices: ClassVar[tuple[str, ...]] = BLOG_SORTS


# ---------------------------------------------------------------------------
# Store records
# ---------------------------------------------------------------------------

class Category(BaseModel):
    id: int
    name: str
    slug: str


class Tag(BaseModel):
    id: int
    name: str
    slug: str


class Product(BaseModel):
    id: int
    title: str
    slug: str
    description: str = ""
    price: float = 0.0
    main_image_url: str | None = None
    category_id: int | None = None
    tag_ids: list[int] = Field(default_factory=list)
    created_at: str
    updated_at: str

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price_string(cls, v: object) -> object:
        """Prices exported from the back office may arrive as "24,50" or "24.50 €"."""
        if v is None:
            return 0.0
        if isinstance(v, str):
            match = re.search(r"\d+(?:[.,]\d+)?", v.replace("\xa0", " "))
            if match:
                return float(match.group().replace(",", "."))
        return v


class Article(BaseModel):
    id: int
    title: str
    slug: str
    excerpt: str = ""
    content: str = ""
    main_image_url: str | None = None
    category_id: int | None = None
    tag_ids: list[int] = Field(default_factory=list)
    published: bool = False
    created_at: str
    updated_at: str


class ProductSummary(BaseModel):
    id: int
    name: str
    slug: str
    price: float
    image_url: str | None = None
    description: str = ""


class ArticleSummary(BaseModel):
    id: int
    title: str
    slug: str
    excerpt: str = ""
    image_url: str | None = None
    created_at: str


# ---------------------------------------------------------------------------
# Page metadata and listing pages
# ---------------------------------------------------------------------------

class Robots(BaseModel):
    index: bool
    follow: bool


class PageMetadata(BaseModel):
    title: str
    description: str
    robots: Robots
    canonical: str | None = None

    @model_validator(mode="after")
    def _canonical_only_when_indexable(self) -> "PageMetadata":
        """A page is either indexable with a canonical URL or noindex without one."""
        if self.robots.index and self.canonical is None:
            raise ValueError("indexable pages must declare a canonical URL")
        if not self.robots.index and self.canonical is not None:
            raise ValueError("noindex pages must not declare a canonical URL")
        return self


class PageLink(BaseModel):
    # None marks an ellipsis between page links.
    number: int | None
    url: str | None = None
    current: bool = False


class Pagination(BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    page_size: int
    first_item: int
    last_item: int
    previous_url: str | None = None
    next_url: str | None = None
    pages: list[PageLink] = Field(default_factory=list)


class FilterLink(BaseModel):
    label: str
    value: str | None = None
    url: str
    active: bool = False


class ListingPage(BaseModel):
    metadata: PageMetadata
    pagination: Pagination
    category_links: list[FilterLink] = Field(default_factory=list)
    sort_links: list[FilterLink] = Field(default_factory=list)
    category_name: str | None = None
    tag_name: str | None = None


class ProductListingPage(ListingPage):
    filters: ProductFilters
    items: list[ProductSummary] = Field(default_factory=list)


class ArticleListingPage(ListingPage):
    filters: BlogFilters
    items: list[ArticleSummary] = Field(default_factory=list)
