from .codec import (
    BLOG_LISTING,
    PRODUCT_LISTING,
    ListingCodec,
    build_blog_list_url,
    build_product_list_url,
    parse_blog_list_url,
    parse_product_list_url,
)
from .metadata import BLOG_COPY, PRODUCT_COPY, ListingCopy, ResolvedNames, describe_for_metadata
from .service import (
    BLOG_LISTING_SPEC,
    PRODUCT_LISTING_SPEC,
    ListingSpec,
    describe_listing,
    load_listing,
    resolve_names,
)

__all__ = [
    "BLOG_COPY",
    "BLOG_LISTING",
    "BLOG_LISTING_SPEC",
    "PRODUCT_COPY",
    "PRODUCT_LISTING",
    "PRODUCT_LISTING_SPEC",
    "ListingCodec",
    "ListingCopy",
    "ListingSpec",
    "ResolvedNames",
    "build_blog_list_url",
    "build_product_list_url",
    "describe_for_metadata",
    "describe_listing",
    "load_listing",
    "parse_blog_list_url",
    "parse_product_list_url",
    "resolve_names",
]
