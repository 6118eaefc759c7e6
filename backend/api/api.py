"""
Read-only storefront API: product catalog and blog listings.

Listing routes take their filters from path segments
(/mundo-grimmiz/categoria/<slug>/etiqueta/<slug>/orden/<sort>/pagina/<n>).
Requests still using the old query-string filters are permanently redirected
to the canonical path and never rendered.
"""

import logging
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from backend.config import SiteConfig
from backend.listing import BLOG_LISTING_SPEC, PRODUCT_LISTING_SPEC, ListingSpec, load_listing
from backend.store import ARTICLES, PRODUCTS, CatalogStore, JsonFileStore, StoreError
from models import Article, ArticleListingPage, Product, ProductListingPage

logger = logging.getLogger(__name__)

app = FastAPI(title="Grimmiz Storefront API")


@lru_cache(maxsize=1)
def get_config() -> SiteConfig:
    return SiteConfig.from_env()


@lru_cache(maxsize=4)
def _load_store(path: Path) -> JsonFileStore:
    return JsonFileStore.from_path(path)


def get_store(config: SiteConfig = Depends(get_config)) -> CatalogStore:
    try:
        return _load_store(config.store_file)
    except StoreError as exc:
        logger.error("Store unavailable: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Catalog store unavailable"
        ) from exc


async def _listing(
    request: Request,
    filters: str,
    spec: ListingSpec,
    store: CatalogStore,
    base_url: str,
    page_size: int,
):
    codec = spec.codec
    if codec.is_legacy_query_request(request.query_params):
        target = codec.build_list_url(codec.translate_legacy_query(request.query_params))
        logger.debug("Redirecting legacy listing URL %s -> %s", request.url, target)
        return RedirectResponse(target, status_code=status.HTTP_301_MOVED_PERMANENTLY)

    state = codec.parse_list_url(filters.split("/"))
    return await load_listing(store, spec, state, base_url=base_url, page_size=page_size)


@app.get("/mundo-grimmiz/producto/{slug}", response_model=Product)
async def get_product(slug: str, store: CatalogStore = Depends(get_store)) -> Product:
    record = await store.find_by_slug(PRODUCTS, slug)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Product '{slug}' not found")
    return Product.model_validate(record)


@app.get("/mundo-grimmiz", response_model=ProductListingPage)
async def list_all_products(
    request: Request,
    store: CatalogStore = Depends(get_store),
    config: SiteConfig = Depends(get_config),
):
    return await list_products(request, "", store, config)


@app.get("/mundo-grimmiz/{filters:path}", response_model=ProductListingPage)
async def list_products(
    request: Request,
    filters: str,
    store: CatalogStore = Depends(get_store),
    config: SiteConfig = Depends(get_config),
):
    return await _listing(
        request, filters, PRODUCT_LISTING_SPEC, store, config.site_url, config.catalog_page_size
    )


@app.get("/diario-grimmiz/articulo/{slug}", response_model=Article)
async def get_article(slug: str, store: CatalogStore = Depends(get_store)) -> Article:
    record = await store.find_by_slug(ARTICLES, slug)
    if record is None or not record.get("published"):
        raise HTTPException(status_code=404, detail=f"Article '{slug}' not found")
    return Article.model_validate(record)


@app.get("/diario-grimmiz", response_model=ArticleListingPage)
async def list_all_articles(
    request: Request,
    store: CatalogStore = Depends(get_store),
    config: SiteConfig = Depends(get_config),
):
    return await list_articles(request, "", store, config)


@app.get("/diario-grimmiz/{filters:path}", response_model=ArticleListingPage)
async def list_articles(
    request: Request,
    filters: str,
    store: CatalogStore = Depends(get_store),
    config: SiteConfig = Depends(get_config),
):
    return await _listing(
        request, filters, BLOG_LISTING_SPEC, store, config.site_url, config.blog_page_size
    )
