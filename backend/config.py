"""Site configuration, read from environment variables with safe defaults."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from backend.corpus import STORE_FILE


def _read_env_int(name: str, default: int) -> int:
    """Read env var as a positive int; return default if unset or invalid."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _read_env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


@dataclass(frozen=True)
class SiteConfig:
    """Public site URL, page sizes and store location. Overridable via env vars."""

    site_url: str = "http://localhost:3000"
    catalog_page_size: int = 12
    blog_page_size: int = 12
    store_file: Path = STORE_FILE

    @classmethod
    def from_env(cls) -> "SiteConfig":
        return cls(
            site_url=_read_env_str("SITE_URL", "http://localhost:3000").rstrip("/"),
            catalog_page_size=_read_env_int("CATALOG_PAGE_SIZE", 12),
            blog_page_size=_read_env_int("BLOG_PAGE_SIZE", 12),
            store_file=Path(_read_env_str("GRIMMIZ_STORE_FILE", str(STORE_FILE))),
        )
