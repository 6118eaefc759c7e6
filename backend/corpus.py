"""
Paths for the local storefront dataset.

Single source of truth for:
- DATA_DIR   — directory holding local data files
- STORE_FILE — JSON document with the categories/tags/products/articles tables,
               written by seed.py and read by the API
"""

from pathlib import Path

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
STORE_FILE: Path = DATA_DIR / "store.json"
