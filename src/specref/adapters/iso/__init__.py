"""Public interface for the ISO/IEC catalogue adapter."""

from __future__ import annotations

from .fetcher import IsoCatalogFetcher
from .translator import translate_catalog_page, translate_catalog_row

__all__ = ["IsoCatalogFetcher", "translate_catalog_page", "translate_catalog_row"]
