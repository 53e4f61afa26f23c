"""Public interface for the ETSI catalog adapter."""

from __future__ import annotations

from .fetcher import EtsiCatalogFetcher
from .translator import translate_catalog_export

__all__ = ["EtsiCatalogFetcher", "translate_catalog_export"]
