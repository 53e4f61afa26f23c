"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import CatalogFetcher

__all__ = ["CatalogFetcher"]
