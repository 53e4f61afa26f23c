"""Select the catalog fetcher for a configured source."""

from __future__ import annotations

from typing import TYPE_CHECKING

from specref.adapters.etsi import EtsiCatalogFetcher
from specref.adapters.iso import IsoCatalogFetcher
from specref.adapters.scte import ScteCatalogFetcher
from specref.config.publishers import get_publisher_resilience
from specref.domain.model import PublisherFamily

if TYPE_CHECKING:
    from specref.config.catalogs import CatalogSource
    from specref.config.storage import StorageConfig
    from specref.domain.ports import CatalogFetcher


def build_catalog_fetcher(
    source: CatalogSource,
    *,
    storage: StorageConfig | None = None,
) -> CatalogFetcher:
    resilience = get_publisher_resilience(source.family, storage=storage)
    match source.family:
        case PublisherFamily.ISO:
            return IsoCatalogFetcher(urls=source.urls, resilience=resilience)
        case PublisherFamily.ETSI:
            return EtsiCatalogFetcher(urls=source.urls, resilience=resilience)
        case PublisherFamily.SCTE:
            return ScteCatalogFetcher(urls=source.urls, resilience=resilience)
