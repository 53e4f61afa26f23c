"""ETSI deliverables fetcher."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field

from specref.adapters.catalog_pages import fetch_catalog_pages
from specref.adapters.http_resilience import ResilientClient, default_client_factory
from specref.config.http_resilience import ResilienceConfig
from specref.config.publishers import get_publisher_resilience
from specref.domain.model import PublisherFamily, RawCatalogItem

from .translator import translate_catalog_export


def _default_resilience() -> ResilienceConfig:
    return get_publisher_resilience(PublisherFamily.ETSI)


@dataclass(slots=True)
class EtsiCatalogFetcher:
    urls: tuple[str, ...]
    resilience: ResilienceConfig = field(default_factory=_default_resilience)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=default_client_factory
    )

    def __call__(self) -> list[RawCatalogItem]:
        return asyncio.run(self.fetch())

    async def fetch(self) -> list[RawCatalogItem]:
        async with self.client_factory(self.resilience) as client:
            return await fetch_catalog_pages(client, self.urls, translate_catalog_export)
