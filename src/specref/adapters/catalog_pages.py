"""Shared page loop for catalog fetchers."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from specref.adapters.http_resilience import ResilientClient
    from specref.domain.model import RawCatalogItem

log = getLogger(__name__)


class CatalogFormatError(RuntimeError):
    """Raised when a catalog page does not have the expected structure."""

    def __init__(self, message: str, *, url: str, fragment: str | None = None) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url
        self.fragment = fragment


class PageTranslator(Protocol):
    def __call__(
        self, text: str, *, page_url: str, start_index: int
    ) -> list[RawCatalogItem]: ...


async def fetch_catalog_pages(
    client: ResilientClient,
    urls: Sequence[str],
    translate: PageTranslator,
) -> list[RawCatalogItem]:
    """Fetch ``urls`` in order and translate each page into raw items.

    Sort indexes continue across pages, starting at 1.
    """

    items: list[RawCatalogItem] = []
    for url in urls:
        log.info("Loading catalog page: %s", url)
        text = await client.get_text(url)
        page_items = translate(text, page_url=url, start_index=len(items) + 1)
        log.info("Found %s documents on %s", len(page_items), url)
        items.extend(page_items)
    return items
