"""Ports for fetching publisher catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from specref.domain.model import RawCatalogItem


@runtime_checkable
class CatalogFetcher(Protocol):
    """Retrieve one publisher catalog as raw items in catalog order."""

    async def fetch(self) -> list[RawCatalogItem]: ...

    def __call__(self) -> list[RawCatalogItem]: ...


__all__ = ["CatalogFetcher"]
