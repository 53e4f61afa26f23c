"""Catalog sources to scrape, one registry file per source."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Final

from specref.domain.model import PublisherFamily

from .env import get_env_list
from .errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class CatalogSource:
    """A named publisher catalog and the pages it is listed on.

    Pages are fetched in order; their items share one running sort index.
    """

    name: str
    family: PublisherFamily
    outfile: str
    urls: tuple[str, ...]

    @property
    def env_prefix(self) -> str:
        return f"SPECREF_{self.name.upper()}"


# Listed explicitly: every page must include withdrawn and deleted documents so
# they can be marked instead of disappearing from the registry.
DEFAULT_CATALOGS: Final[tuple[CatalogSource, ...]] = (
    # ISO/IEC JTC 1/SC 29 Coding of audio, picture, multimedia and hypermedia information
    CatalogSource(
        name="iso_jtc1_sc29",
        family=PublisherFamily.ISO,
        outfile="iso_jtc1_sc29.json",
        urls=("https://www.iso.org/committee/45316/x/catalogue/p/1/u/1/w/1/d/1",),
    ),
    CatalogSource(
        name="etsi",
        family=PublisherFamily.ETSI,
        outfile="etsi.json",
        urls=(
            "https://www.etsi.org/?option=com_standardssearch&view=data&format=csv"
            "&published=1&onApproval=1&withdrawn=1&historical=1&page=1",
        ),
    ),
    CatalogSource(
        name="scte",
        family=PublisherFamily.SCTE,
        outfile="scte.json",
        urls=("https://www.scte.org/wp-json/scte/v1/standards",),
    ),
)


def catalog_names(catalogs: Iterable[CatalogSource] = DEFAULT_CATALOGS) -> tuple[str, ...]:
    return tuple(catalog.name for catalog in catalogs)


def select_catalogs(
    names: Iterable[str] | None,
    catalogs: Iterable[CatalogSource] = DEFAULT_CATALOGS,
) -> tuple[CatalogSource, ...]:
    """Return the catalogs named in ``names`` in configured order (all when ``None``)."""

    available = tuple(catalogs)
    if names is None:
        return available
    requested = {name.strip().lower() for name in names}
    unknown = requested - {catalog.name for catalog in available}
    if unknown:
        allowed = ", ".join(catalog_names(available))
        raise ConfigurationError(
            f"Unknown catalog(s): {', '.join(sorted(unknown))} (available: {allowed})"
        )
    return tuple(catalog for catalog in available if catalog.name in requested)


def get_catalogs(names: Iterable[str] | None = None) -> tuple[CatalogSource, ...]:
    """Resolve the catalogs for this run.

    ``names`` (from the command line) wins over ``SPECREF_CATALOGS``. Each
    catalog's page list can be replaced with ``SPECREF_<NAME>_URLS``.
    """

    selected = select_catalogs(names if names else get_env_list("SPECREF_CATALOGS"))
    resolved: list[CatalogSource] = []
    for catalog in selected:
        urls = get_env_list(f"{catalog.env_prefix}_URLS")
        resolved.append(replace(catalog, urls=urls) if urls else catalog)
    return tuple(resolved)
