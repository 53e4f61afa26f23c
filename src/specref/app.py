"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, TypeAlias

from specref.adapters.fetchers import build_catalog_fetcher
from specref.adapters.output import prepare_output_dir, write_registry
from specref.config.catalogs import get_catalogs
from specref.config.storage import get_storage_config
from specref.domain.identity import ResolutionEngine
from specref.domain.model import profile_for

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from specref.config.catalogs import CatalogSource
    from specref.domain.ports import CatalogFetcher

FetcherFactory: TypeAlias = "Callable[[CatalogSource], CatalogFetcher]"

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class CatalogOutcome:
    catalog: CatalogSource
    path: Path | None = None
    entries: int = 0
    aliases: int = 0
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True, frozen=True)
class ScrapeReport:
    output_dir: Path
    outcomes: tuple[CatalogOutcome, ...] = ()

    @property
    def succeeded(self) -> tuple[CatalogOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if outcome.ok)

    @property
    def failed(self) -> tuple[CatalogOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.ok)

    @property
    def ok(self) -> bool:
        return not self.failed


async def scrape_catalog(
    catalog: CatalogSource,
    *,
    output_dir: Path,
    fetcher: CatalogFetcher,
) -> CatalogOutcome:
    """Fetch, resolve and write one catalog; failures are returned, not raised."""

    engine = ResolutionEngine(profile_for(catalog.family))
    try:
        items = await fetcher.fetch()
        registry = engine.resolve(items)
        path = write_registry(registry, output_dir / catalog.outfile)
    except Exception as exc:  # noqa: BLE001
        log.exception("Catalog %s failed", catalog.name)
        return CatalogOutcome(catalog=catalog, error=exc)
    return CatalogOutcome(
        catalog=catalog,
        path=path,
        entries=len(registry),
        aliases=len(registry.aliases),
    )


async def scrape_catalogs_async(
    catalogs: Iterable[CatalogSource],
    *,
    output_dir: Path,
    fetcher_factory: FetcherFactory,
    concurrent: bool = True,
) -> ScrapeReport:
    selected = tuple(catalogs)
    prepare_output_dir(output_dir)

    if concurrent:
        outcomes = await asyncio.gather(
            *(
                scrape_catalog(catalog, output_dir=output_dir, fetcher=fetcher_factory(catalog))
                for catalog in selected
            )
        )
    else:
        outcomes = [
            await scrape_catalog(catalog, output_dir=output_dir, fetcher=fetcher_factory(catalog))
            for catalog in selected
        ]
    return ScrapeReport(output_dir=output_dir, outcomes=tuple(outcomes))


def scrape_catalogs(
    catalogs: Iterable[CatalogSource] | None = None,
    *,
    output_dir: Path | str | None = None,
    fetcher_factory: FetcherFactory | None = None,
    concurrent: bool = True,
) -> ScrapeReport:
    """Scrape every configured catalog into its own registry file.

    The output directory is emptied first. A failing catalog is logged and
    reported without stopping the others.
    """

    storage = get_storage_config(output_dir=output_dir)
    selected = tuple(catalogs) if catalogs is not None else get_catalogs()
    effective_factory = fetcher_factory or (
        lambda catalog: build_catalog_fetcher(catalog, storage=storage)
    )
    log.info(
        "Starting scrape: catalogs=%s, concurrent=%s",
        ", ".join(catalog.name for catalog in selected),
        concurrent,
    )

    report = asyncio.run(
        scrape_catalogs_async(
            selected,
            output_dir=storage.resolve_output_dir(),
            fetcher_factory=effective_factory,
            concurrent=concurrent,
        )
    )

    log.info(
        "Finished scrape: succeeded=%s, failed=%s, output=%s",
        len(report.succeeded),
        len(report.failed),
        report.output_dir,
    )
    return report
