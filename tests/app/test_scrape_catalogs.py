from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path  # noqa: TC003

import pytest

from specref.app import scrape_catalogs
from specref.config.catalogs import CatalogSource
from specref.domain.model import PublisherFamily, RawCatalogItem
from tests.helpers.catalog_items import raw_item

ISO = CatalogSource(
    name="iso_test", family=PublisherFamily.ISO, outfile="iso.json", urls=("https://iso.example",)
)
SCTE = CatalogSource(
    name="scte_test",
    family=PublisherFamily.SCTE,
    outfile="scte.json",
    urls=("https://scte.example",),
)


@dataclass(slots=True)
class FakeFetcher:
    items: list[RawCatalogItem] = field(default_factory=list[RawCatalogItem])
    error: Exception | None = None
    calls: int = 0

    async def fetch(self) -> list[RawCatalogItem]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.items)

    def __call__(self) -> list[RawCatalogItem]:
        raise AssertionError("the app must await fetch()")


def _factory(fetchers: dict[str, FakeFetcher]) -> Callable[[CatalogSource], FakeFetcher]:
    def build(catalog: CatalogSource) -> FakeFetcher:
        return fetchers[catalog.name]

    return build


def test_each_catalog_is_written_to_its_own_file(tmp_path: Path) -> None:
    fetchers = {
        "iso_test": FakeFetcher([raw_item("ISO/IEC 21000-22:2016")]),
        "scte_test": FakeFetcher([raw_item("ANSI/SCTE 24-02 2016")]),
    }

    report = scrape_catalogs(
        [ISO, SCTE], output_dir=tmp_path / "out", fetcher_factory=_factory(fetchers)
    )

    assert report.ok
    assert report.output_dir == (tmp_path / "out").resolve()
    iso_doc = json.loads((tmp_path / "out" / "iso.json").read_text(encoding="utf-8"))
    scte_doc = json.loads((tmp_path / "out" / "scte.json").read_text(encoding="utf-8"))
    assert list(iso_doc) == ["iso21000-22"]
    assert list(scte_doc) == ["scte24-02", "scte24-2"]
    scte_outcome = next(o for o in report.outcomes if o.catalog is SCTE)
    assert scte_outcome.entries == 1
    assert scte_outcome.aliases == 1


def test_failing_catalog_does_not_stop_the_others(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    fetchers = {
        "iso_test": FakeFetcher(error=RuntimeError("catalog page timed out")),
        "scte_test": FakeFetcher([raw_item("SCTE 06 2019")]),
    }

    report = scrape_catalogs([ISO, SCTE], output_dir=tmp_path, fetcher_factory=_factory(fetchers))

    assert not report.ok
    (failed,) = report.failed
    assert failed.catalog is ISO
    assert isinstance(failed.error, RuntimeError)
    assert [outcome.catalog for outcome in report.succeeded] == [SCTE]
    assert not (tmp_path / "iso.json").exists()
    assert (tmp_path / "scte.json").exists()
    assert "Catalog iso_test failed" in caplog.text


def test_empty_catalog_is_reported_as_failure(tmp_path: Path) -> None:
    fetchers = {"iso_test": FakeFetcher([])}

    report = scrape_catalogs([ISO], output_dir=tmp_path, fetcher_factory=_factory(fetchers))

    assert not report.ok
    assert report.outcomes[0].path is None


def test_output_dir_is_emptied_before_scraping(tmp_path: Path) -> None:
    (tmp_path / "removed.json").write_text("{}", encoding="utf-8")
    fetchers = {"scte_test": FakeFetcher([raw_item("SCTE 06 2019")])}

    scrape_catalogs([SCTE], output_dir=tmp_path, fetcher_factory=_factory(fetchers))

    assert sorted(path.name for path in tmp_path.iterdir()) == ["scte.json"]


def test_sequential_mode_keeps_catalog_order(tmp_path: Path) -> None:
    fetchers = {
        "iso_test": FakeFetcher([raw_item("ISO/IEC 21000-22:2016")]),
        "scte_test": FakeFetcher([raw_item("SCTE 06 2019")]),
    }

    report = scrape_catalogs(
        [SCTE, ISO],
        output_dir=tmp_path,
        fetcher_factory=_factory(fetchers),
        concurrent=False,
    )

    assert [outcome.catalog for outcome in report.outcomes] == [SCTE, ISO]
    assert all(fetcher.calls == 1 for fetcher in fetchers.values())
