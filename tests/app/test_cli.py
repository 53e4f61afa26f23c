from __future__ import annotations

import logging
from pathlib import Path

import pytest

from specref.app import CatalogOutcome, ScrapeReport
from specref.config.catalogs import DEFAULT_CATALOGS, CatalogSource
from specref.ui import cli


def _install_fake_scrape(
    monkeypatch: pytest.MonkeyPatch, *, error: Exception | None = None
) -> dict[str, object]:
    captured: dict[str, object] = {}

    def fake_scrape(catalogs: tuple[CatalogSource, ...], **kwargs: object) -> ScrapeReport:
        captured["catalogs"] = catalogs
        captured.update(kwargs)
        outcomes = tuple(CatalogOutcome(catalog=catalog, error=error) for catalog in catalogs)
        return ScrapeReport(output_dir=Path("SpecRef"), outcomes=outcomes)

    monkeypatch.setattr(cli, "scrape_catalogs", fake_scrape)
    return captured


def test_scrape_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _install_fake_scrape(monkeypatch)

    cli.main(["scrape"])

    assert captured["catalogs"] == DEFAULT_CATALOGS
    assert captured["output_dir"] is None
    assert captured["concurrent"] is True


def test_scrape_with_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _install_fake_scrape(monkeypatch)

    cli.main(["scrape", "--catalog", "scte", "--catalog", "etsi", "--output-dir", "out", "-v"])

    catalogs = captured["catalogs"]
    assert isinstance(catalogs, tuple)
    assert [catalog.name for catalog in catalogs] == ["etsi", "scte"]
    assert captured["output_dir"] == "out"

    cli.main(["scrape", "--sequential"])

    assert captured["concurrent"] is False


def test_failed_catalog_exits_with_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_fake_scrape(monkeypatch, error=RuntimeError("boom"))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["scrape", "--catalog", "scte"])

    assert excinfo.value.code == 1


def test_unknown_catalog_is_a_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _install_fake_scrape(monkeypatch)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["scrape", "--catalog", "ieee"])

    assert excinfo.value.code == 2
    assert captured == {}


def test_missing_command_is_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2


def test_catalogs_command_lists_sources(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="specref.ui.cli"):
        cli.main(["catalogs"])

    for catalog in DEFAULT_CATALOGS:
        assert catalog.name in caplog.text
        assert catalog.outfile in caplog.text
