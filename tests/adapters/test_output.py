from __future__ import annotations

import json
from pathlib import Path

import pytest

from specref.adapters.output import prepare_output_dir, render_registry, write_registry
from specref.domain.identity import ResolutionEngine
from specref.domain.model import SCTE_PROFILE
from tests.helpers.catalog_items import raw_item


def test_prepare_output_dir_removes_previous_run(tmp_path: Path) -> None:
    output = tmp_path / "SpecRef"
    output.mkdir()
    (output / "stale.json").write_text("{}", encoding="utf-8")
    (output / "nested").mkdir()

    result = prepare_output_dir(output)

    assert result == output
    assert output.is_dir()
    assert list(output.iterdir()) == []


def test_prepare_output_dir_creates_missing_parents(tmp_path: Path) -> None:
    output = tmp_path / "a" / "b"

    prepare_output_dir(output)

    assert output.is_dir()


def test_write_registry_emits_indented_utf8_without_bom(tmp_path: Path) -> None:
    registry = ResolutionEngine(SCTE_PROFILE).resolve(
        [raw_item("ANSI/SCTE 24-02 2016", summary="Codec für Sprache")]
    )

    path = write_registry(registry, tmp_path / "scte.json")

    raw = path.read_bytes()
    assert not raw.startswith(b"\xef\xbb\xbf")
    text = raw.decode("utf-8")
    assert "für" in text
    assert '\n  "scte24-02": {' in text
    assert text == render_registry(registry)
    assert json.loads(text) == registry.to_document()


def test_interrupted_write_leaves_no_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    registry = ResolutionEngine(SCTE_PROFILE).resolve([raw_item("ANSI/SCTE 24-02 2016")])

    def fail_replace(self: Path, target: Path) -> Path:
        raise OSError("disk full")

    monkeypatch.setattr(Path, "replace", fail_replace)

    with pytest.raises(OSError, match="disk full"):
        write_registry(registry, tmp_path / "scte.json")

    assert list(tmp_path.iterdir()) == []


def test_write_registry_overwrites_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "scte.json"
    target.write_text("stale", encoding="utf-8")
    registry = ResolutionEngine(SCTE_PROFILE).resolve([raw_item("ANSI/SCTE 24-02 2016")])

    write_registry(registry, target)

    assert json.loads(target.read_text(encoding="utf-8")) == registry.to_document()
    assert sorted(path.name for path in tmp_path.iterdir()) == ["scte.json"]
