"""Translate the ETSI standards search CSV export into raw catalog items."""

from __future__ import annotations

import csv
import io
from urllib.parse import urljoin

from specref.adapters.catalog_pages import CatalogFormatError
from specref.domain.model import RawCatalogItem

DELIVERABLE_COLUMN = "ETSI deliverable"
TITLE_COLUMN = "title"
STATUS_COLUMN = "Status"
URL_COLUMNS = ("PDF link", "Details link")

_REQUIRED_COLUMNS = frozenset({DELIVERABLE_COLUMN, TITLE_COLUMN, STATUS_COLUMN})


def _strip_separator_hint(text: str) -> str:
    # Exports meant for spreadsheets start with a "sep=;" line.
    text = text.removeprefix("\ufeff")
    first, _, rest = text.partition("\n")
    if first.strip().strip('"').startswith("sep="):
        return rest
    return text


def _cell(row: dict[str, str | None], column: str) -> str | None:
    value = row.get(column)
    if value is None:
        return None
    return value.strip() or None


def translate_catalog_export(
    text: str, *, page_url: str, start_index: int
) -> list[RawCatalogItem]:
    reader = csv.DictReader(io.StringIO(_strip_separator_hint(text)), delimiter=";")
    columns = set(reader.fieldnames or ())
    missing = _REQUIRED_COLUMNS - columns
    if missing or not columns.intersection(URL_COLUMNS):
        expected = sorted(missing) if missing else list(URL_COLUMNS)
        raise CatalogFormatError(f"Missing CSV column(s): {', '.join(expected)}", url=page_url)

    items: list[RawCatalogItem] = []
    for row in reader:
        deliverable = _cell(row, DELIVERABLE_COLUMN)
        if deliverable is None:
            continue
        url = next((value for column in URL_COLUMNS if (value := _cell(row, column))), None)
        if url is None:
            raise CatalogFormatError(f"No link for {deliverable}", url=page_url, fragment=str(row))
        items.append(
            RawCatalogItem(
                title=deliverable,
                source_url=urljoin(page_url, url),
                sort_index=start_index + len(items),
                summary=_cell(row, TITLE_COLUMN),
                status_label=_cell(row, STATUS_COLUMN),
            )
        )
    return items
