"""Translate ISO committee catalogue pages into raw catalog items."""

from __future__ import annotations

from logging import getLogger
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from specref.adapters.catalog_pages import CatalogFormatError
from specref.domain.model import RawCatalogItem

log = getLogger(__name__)

CATALOG_TABLE_ID = "datatable-tc-projects"

# The catalogue sometimes shows stray punctuation in place of a summary.
_MIN_SUMMARY_LENGTH = 4


def _text(node: Tag | None) -> str | None:
    if node is None:
        return None
    text = node.get_text().replace("\n", "").replace("\r", "").strip()
    return text or None


def _attribute(node: Tag, name: str) -> str | None:
    value = node.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value.strip() if value else None


def _summary(cell: Tag) -> str | None:
    summary = _text(cell.select_one("div > div.entry-summary"))
    if summary is None or len(summary) < _MIN_SUMMARY_LENGTH:
        return None
    return summary


def translate_catalog_row(cell: Tag, *, page_url: str, sort_index: int) -> RawCatalogItem:
    link = cell.select_one("div > div > a")
    title = _attribute(link, "title") if link is not None else None
    href = _attribute(link, "href") if link is not None else None
    if title is None or href is None:
        raise CatalogFormatError(
            "Unable to parse document entry", url=page_url, fragment=cell.decode_contents()
        )

    return RawCatalogItem(
        title=title,
        source_url=urljoin(page_url, href),
        sort_index=sort_index,
        summary=_summary(cell),
        status_label=_text(cell.select_one("div > div > span.small")),
    )


def translate_catalog_page(html: str, *, page_url: str, start_index: int) -> list[RawCatalogItem]:
    """Read the document column of the committee's project table.

    Rows keep the order shown on the website.
    """

    soup = BeautifulSoup(html, "html.parser")
    table = soup.find(id=CATALOG_TABLE_ID)
    if not isinstance(table, Tag):
        raise CatalogFormatError(f"No #{CATALOG_TABLE_ID} table on page", url=page_url)

    cells = table.select("tbody > tr > td:first-child")
    return [
        translate_catalog_row(cell, page_url=page_url, sort_index=start_index + offset)
        for offset, cell in enumerate(cells)
    ]
