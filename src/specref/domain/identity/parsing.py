"""Title parsing: raw catalog titles into structured ``TitleDescriptor`` values.

One grammar per publisher family; parsing is pure and deterministic. Anything
that does not match the known grammar raises ``ParseError`` because an
unrecognized title usually means the source catalog changed shape.
"""

from __future__ import annotations

import re
from logging import getLogger
from typing import TYPE_CHECKING

from specref.domain.errors import ParseError, UnknownStatusLabelError
from specref.domain.model import (
    ETSI_PROFILE,
    ISO_PROFILE,
    PublisherFamily,
    TitleDescriptor,
    Version,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from specref.domain.model import PublisherProfile, RawCatalogItem, StatusDefinition

log = getLogger(__name__)

# First "12345-56" looking run. A year suffix after ":" is not part of it.
_BASE_ID_PATTERN = re.compile(r"\d+(?:-\d+)*")

# First "12345-56:7890" looking run.
_ISO_NUMBER_PATTERN = re.compile(r"[\d-]+:[\d-]+")

# ETSI TS 103 285 V1.3.1 (2020-05)
# ETSI GS NFV-SOL 001 V2.5.1 (2018-09)
# ETSI EN 300 468 ed.1 2019
_VERSIONED_TITLE_PATTERN = re.compile(
    r"""
    ^(?P<kind>[A-Z][A-Za-z-]*(?:\s+[A-Z][A-Za-z-]*)*)
    \s+(?P<number>\d[\d ]*?(?:-\d+)*)
    \s+(?:V|ed\.\s*)(?P<version>\d+(?:\.\d+)*)
    (?:\s*\((?P<month>\d{4}-\d{2}|\d{4})\)|\s+(?P<year>\d{4}))?
    \s*$
    """,
    re.VERBOSE,
)

# ANSI/SCTE 05 2014, SCTE 06 2019, ANSI/SCTE 24-02 2016, ANSI/SCTE 82-2012.
# The separator before the year is sometimes a dash instead of a space.
_SCTE_NUMBER_PATTERN = re.compile(r"SCTE ([0-9-]+?)(?: |-)(\d{4})")

_WHITESPACE = re.compile(r"\s+")


def canonicalize_suffix(text: str) -> str:
    """Lower-case, drop spaces and map ``:`` and ``/`` to ``-``."""

    return text.lower().replace(" ", "").replace(":", "-").replace("/", "-")


def strip_prefix(title: str, prefixes: tuple[str, ...]) -> str:
    for prefix in prefixes:
        if title.startswith(prefix):
            return title[len(prefix) :]
    return title


def parse_iso_title(title: str) -> TitleDescriptor:
    """Parse an ISO/IEC catalog title.

    Regular documents collapse to their base id whatever their stage decoration
    (``ISO/IEC FDIS 21000-22`` and ``ISO/IEC 21000-22:2016`` are one document).
    Addons are only meaningful relative to one base version, so they keep the
    whole decorated remainder (``ISO/IEC 21000-22:2016/Amd 1:2018``).
    """

    family = PublisherFamily.ISO
    text = strip_prefix(title, ISO_PROFILE.organization_prefixes)

    match = _BASE_ID_PATTERN.search(text)
    if match is None:
        raise ParseError(title, family=family, reason="no numeric document id")
    base_id = match.group(0)
    # Slashes before the id belong to the document type (ISO/TR, ISO/TS).
    addon = "/" in text[match.end() :]

    if addon:
        suffix = canonicalize_suffix(text[match.end() :]).lstrip("-")
        if not suffix:
            raise ParseError(title, family=family, reason="addon without suffix")
        return TitleDescriptor(base_id=base_id, addon=True, addon_suffix=suffix)

    iso_number: str | None = None
    if ":" in text:
        number_match = _ISO_NUMBER_PATTERN.search(text)
        if number_match is None:
            raise ParseError(title, family=family, reason="malformed id:year number")
        iso_number = f"ISO {number_match.group(0)}"

    return TitleDescriptor(base_id=base_id, iso_number=iso_number)


def parse_versioned_title(title: str) -> TitleDescriptor:
    """Parse an ETSI style ``<kind> <number> V<version> (<date>)`` deliverable name."""

    family = PublisherFamily.ETSI
    text = _WHITESPACE.sub(" ", strip_prefix(title.strip(), ETSI_PROFILE.organization_prefixes))
    match = _VERSIONED_TITLE_PATTERN.match(text)
    if match is None:
        raise ParseError(title, family=family, reason="no versioned deliverable name")

    kind = match.group("kind")
    number = match.group("number")
    base_id = f"{kind}{number}".lower().replace(" ", "")
    raw_date = match.group("month") or match.group("year")
    return TitleDescriptor(
        base_id=base_id,
        version=Version.parse(match.group("version"), release=raw_date),
        raw_date=raw_date,
    )


def parse_scte_title(title: str, standard_number: str | None = None) -> TitleDescriptor:
    """Parse an SCTE standard number such as ``ANSI/SCTE 24-02 2016``.

    Catalogs that split the human title from the number pass the number
    separately; otherwise the number is embedded in the title.
    """

    text = _WHITESPACE.sub(" ", standard_number or title)
    match = _SCTE_NUMBER_PATTERN.search(text)
    if match is None:
        raise ParseError(text, family=PublisherFamily.SCTE, reason="no SCTE number and year")

    base_id, year = match.group(1), match.group(2)
    if not _BASE_ID_PATTERN.fullmatch(base_id):
        raise ParseError(text, family=PublisherFamily.SCTE, reason="malformed SCTE number")
    return TitleDescriptor(
        base_id=base_id,
        version=Version.parse(None, release=year),
        raw_date=year,
    )


def _parse_iso_item(item: RawCatalogItem) -> TitleDescriptor:
    return parse_iso_title(item.standard_number or item.title)


def _parse_etsi_item(item: RawCatalogItem) -> TitleDescriptor:
    return parse_versioned_title(item.standard_number or item.title)


def _parse_scte_item(item: RawCatalogItem) -> TitleDescriptor:
    return parse_scte_title(item.title, item.standard_number)


_PARSERS: dict[PublisherFamily, Callable[[RawCatalogItem], TitleDescriptor]] = {
    PublisherFamily.ISO: _parse_iso_item,
    PublisherFamily.ETSI: _parse_etsi_item,
    PublisherFamily.SCTE: _parse_scte_item,
}


def parse_title(item: RawCatalogItem, profile: PublisherProfile) -> TitleDescriptor:
    """Parse ``item`` with the grammar of ``profile``'s publisher family."""

    return _PARSERS[profile.family](item)


def resolve_status(
    label: str | None,
    profile: PublisherProfile,
    *,
    descriptor: TitleDescriptor | None = None,
) -> StatusDefinition:
    """Map a raw status label onto the publisher's closed status vocabulary."""

    normalized = label.strip() if label is not None else None
    if not normalized:
        normalized = None
    if normalized not in profile.statuses:
        raise UnknownStatusLabelError(str(label), family=profile.family)

    if (
        normalized is None
        and profile.undated_status is not None
        and descriptor is not None
        and not descriptor.addon
        and descriptor.iso_number is None
    ):
        log.debug("No status label and no year for %s; treating as undated", descriptor.base_id)
        return profile.undated_status

    return profile.statuses[normalized]


def display_title(item: RawCatalogItem, profile: PublisherProfile) -> str:
    """Prefer the human summary over the raw catalog title."""

    summary = _WHITESPACE.sub(" ", item.summary).strip() if item.summary else None
    if profile.number_in_title:
        number = _WHITESPACE.sub(" ", item.standard_number or item.title).strip()
        if summary is None and item.standard_number and item.title.strip() != number:
            summary = _WHITESPACE.sub(" ", item.title).strip()
        return f"{number}: {summary}" if summary else number
    return summary or item.title
