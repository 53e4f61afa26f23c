"""Obsolescence cross-referencing over a completed registry.

This is a heuristic: an obsolete entry points at the single current, non-addon
entry sharing its base id. Publishers do list explicit replacement links on
each document's own page; following those is out of reach for a catalog-level
scrape, so the heuristic is kept as is and ambiguity is treated as fatal rather
than guessed at.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from specref.domain.errors import CrossReferenceAmbiguityError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from specref.domain.model import Entry

log = getLogger(__name__)


def link_obsolete_entries(entries: Iterable[Entry]) -> dict[str, str]:
    """Set ``obsoleted_by`` on not-current entries and return the edges."""

    all_entries = list(entries)
    successors_by_base_id: dict[str, list[Entry]] = {}
    for entry in all_entries:
        if entry.is_current and not entry.is_addon:
            successors_by_base_id.setdefault(entry.base_id, []).append(entry)

    edges: dict[str, str] = {}
    for obsolete in all_entries:
        if obsolete.is_current:
            continue
        candidates = successors_by_base_id.get(obsolete.base_id, [])
        if len(candidates) > 1:
            raise CrossReferenceAmbiguityError(
                obsolete.key, candidates=[candidate.key for candidate in candidates]
            )
        if not candidates:
            continue
        successor = candidates[0]
        obsolete.obsoleted_by = successor.key
        edges[obsolete.key] = successor.key
        log.info("Marking as obsoleted: %s -> %s", obsolete.key, successor.key)
    return edges
