"""Identity resolution core for standards document catalogs.

Layered flow, per catalog:
1) parse raw titles into descriptors (``parsing``)
2) derive canonical keys and aliases (``canonical_ids``)
3) reconcile repeated keys by precedence (``reconcile``)
4) link obsolete entries to their successors (``cross_reference``)
5) order entries and expand aliases (``registry``)
"""

from __future__ import annotations

from .canonical_ids import build_identity, part_number_aliases
from .cross_reference import link_obsolete_entries
from .engine import ResolutionEngine
from .parsing import (
    canonicalize_suffix,
    display_title,
    parse_iso_title,
    parse_scte_title,
    parse_title,
    parse_versioned_title,
    resolve_status,
)
from .reconcile import ReconcilerState, merge_decision
from .registry import Registry, assemble_registry, entry_record

__all__ = [
    "ReconcilerState",
    "Registry",
    "ResolutionEngine",
    "assemble_registry",
    "build_identity",
    "canonicalize_suffix",
    "display_title",
    "entry_record",
    "link_obsolete_entries",
    "merge_decision",
    "parse_iso_title",
    "parse_scte_title",
    "parse_title",
    "parse_versioned_title",
    "part_number_aliases",
    "resolve_status",
]
