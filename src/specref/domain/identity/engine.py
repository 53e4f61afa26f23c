"""Orchestrator for one catalog's identity resolution run.

Stages run strictly downstream: parse -> canonical id -> reconcile (in catalog
order) -> cross-reference -> assemble. The engine holds no state between runs;
each ``resolve`` call builds its own ``ReconcilerState``.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from specref.domain.errors import EmptyRegistryError
from specref.domain.model import Entry

from .canonical_ids import build_identity
from .cross_reference import link_obsolete_entries
from .parsing import display_title, parse_title, resolve_status
from .reconcile import ReconcilerState
from .registry import assemble_registry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from specref.domain.model import PublisherProfile, RawCatalogItem

    from .registry import Registry

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ResolutionEngine:
    """Resolve one publisher catalog's raw items into a registry."""

    profile: PublisherProfile

    def observe(self, item: RawCatalogItem) -> Entry:
        """Turn one raw catalog item into a candidate entry."""

        descriptor = parse_title(item, self.profile)
        identity = build_identity(descriptor, self.profile)
        status = resolve_status(item.status_label, self.profile, descriptor=descriptor)
        entry = Entry.from_observation(
            item=item,
            descriptor=descriptor,
            identity=identity,
            status=status,
            publisher=self.profile.display_name,
            title=display_title(item, self.profile),
        )
        log.debug(
            '%s [%s] is titled "%s", available at %s and will get the ID %s',
            item.title,
            entry.status,
            entry.title,
            entry.url,
            entry.key,
        )
        return entry

    def reconcile(self, items: Iterable[RawCatalogItem]) -> ReconcilerState:
        state = ReconcilerState(profile=self.profile)
        for item in items:
            state.submit(self.observe(item))
        return state

    def resolve(self, items: Iterable[RawCatalogItem]) -> Registry:
        """Run every stage for ``items`` (which must be in catalog order)."""

        state = self.reconcile(items)
        if not state.entries:
            raise EmptyRegistryError(self.profile.family)

        edges = link_obsolete_entries(state.entries.values())
        registry = assemble_registry(state.entries.values(), self.profile)
        log.info(
            "Resolved %s catalog: entries=%s, aliases=%s, obsoleted=%s, replaced=%s, "
            "skipped_precedence=%s, skipped_identical=%s, skipped_duplicate_url=%s",
            self.profile.family.value,
            len(registry),
            len(registry.aliases),
            len(edges),
            state.replaced,
            state.skipped_precedence,
            state.skipped_identical,
            state.skipped_duplicate_url,
        )
        return registry
