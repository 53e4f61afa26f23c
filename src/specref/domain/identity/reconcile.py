"""Entry reconciliation: merge repeated observations of one canonical key.

Responsibilities of this stage:
- keep at most one entry per canonical key
- decide precedence between observations (lifecycle rank or version)
- skip catalog noise (the same downloadable artifact listed twice)
- fail loudly on observations that cannot be told apart

Precedence is a total order plus an explicit equal-rank case:
- lifecycle publishers: published outranks superseded / retired / under
  development, which all share one lower rank; a later lower-rank observation
  displaces an earlier lower-rank one, two published ones conflict
- versioned publishers: the higher version wins, except that an entry awaiting
  approval never displaces an already published one; equal versions conflict
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from specref.domain.errors import ReconciliationConflictError
from specref.domain.model import MergeDecision

if TYPE_CHECKING:
    from specref.domain.model import Entry, PublisherProfile

log = getLogger(__name__)


def merge_decision(existing: Entry, incoming: Entry, *, versioned: bool) -> MergeDecision:
    """Decide what an incoming observation does to the existing entry for its key."""

    if versioned:
        return _version_decision(existing, incoming)
    return _lifecycle_decision(existing, incoming)


def _lifecycle_decision(existing: Entry, incoming: Entry) -> MergeDecision:
    existing_rank = existing.lifecycle.rank
    incoming_rank = incoming.lifecycle.rank
    if incoming_rank > existing_rank:
        return MergeDecision.REPLACE
    if incoming_rank < existing_rank:
        return MergeDecision.KEEP
    if existing.is_current:
        raise ReconciliationConflictError(existing.key, existing=existing, incoming=incoming)
    if _same_observation(existing, incoming):
        return MergeDecision.SKIP_IDENTICAL
    return MergeDecision.REPLACE


def _version_decision(existing: Entry, incoming: Entry) -> MergeDecision:
    if existing.version is None or incoming.version is None:
        raise ValueError(f"Versioned reconciliation requires versions for {existing.key}")
    if incoming.version > existing.version:
        # A draft update may not clobber a stable reference. The reverse is unconstrained.
        if incoming.awaiting_approval and existing.is_current:
            return MergeDecision.KEEP
        return MergeDecision.REPLACE
    if incoming.version < existing.version:
        return MergeDecision.KEEP
    raise ReconciliationConflictError(existing.key, existing=existing, incoming=incoming)


def _same_observation(existing: Entry, incoming: Entry) -> bool:
    return existing.url == incoming.url and existing.status == incoming.status


@dataclass(slots=True)
class ReconcilerState:
    """Per-catalog reconciliation state.

    One instance per catalog run; nothing is shared between catalogs, so
    independent catalog pipelines can run side by side.
    """

    profile: PublisherProfile
    entries: dict[str, Entry] = field(default_factory=dict[str, "Entry"])
    claimed_urls: dict[str, str] = field(default_factory=dict[str, str])
    accepted: int = 0
    replaced: int = 0
    skipped_precedence: int = 0
    skipped_identical: int = 0
    skipped_duplicate_url: int = 0

    def submit(self, entry: Entry) -> MergeDecision:
        """Merge one observation, in catalog order, into the registry."""

        if self.profile.dedupe_urls:
            owner = self.claimed_urls.get(entry.url)
            if owner is not None:
                log.info(
                    "Skipping %s because its URL is already used by %s: %s",
                    entry.key,
                    owner,
                    entry.url,
                )
                self.skipped_duplicate_url += 1
                return MergeDecision.SKIP_DUPLICATE_URL

        existing = self.entries.get(entry.key)
        if existing is None:
            self._accept(entry)
            return MergeDecision.ADD

        decision = merge_decision(existing, entry, versioned=self.profile.versioned)
        if decision is MergeDecision.REPLACE:
            log.info("Overwriting %s because this one is a more preferred version.", entry.key)
            self.replaced += 1
            self._accept(entry)
        elif decision is MergeDecision.KEEP:
            log.info("Skipping %s because we already have a more preferred version.", entry.key)
            self.skipped_precedence += 1
        else:
            log.info("Skipping %s because it repeats an earlier observation.", entry.key)
            self.skipped_identical += 1
        return decision

    def _accept(self, entry: Entry) -> None:
        self.entries[entry.key] = entry
        self.accepted += 1
        if self.profile.dedupe_urls:
            self.claimed_urls.setdefault(entry.url, entry.key)
