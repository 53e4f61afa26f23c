"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class PublisherFamily(StrEnum):
    ISO = "iso"
    ETSI = "etsi"
    SCTE = "scte"


class Lifecycle(StrEnum):
    """Mutually exclusive lifecycle states of one catalog entry."""

    PUBLISHED = "published"
    SUPERSEDED = "superseded"
    RETIRED = "retired"
    UNDER_DEVELOPMENT = "under_development"

    @property
    def is_current(self) -> bool:
        return self is Lifecycle.PUBLISHED

    @property
    def rank(self) -> int:
        # Superseded, retired and under development share one rank.
        return 1 if self.is_current else 0


class MergeDecision(StrEnum):
    """Outcome of submitting one observation to the reconciler."""

    ADD = "add"
    REPLACE = "replace"
    KEEP = "keep"
    SKIP_IDENTICAL = "skip_identical"
    SKIP_DUPLICATE_URL = "skip_duplicate_url"
