"""Fatal identity resolution errors.

Every error here aborts the affected catalog: either its registry is fully
resolved or nothing is written for it. Expected skips (duplicate URLs, lost
precedence) are not errors and never surface here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from specref.domain.model import Entry, PublisherFamily


class IdentityResolutionError(RuntimeError):
    """Base class for errors that abort one catalog's resolution run."""


class ParseError(IdentityResolutionError):
    """Raised when a title or number does not match its publisher grammar."""

    def __init__(self, text: str, *, family: PublisherFamily, reason: str) -> None:
        self.text = text
        self.family = family
        self.reason = reason
        super().__init__(f"Failed to parse {family.value} title {text!r}: {reason}")


class UnknownStatusLabelError(ParseError):
    """Raised when a status label is outside the publisher vocabulary."""

    def __init__(self, label: str, *, family: PublisherFamily) -> None:
        self.label = label
        super().__init__(label, family=family, reason="unexpected status label")


class ReconciliationConflictError(IdentityResolutionError):
    """Raised when two equally authoritative observations share one canonical key."""

    def __init__(self, key: str, *, existing: Entry, incoming: Entry) -> None:
        self.key = key
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            "Unexpected duplicate ID that does not seem to be a different version "
            f"of the same document: {key} "
            f"(existing={existing.url} [{existing.status}], "
            f"incoming={incoming.url} [{incoming.status}])"
        )


class CrossReferenceAmbiguityError(IdentityResolutionError):
    """Raised when an obsolete entry has more than one plausible successor."""

    def __init__(self, key: str, *, candidates: Sequence[str]) -> None:
        self.key = key
        self.candidates = tuple(candidates)
        super().__init__(f"Found multiple new versions of {key}: {', '.join(self.candidates)}")


class EmptyRegistryError(IdentityResolutionError):
    """Raised when a catalog produced no entries at all."""

    def __init__(self, family: PublisherFamily) -> None:
        self.family = family
        super().__init__(f"Loaded no entries for {family.value} catalog")
