"""Catalog records flowing through identity resolution.

``RawCatalogItem`` is what fetch adapters produce, ``TitleDescriptor`` is what the
title parser derives from it, and ``Entry`` is the reconciled registry record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import TYPE_CHECKING

from specref.domain.model.enums import Lifecycle

if TYPE_CHECKING:
    from specref.domain.model.publishers import StatusDefinition

_MIN_VERSION_COMPONENTS = 2


@dataclass(frozen=True, slots=True, kw_only=True)
class RawCatalogItem:
    """One document row as listed by a publisher catalog."""

    title: str
    source_url: str
    sort_index: int
    summary: str | None = None
    status_label: str | None = None
    standard_number: str | None = None


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Ordinal version of a document: dotted number first, then release date.

    Missing trailing components count as zero, so ``1.0`` and ``1.0.0`` are
    the same version.
    """

    number: tuple[int, ...]
    release: str = ""

    @classmethod
    def parse(cls, text: str | None, *, release: str | None = None) -> Version:
        """Build a version from dotted text.

        ``"1"`` becomes ``1.0`` and a missing tag becomes ``1.0`` so that two
        versions of one document are always comparable.
        """

        parts = [int(part) for part in text.split(".")] if text else [1]
        while len(parts) < _MIN_VERSION_COMPONENTS:
            parts.append(0)
        return cls(number=tuple(parts), release=release or "")

    @property
    def text(self) -> str:
        return ".".join(str(part) for part in self.number)

    @property
    def sort_key(self) -> tuple[tuple[int, ...], str]:
        number = list(self.number)
        while number and number[-1] == 0:
            number.pop()
        return tuple(number), self.release

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __hash__(self) -> int:
        return hash(self.sort_key)

    def __str__(self) -> str:
        return f"{self.text} ({self.release})" if self.release else self.text


@dataclass(frozen=True, slots=True, kw_only=True)
class TitleDescriptor:
    """Structured identity parsed from a catalog title or standard number."""

    base_id: str
    addon: bool = False
    version: Version | None = None
    iso_number: str | None = None
    addon_suffix: str | None = None
    raw_date: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CanonicalIdentity:
    base_id: str
    key: str
    aliases: frozenset[str] = frozenset()


@dataclass(slots=True, kw_only=True)
class Entry:
    """Reconciled registry record for one canonical key."""

    key: str
    base_id: str
    url: str
    title: str
    status: str
    publisher: str
    sort_index: int
    lifecycle: Lifecycle = Lifecycle.PUBLISHED
    is_addon: bool = False
    awaiting_approval: bool = False
    iso_number: str | None = None
    raw_date: str | None = None
    version: Version | None = None
    aliases: set[str] = field(default_factory=set[str])
    obsoleted_by: str | None = None

    @classmethod
    def from_observation(
        cls,
        *,
        item: RawCatalogItem,
        descriptor: TitleDescriptor,
        identity: CanonicalIdentity,
        status: StatusDefinition,
        publisher: str,
        title: str,
    ) -> Entry:
        return cls(
            key=identity.key,
            base_id=identity.base_id,
            url=item.source_url,
            title=title,
            status=status.label,
            publisher=publisher,
            sort_index=item.sort_index,
            lifecycle=status.lifecycle,
            is_addon=descriptor.addon,
            awaiting_approval=status.awaiting_approval,
            iso_number=descriptor.iso_number,
            raw_date=descriptor.raw_date,
            version=descriptor.version,
            aliases=set(identity.aliases),
        )

    @property
    def is_current(self) -> bool:
        return self.lifecycle.is_current

    @property
    def is_superseded(self) -> bool:
        return self.lifecycle is Lifecycle.SUPERSEDED

    @property
    def is_retired(self) -> bool:
        return self.lifecycle is Lifecycle.RETIRED

    @property
    def is_under_development(self) -> bool:
        return self.lifecycle is Lifecycle.UNDER_DEVELOPMENT
