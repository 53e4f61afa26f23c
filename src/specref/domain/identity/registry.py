"""Registry assembly: ordered entries plus alias redirects, ready to serialize."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterable

    from specref.domain.model import Entry, PublisherProfile

log = getLogger(__name__)

Record: TypeAlias = dict[str, object]


@dataclass(slots=True)
class Registry:
    """Final, read-only view of one catalog's reconciled entries."""

    profile: PublisherProfile
    entries: tuple[Entry, ...] = ()
    aliases: dict[str, str] = field(default_factory=dict[str, str])
    _by_key: dict[str, Entry] = field(init=False, repr=False, default_factory=dict[str, "Entry"])

    def __post_init__(self) -> None:
        self._by_key = {entry.key: entry for entry in self.entries}

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(entry.key for entry in self.entries)

    def get(self, key: str) -> Entry | None:
        return self._by_key.get(key)

    def resolve(self, key_or_alias: str) -> Entry | None:
        """Return the entry a canonical key or an alias points to."""

        return self.get(self.aliases.get(key_or_alias, key_or_alias))

    def to_document(self) -> dict[str, Record]:
        """Return the key -> record mapping; aliases follow the entries."""

        document: dict[str, Record] = {entry.key: entry_record(entry) for entry in self.entries}
        for alias, target in self.aliases.items():
            document[alias] = {"aliasOf": target}
        return document


def entry_record(entry: Entry) -> Record:
    """Flat output record; fields without a value are left out entirely."""

    record: Record = {
        "href": entry.url,
        "title": entry.title,
        "status": entry.status,
        "publisher": entry.publisher,
    }
    optional: dict[str, object] = {
        "isoNumber": entry.iso_number,
        "isSuperseded": entry.is_superseded,
        "isRetired": entry.is_retired,
        "obsoletedBy": [entry.obsoleted_by] if entry.obsoleted_by else None,
        "rawDate": entry.raw_date,
    }
    record.update({name: value for name, value in optional.items() if value})
    return record


def assemble_registry(entries: Iterable[Entry], profile: PublisherProfile) -> Registry:
    """Order entries by catalog position and collect their alias redirects.

    Canonical keys always win over aliases, and the first entry to claim an
    alias keeps it; colliding aliases are dropped with a warning.
    """

    ordered = tuple(sorted(entries, key=lambda entry: entry.sort_index))
    keys = {entry.key for entry in ordered}
    aliases: dict[str, str] = {}
    for entry in ordered:
        for alias in sorted(entry.aliases):
            if alias in keys:
                log.warning("Dropping alias %s of %s: it is a canonical key", alias, entry.key)
                entry.aliases.discard(alias)
                continue
            owner = aliases.get(alias)
            if owner is not None and owner != entry.key:
                log.warning(
                    "Dropping alias %s of %s: already an alias of %s", alias, entry.key, owner
                )
                entry.aliases.discard(alias)
                continue
            aliases[alias] = entry.key
    return Registry(profile=profile, entries=ordered, aliases=aliases)
