"""Canonical key and alias derivation from parsed title descriptors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from specref.domain.model import CanonicalIdentity

if TYPE_CHECKING:
    from specref.domain.model import PublisherProfile, TitleDescriptor


def _normalize_key(value: str) -> str:
    return value.lower().replace(" ", "")


def build_identity(descriptor: TitleDescriptor, profile: PublisherProfile) -> CanonicalIdentity:
    """Derive the canonical key (and alias keys) for ``descriptor``.

    Regular documents get ``<prefix><base id>``; addons embed their whole
    canonicalized version/amendment chain because they only exist relative to
    one specific base document version.
    """

    base_id = _normalize_key(descriptor.base_id)
    if descriptor.addon:
        key = f"{profile.key_prefix}{base_id}-{descriptor.addon_suffix}"
        return CanonicalIdentity(base_id=base_id, key=key)

    key = f"{profile.key_prefix}{base_id}"
    aliases: frozenset[str] = frozenset()
    if profile.derive_aliases:
        aliases = frozenset(
            f"{profile.key_prefix}{alias}" for alias in part_number_aliases(base_id)
        )
    return CanonicalIdentity(base_id=base_id, key=key, aliases=aliases)


def part_number_aliases(base_id: str) -> tuple[str, ...]:
    """Return the alternate spelling of a base id's final part number.

    The upstream numbering moved between one-digit and zero-padded two-digit
    part numbers (``24-2`` and ``24-02``) and both spellings still appear in
    links, so each form gets the other as an alias.
    """

    head, sep, last = base_id.rpartition("-")
    if not last.isdigit():
        return ()
    prefix = f"{head}{sep}"
    if len(last) == 1:
        return (f"{prefix}0{last}",)
    if len(last) == 2 and last.startswith("0"):  # noqa: PLR2004
        return (f"{prefix}{last[1]}",)
    return ()
