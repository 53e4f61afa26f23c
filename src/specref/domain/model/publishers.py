"""Publisher profiles: naming, status vocabulary and reconciliation policy switches."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from specref.domain.model.enums import Lifecycle, PublisherFamily

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class StatusDefinition:
    label: str
    lifecycle: Lifecycle
    awaiting_approval: bool = False


PUBLISHED = StatusDefinition("Published", Lifecycle.PUBLISHED)


@dataclass(frozen=True, slots=True, kw_only=True)
class PublisherProfile:
    """Static description of how one publisher family is resolved.

    ``statuses`` maps raw status labels (``None`` for "no label") onto the closed
    lifecycle vocabulary. ``versioned`` publishers reconcile repeated keys by
    version instead of lifecycle rank.
    """

    family: PublisherFamily
    key_prefix: str
    display_name: str
    statuses: Mapping[str | None, StatusDefinition]
    versioned: bool = False
    dedupe_urls: bool = False
    derive_aliases: bool = False
    number_in_title: bool = False
    undated_status: StatusDefinition | None = None
    organization_prefixes: tuple[str, ...] = field(default_factory=tuple)


ISO_PROFILE = PublisherProfile(
    family=PublisherFamily.ISO,
    key_prefix="iso",
    display_name="ISO/IEC",
    statuses=MappingProxyType(
        {
            None: PUBLISHED,
            "[Withdrawn]": StatusDefinition("Withdrawn", Lifecycle.SUPERSEDED),
            "[Under development]": StatusDefinition(
                "Under development", Lifecycle.UNDER_DEVELOPMENT
            ),
            "[Deleted]": StatusDefinition("Deleted", Lifecycle.RETIRED),
        }
    ),
    # Published ISO documents always carry an ``id:year`` number.
    undated_status=StatusDefinition("Under development", Lifecycle.UNDER_DEVELOPMENT),
    organization_prefixes=("ISO/IEC/IEEE ", "ISO/IEC ", "ISO "),
)

ETSI_PROFILE = PublisherProfile(
    family=PublisherFamily.ETSI,
    key_prefix="etsi",
    display_name="ETSI",
    statuses=MappingProxyType(
        {
            None: PUBLISHED,
            "Published": PUBLISHED,
            "On Approval": StatusDefinition(
                "On Approval", Lifecycle.UNDER_DEVELOPMENT, awaiting_approval=True
            ),
            "Withdrawn": StatusDefinition("Withdrawn", Lifecycle.SUPERSEDED),
            "Historical": StatusDefinition("Historical", Lifecycle.RETIRED),
        }
    ),
    versioned=True,
    organization_prefixes=("ETSI ",),
)

SCTE_PROFILE = PublisherProfile(
    family=PublisherFamily.SCTE,
    key_prefix="scte",
    display_name="SCTE",
    statuses=MappingProxyType(
        {
            None: PUBLISHED,
            "publish": PUBLISHED,
            "pending": StatusDefinition(
                "Pending approval", Lifecycle.UNDER_DEVELOPMENT, awaiting_approval=True
            ),
            "draft": StatusDefinition("Draft", Lifecycle.UNDER_DEVELOPMENT),
        }
    ),
    versioned=True,
    dedupe_urls=True,
    derive_aliases=True,
    number_in_title=True,
)

PROFILES: Mapping[PublisherFamily, PublisherProfile] = MappingProxyType(
    {
        PublisherFamily.ISO: ISO_PROFILE,
        PublisherFamily.ETSI: ETSI_PROFILE,
        PublisherFamily.SCTE: SCTE_PROFILE,
    }
)


def profile_for(family: PublisherFamily | str) -> PublisherProfile:
    return PROFILES[PublisherFamily(family)]
