"""Public domain model surface."""

from __future__ import annotations

from specref.domain.model.catalog import (
    CanonicalIdentity,
    Entry,
    RawCatalogItem,
    TitleDescriptor,
    Version,
)
from specref.domain.model.enums import Lifecycle, MergeDecision, PublisherFamily
from specref.domain.model.publishers import (
    ETSI_PROFILE,
    ISO_PROFILE,
    PROFILES,
    SCTE_PROFILE,
    PublisherProfile,
    StatusDefinition,
    profile_for,
)

__all__ = [
    "ETSI_PROFILE",
    "ISO_PROFILE",
    "PROFILES",
    "SCTE_PROFILE",
    "CanonicalIdentity",
    "Entry",
    "Lifecycle",
    "MergeDecision",
    "PublisherFamily",
    "PublisherProfile",
    "RawCatalogItem",
    "StatusDefinition",
    "TitleDescriptor",
    "Version",
    "profile_for",
]
