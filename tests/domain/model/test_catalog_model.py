from __future__ import annotations

import pytest

from specref.domain.model import (
    ETSI_PROFILE,
    ISO_PROFILE,
    SCTE_PROFILE,
    Lifecycle,
    PublisherFamily,
    Version,
    profile_for,
)
from tests.helpers.catalog_items import make_entry


def test_version_normalizes_single_component() -> None:
    version = Version.parse("1")

    assert version.number == (1, 0)
    assert version.text == "1.0"


def test_missing_version_tag_defaults_to_first_version() -> None:
    assert Version.parse(None, release="2016") == Version((1, 0), "2016")


def test_version_ordering_pads_components() -> None:
    assert Version.parse("1.0") == Version.parse("1.0.0")
    assert Version.parse("1.2.1") < Version.parse("1.3")
    assert Version.parse("1.10.0") > Version.parse("1.9.9")
    assert hash(Version.parse("2")) == hash(Version.parse("2.0.0"))


def test_version_release_breaks_ties() -> None:
    assert Version.parse(None, release="2012") < Version.parse(None, release="2016")
    assert str(Version.parse("1.3.1", release="2020-02")) == "1.3.1 (2020-02)"


@pytest.mark.parametrize(
    ("lifecycle", "flags"),
    [
        (Lifecycle.PUBLISHED, (True, False, False, False)),
        (Lifecycle.SUPERSEDED, (False, True, False, False)),
        (Lifecycle.RETIRED, (False, False, True, False)),
        (Lifecycle.UNDER_DEVELOPMENT, (False, False, False, True)),
    ],
)
def test_lifecycle_flags_are_mutually_exclusive(
    lifecycle: Lifecycle, flags: tuple[bool, bool, bool, bool]
) -> None:
    entry = make_entry("x", lifecycle=lifecycle)

    assert (
        entry.is_current,
        entry.is_superseded,
        entry.is_retired,
        entry.is_under_development,
    ) == flags


def test_only_published_is_ranked_above_the_rest() -> None:
    assert Lifecycle.PUBLISHED.rank > Lifecycle.SUPERSEDED.rank
    assert Lifecycle.SUPERSEDED.rank == Lifecycle.RETIRED.rank == Lifecycle.UNDER_DEVELOPMENT.rank


def test_profile_lookup() -> None:
    assert profile_for("iso") is ISO_PROFILE
    assert profile_for(PublisherFamily.ETSI) is ETSI_PROFILE
    assert profile_for("scte") is SCTE_PROFILE
    assert SCTE_PROFILE.dedupe_urls
    assert SCTE_PROFILE.derive_aliases
    assert not ISO_PROFILE.versioned
    assert ETSI_PROFILE.versioned
