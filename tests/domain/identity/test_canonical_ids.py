from __future__ import annotations

import pytest

from specref.domain.identity import build_identity, parse_iso_title, parse_scte_title
from specref.domain.identity.canonical_ids import part_number_aliases
from specref.domain.model import ISO_PROFILE, SCTE_PROFILE, TitleDescriptor


def test_iso_regular_key() -> None:
    identity = build_identity(parse_iso_title("ISO/IEC FDIS 21000-22"), ISO_PROFILE)

    assert identity.key == "iso21000-22"
    assert identity.base_id == "21000-22"
    assert identity.aliases == frozenset()


def test_iso_addon_key_embeds_version_chain() -> None:
    identity = build_identity(parse_iso_title("ISO/IEC 21000-22:2016/Amd 1:2018"), ISO_PROFILE)

    assert identity.key == "iso21000-22-2016-amd1-2018"
    assert identity.base_id == "21000-22"


def test_iso_never_derives_aliases() -> None:
    identity = build_identity(TitleDescriptor(base_id="14496-2"), ISO_PROFILE)

    assert identity.aliases == frozenset()


def test_scte_zero_padded_part_gets_short_alias() -> None:
    identity = build_identity(parse_scte_title("ANSI/SCTE 24-02 2016"), SCTE_PROFILE)

    assert identity.key == "scte24-02"
    assert identity.aliases == frozenset({"scte24-2"})


def test_scte_single_digit_part_gets_padded_alias() -> None:
    identity = build_identity(parse_scte_title("ANSI/SCTE 24-2 2016"), SCTE_PROFILE)

    assert identity.key == "scte24-2"
    assert identity.aliases == frozenset({"scte24-02"})


def test_scte_number_without_part_gets_alias() -> None:
    identity = build_identity(parse_scte_title("ANSI/SCTE 05 2014"), SCTE_PROFILE)

    assert identity.key == "scte05"
    assert identity.aliases == frozenset({"scte5"})


def test_key_normalizes_case_and_spaces() -> None:
    identity = build_identity(TitleDescriptor(base_id="TS 103 285"), SCTE_PROFILE)

    assert identity.key == "sctets103285"


@pytest.mark.parametrize(
    ("base_id", "expected"),
    [
        ("24-02", ("24-2",)),
        ("24-2", ("24-02",)),
        ("24", ()),
        ("06", ("6",)),
        ("5", ("05",)),
        ("24-12", ()),
        ("24-002", ()),
        ("135-3-1", ("135-3-01",)),
    ],
)
def test_part_number_aliases(base_id: str, expected: tuple[str, ...]) -> None:
    assert part_number_aliases(base_id) == expected


def test_aliases_never_equal_their_own_key() -> None:
    for title in ("ANSI/SCTE 24-02 2016", "ANSI/SCTE 24-2 2016", "SCTE 06 2019"):
        identity = build_identity(parse_scte_title(title), SCTE_PROFILE)
        assert identity.key not in identity.aliases
