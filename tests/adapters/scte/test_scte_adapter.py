from __future__ import annotations

import json

import pytest

from specref.adapters.catalog_pages import CatalogFormatError
from specref.adapters.scte import Post, ScteCatalogFetcher, translate_post, translate_posts_page
from specref.config.http_resilience import ResilienceConfig
from specref.domain.identity import ResolutionEngine
from specref.domain.model import SCTE_PROFILE
from tests.helpers.http import make_client_factory

FEED_URL = "https://www.scte.org/wp-json/scte/v1/standards"


def _post(
    title: object,
    *,
    status: str | None = "publish",
    link: str | None = None,
    meta: list[tuple[str, object]] | None = None,
) -> dict[str, object]:
    return {
        "title": title,
        "status": status,
        "link": link,
        "meta": [{"meta_key": key, "meta_value": value} for key, value in meta or []],
    }


SAMPLE_POSTS = [
    _post(
        "ANSI/SCTE 24-02 2016",
        link="https://www.scte.org/standards/24-02",
        meta=[
            ("document_url", ""),
            ("document_url", "https://account.scte.org/standards/scte-24-02-2016.pdf"),
            ("document_url", "https://account.scte.org/standards/ignored.pdf"),
            ("summary", "BV16 Speech Codec   Specification &amp; Test Vectors"),
        ],
    ),
    _post(
        {"rendered": "Digital Program Insertion Cueing Message"},
        link="https:/www.scte.org/standards/35",
        meta=[("standard_number", "ANSI/SCTE 35 2022")],
    ),
    _post(
        "SCTE 231 2020",
        link="https://account.scte.org/standards/231-232.pdf",
        meta=[("summary", "DOCSIS Cable Modem")],
    ),
    _post(
        "SCTE 232 2020",
        link="https://account.scte.org/standards/231-232.pdf",
        meta=[("summary", "DOCSIS Cable Modem")],
    ),
    _post("ANSI/SCTE 250 2023", status="pending", link="https://www.scte.org/standards/250"),
]


def test_meta_keys_may_repeat_and_first_non_blank_value_wins() -> None:
    post = Post.model_validate(SAMPLE_POSTS[0])

    assert post.meta_value("document_url") == (
        "https://account.scte.org/standards/scte-24-02-2016.pdf"
    )
    assert post.meta_value("missing") is None


def test_numeric_meta_values_are_text() -> None:
    post = Post.model_validate(_post("SCTE 06 2019", meta=[("revision", 3)]))

    assert post.meta_value("revision") == "3"


def test_translate_post_cleans_summary_and_prefers_document_url() -> None:
    item = translate_post(Post.model_validate(SAMPLE_POSTS[0]), page_url=FEED_URL, sort_index=1)

    assert item.title == "ANSI/SCTE 24-02 2016"
    assert item.summary == "BV16 Speech Codec Specification & Test Vectors"
    assert item.source_url == "https://account.scte.org/standards/scte-24-02-2016.pdf"
    assert item.status_label == "publish"
    assert item.standard_number is None


def test_translate_post_with_split_number_and_broken_link() -> None:
    item = translate_post(Post.model_validate(SAMPLE_POSTS[1]), page_url=FEED_URL, sort_index=2)

    assert item.title == "Digital Program Insertion Cueing Message"
    assert item.standard_number == "ANSI/SCTE 35 2022"
    assert item.source_url == "https://www.scte.org/standards/35"


def test_post_without_any_link_is_rejected() -> None:
    post = Post.model_validate(_post("SCTE 06 2019"))

    with pytest.raises(CatalogFormatError):
        translate_post(post, page_url=FEED_URL, sort_index=1)


def test_unexpected_payload_is_rejected() -> None:
    with pytest.raises(CatalogFormatError):
        translate_posts_page('{"code": "rest_no_route"}', page_url=FEED_URL, start_index=1)


def test_feed_resolves_to_scte_registry(offline_resilience: ResilienceConfig) -> None:
    fetcher = ScteCatalogFetcher(
        urls=(FEED_URL,),
        resilience=offline_resilience,
        client_factory=make_client_factory({FEED_URL: json.dumps(SAMPLE_POSTS)}),
    )

    items = fetcher()
    document = ResolutionEngine(SCTE_PROFILE).resolve(items).to_document()

    assert [item.sort_index for item in items] == [1, 2, 3, 4, 5]
    assert list(document) == ["scte24-02", "scte35", "scte231", "scte250", "scte24-2"]
    assert document["scte24-02"]["title"] == (
        "ANSI/SCTE 24-02 2016: BV16 Speech Codec Specification & Test Vectors"
    )
    assert document["scte35"]["title"] == (
        "ANSI/SCTE 35 2022: Digital Program Insertion Cueing Message"
    )
    assert document["scte35"]["rawDate"] == "2022"
    assert document["scte250"]["status"] == "Pending approval"
    assert document["scte24-2"] == {"aliasOf": "scte24-02"}
