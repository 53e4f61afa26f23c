"""Translate SCTE feed posts into raw catalog items."""

from __future__ import annotations

import html
import re
from urllib.parse import urljoin

from pydantic import ValidationError

from specref.adapters.catalog_pages import CatalogFormatError
from specref.domain.model import RawCatalogItem

from .schema import Post, PostList

STANDARD_NUMBER_KEY = "standard_number"
DOCUMENT_URL_KEY = "document_url"
SUMMARY_KEY = "summary"

_WHITESPACE = re.compile(r"\s+")


def _clean(text: str | None) -> str | None:
    if text is None:
        return None
    cleaned = _WHITESPACE.sub(" ", html.unescape(text)).strip()
    return cleaned or None


def _repair_url(url: str) -> str:
    # Some links are published as "https:/www...".
    return re.sub(r"^(https?):/(?!/)", r"\1://", url)


def translate_post(post: Post, *, page_url: str, sort_index: int) -> RawCatalogItem:
    raw_url = post.meta_value(DOCUMENT_URL_KEY) or post.link
    if raw_url is None:
        raise CatalogFormatError(
            f"Unable to find document link for {post.title!r}", url=page_url, fragment=post.title
        )

    standard_number = _clean(post.meta_value(STANDARD_NUMBER_KEY))
    title = _clean(post.title) or post.title
    summary = _clean(post.meta_value(SUMMARY_KEY))

    return RawCatalogItem(
        title=title,
        source_url=urljoin(page_url, _repair_url(raw_url)),
        sort_index=sort_index,
        summary=summary,
        status_label=post.status,
        standard_number=standard_number,
    )


def translate_posts_page(text: str, *, page_url: str, start_index: int) -> list[RawCatalogItem]:
    try:
        posts = PostList.validate_json(text)
    except ValidationError as exc:
        raise CatalogFormatError(f"Unexpected posts payload: {exc}", url=page_url) from exc
    return [
        translate_post(post, page_url=page_url, sort_index=start_index + offset)
        for offset, post in enumerate(posts)
    ]
