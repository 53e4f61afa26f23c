"""Public interface for the SCTE catalog adapter."""

from __future__ import annotations

from .fetcher import ScteCatalogFetcher
from .schema import Meta, Post, PostList
from .translator import translate_post, translate_posts_page

__all__ = [
    "Meta",
    "Post",
    "PostList",
    "ScteCatalogFetcher",
    "translate_post",
    "translate_posts_page",
]
