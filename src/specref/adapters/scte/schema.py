"""Pydantic models describing the SCTE standards posts feed."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class ScteBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Meta(ScteBaseModel):
    key: str = Field(alias="meta_key")
    value: str | None = Field(default=None, alias="meta_value")

    @field_validator("value", mode="before")
    @classmethod
    def _normalize_value(cls, value: object) -> object:
        if isinstance(value, int | float) and not isinstance(value, bool):
            value = str(value)
        return _blank_to_none(value)


class Post(ScteBaseModel):
    """One standard as published in the feed.

    ``meta`` is a list rather than a mapping because keys repeat.
    """

    title: str
    status: str | None = None
    link: str | None = None
    meta: list[Meta] = Field(default_factory=list[Meta])

    @model_validator(mode="before")
    @classmethod
    def _unwrap_rendered_title(cls, value: object) -> object:
        if isinstance(value, Mapping):
            data = dict(cast(Mapping[str, object], value))
            title = data.get("title")
            if isinstance(title, Mapping) and "rendered" in title:
                data["title"] = cast(Mapping[str, object], title)["rendered"]
            return data
        return value

    _normalize_status = field_validator("status", "link", mode="before")(_blank_to_none)

    def meta_value(self, key: str) -> str | None:
        """First non-blank value stored under ``key``."""

        return next((meta.value for meta in self.meta if meta.key == key and meta.value), None)


PostList = TypeAdapter(list[Post])
