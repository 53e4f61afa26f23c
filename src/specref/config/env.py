"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError


def get_env(name: str) -> str | None:
    """Return a stripped environment variable, treating blank values as unset."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def get_env_list(name: str) -> tuple[str, ...] | None:
    """Return a comma-separated environment variable as a tuple of items."""

    value = get_env(name)
    if value is None:
        return None
    items = tuple(item.strip() for item in value.split(",") if item.strip())
    if not items:
        raise ConfigurationError(f"{name} must list at least one value")
    return items


def get_env_choice(name: str, choices: tuple[str, ...], *, default: str) -> str:
    value = get_env(name)
    if value is None:
        return default
    normalized = value.lower()
    if normalized not in choices:
        allowed = ", ".join(choices)
        raise ConfigurationError(f"{name} must be one of: {allowed} (got {value!r})")
    return normalized
