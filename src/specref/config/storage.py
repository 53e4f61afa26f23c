"""Output and cache location configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import get_env, get_env_choice
from .http_resilience import CacheBackend

APP_DIR_NAME: Final[str] = "specref"
DEFAULT_OUTPUT_DIR: Final[str] = "SpecRef"
HTTP_CACHE_FILENAME: Final[str] = "http_cache.db"
CACHE_MODES: Final[tuple[str, ...]] = ("sqlite", "memory", "off")


@dataclass(frozen=True, slots=True)
class StorageConfig:
    output_dir: Path
    cache_dir: Path
    http_cache: CacheBackend | None = "memory"
    http_cache_filename: str = HTTP_CACHE_FILENAME

    def resolve_output_dir(self) -> Path:
        return self.output_dir.expanduser().resolve()

    def http_cache_path(self, *, ensure: bool = True) -> Path:
        cache_dir = self.cache_dir.expanduser().resolve()
        if ensure:
            cache_dir.mkdir(parents=True, exist_ok=True)
        return cache_dir / self.http_cache_filename


def _default_cache_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_CACHE_HOME")
        base_path = Path(base) if base else (Path.home() / ".cache")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_storage_config(*, output_dir: Path | str | None = None) -> StorageConfig:
    env_output = get_env("SPECREF_OUTPUT_DIR")
    env_cache = get_env("SPECREF_CACHE_DIR")
    mode = get_env_choice("SPECREF_HTTP_CACHE", CACHE_MODES, default="memory")
    http_cache: CacheBackend | None
    if mode == "sqlite":
        http_cache = "sqlite"
    elif mode == "memory":
        http_cache = "memory"
    else:
        http_cache = None
    return StorageConfig(
        output_dir=Path(output_dir or env_output or DEFAULT_OUTPUT_DIR),
        cache_dir=Path(env_cache) if env_cache else _default_cache_dir(),
        http_cache=http_cache,
    )
