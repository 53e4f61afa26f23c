"""Per-publisher HTTP resilience settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from specref.domain.model import PublisherFamily

from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from .storage import StorageConfig

USER_AGENT: Final[str] = "specref-scraper"

# The ISO website is slow and fails often.
ISO_TIMEOUT_SECONDS: Final[float] = 300.0
ISO_RETRIES: Final[int] = 5
SCTE_RETRIES: Final[int] = 3


def _cache_config(storage: StorageConfig | None) -> CacheConfig | None:
    if storage is None:
        return CacheConfig(backend="memory")
    if storage.http_cache is None:
        return None
    if storage.http_cache == "sqlite":
        return CacheConfig(backend="sqlite", sqlite_path=str(storage.http_cache_path()))
    return CacheConfig(backend="memory")


def get_publisher_resilience(
    family: PublisherFamily,
    *,
    storage: StorageConfig | None = None,
) -> ResilienceConfig:
    cache = _cache_config(storage)
    headers = {"User-Agent": USER_AGENT}
    match family:
        case PublisherFamily.ISO:
            return ResilienceConfig(
                name="iso",
                timeout_seconds=ISO_TIMEOUT_SECONDS,
                retry=RetryPolicy(total=ISO_RETRIES),
                cache=cache,
                default_headers=headers,
            )
        case PublisherFamily.ETSI:
            return ResilienceConfig(
                name="etsi",
                ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
                cache=cache,
                default_headers=headers,
            )
        case PublisherFamily.SCTE:
            return ResilienceConfig(
                name="scte",
                retry=RetryPolicy(total=SCTE_RETRIES),
                cache=cache,
                default_headers=headers,
            )
