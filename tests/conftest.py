from __future__ import annotations

import pytest

from specref.config.http_resilience import ResilienceConfig, RetryPolicy

_SPECREF_ENV_VARS = (
    "SPECREF_OUTPUT_DIR",
    "SPECREF_CACHE_DIR",
    "SPECREF_HTTP_CACHE",
    "SPECREF_CATALOGS",
    "SPECREF_ISO_JTC1_SC29_URLS",
    "SPECREF_ETSI_URLS",
    "SPECREF_SCTE_URLS",
)


@pytest.fixture(autouse=True)
def _clean_specref_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _SPECREF_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def offline_resilience() -> ResilienceConfig:
    return ResilienceConfig(name="test", cache=None, retry=RetryPolicy(total=0))
