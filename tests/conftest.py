"""Shared pytest fixtures for Facebook token authentication tests."""

from __future__ import annotations
from collections.abc import Iterator
import pytest
from credentials_facebook.cache import ProfileCache
from credentials_facebook.config import reset_settings
from credentials_facebook.settings import FacebookAuthSettings


GRAPH_URL = "https://graph.facebook.com"
APP_ID = "123"

_ENV_KEYS = (
    "FACEBOOK_AUTH_APP_ID",
    "FACEBOOK_AUTH_GRAPH_URL",
    "FACEBOOK_AUTH_GRAPH_API_VERSION",
    "FACEBOOK_AUTH_TIMEOUT",
    "FACEBOOK_AUTH_CACHE_MAX_SIZE",
    "FACEBOOK_AUTH_CACHE_TTL",
    "FACEBOOK_AUTH_TOKEN_TYPE_HEADER",
    "FACEBOOK_AUTH_TOKEN_TYPE",
    "FACEBOOK_AUTH_TOKEN_HEADER",
    "FACEBOOK_AUTH_EXTRA_FIELDS",
)


@pytest.fixture
def settings() -> FacebookAuthSettings:
    """Return settings expecting tokens issued for app ``123``."""
    return FacebookAuthSettings(app_id=APP_ID, graph_url=GRAPH_URL, timeout=2.0)


@pytest.fixture
def profile_cache() -> ProfileCache:
    """Return an empty profile cache."""
    return ProfileCache(max_size=16)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Remove plugin environment variables and forget cached settings."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield monkeypatch
    monkeypatch.undo()
    reset_settings()
