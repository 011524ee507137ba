"""Runtime configuration helpers for the Facebook token plugin."""

from __future__ import annotations
from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ENVVAR_PREFIX = "FACEBOOK_AUTH_"


class FacebookAuthConfig(BaseSettings):
    """Raw settings read from ``FACEBOOK_AUTH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix=ENVVAR_PREFIX,
        env_file=".env",
        extra="ignore",
    )

    app_id: str
    graph_url: str = "https://graph.facebook.com"
    graph_api_version: str | None = None
    timeout: float = Field(default=5.0, gt=0)
    cache_max_size: int = Field(default=1024, gt=0)
    cache_ttl: int = Field(default=0, ge=0)
    token_type_header: str = "X-token-type"
    token_type: str = "FacebookToken"
    token_header: str = "access_token"
    # Comma/space separated names or a JSON list; parsed by load_auth_settings.
    extra_fields: str | None = None

    @field_validator("app_id")
    @classmethod
    def _require_app_id(cls, value: str) -> str:
        candidate = value.strip()
        if not candidate:
            msg = f"{ENVVAR_PREFIX}APP_ID must be set to the Facebook application id."
            raise ValueError(msg)
        return candidate

    @field_validator("graph_url")
    @classmethod
    def _strip_graph_url(cls, value: str) -> str:
        return value.strip().rstrip("/") or "https://graph.facebook.com"

    @field_validator("graph_api_version")
    @classmethod
    def _strip_version(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip().strip("/") or None

    @field_validator("token_type_header", "token_type", "token_header")
    @classmethod
    def _require_header_value(cls, value: str) -> str:
        candidate = value.strip()
        if not candidate:
            raise ValueError("Header names and token type must not be blank.")
        return candidate


@lru_cache(maxsize=1)
def _load_settings() -> FacebookAuthConfig:
    """Load settings once and cache the validated instance."""
    return FacebookAuthConfig()  # type: ignore[call-arg]


def get_settings(*, refresh: bool = False) -> FacebookAuthConfig:
    """Return the cached settings, reloading them if requested."""
    if refresh:
        _load_settings.cache_clear()
    return _load_settings()


def reset_settings() -> None:
    """Forget cached settings so the next access re-reads the environment."""
    _load_settings.cache_clear()


__all__ = ["ENVVAR_PREFIX", "FacebookAuthConfig", "get_settings", "reset_settings"]
