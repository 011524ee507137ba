from __future__ import annotations
import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any
from credentials_facebook.config import get_settings


DEFAULT_GRAPH_URL = "https://graph.facebook.com"


@dataclass(frozen=True)
class FacebookAuthSettings:
    """Resolved configuration for Facebook token authentication."""

    app_id: str
    graph_url: str = DEFAULT_GRAPH_URL
    graph_api_version: str | None = None
    timeout: float = 5.0
    cache_max_size: int = 1024
    cache_ttl: int = 0
    token_type_header: str = "X-token-type"
    token_type: str = "FacebookToken"
    token_header: str = "access_token"
    extra_fields: frozenset[str] = field(default_factory=frozenset)

    @property
    def graph_base_url(self) -> str:
        """Return the Graph API root, including the version prefix when set."""
        base = self.graph_url.rstrip("/")
        if self.graph_api_version:
            return f"{base}/{self.graph_api_version.strip('/')}"
        return base


def _split_field_names(raw: str) -> list[Any]:
    """Split ``raw`` as a JSON list, or as comma/space separated names."""
    stripped = raw.strip()
    if not stripped:
        return []
    if stripped.startswith("["):
        try:
            parsed = json.loads(stripped)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, list):
            return parsed
    return stripped.replace(",", " ").split()


def _field_names(value: Any) -> set[str]:
    """Collect field names from a string, a sequence or nested sequences."""
    if value is None:
        return set()
    if isinstance(value, str):
        names: set[str] = set()
        for item in _split_field_names(value):
            if isinstance(item, str):
                name = item.strip()
                if name:
                    names.add(name)
            else:
                names.update(_field_names(item))
        return names
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        names = set()
        for item in value:
            names.update(_field_names(item))
        return names

    text = str(value).strip()
    return {text} if text else set()


def load_auth_settings(*, refresh: bool = False) -> FacebookAuthSettings:
    """Load Facebook authentication settings from the environment."""
    config = get_settings(refresh=refresh)
    return FacebookAuthSettings(
        app_id=config.app_id,
        graph_url=config.graph_url,
        graph_api_version=config.graph_api_version,
        timeout=config.timeout,
        cache_max_size=config.cache_max_size,
        cache_ttl=config.cache_ttl,
        token_type_header=config.token_type_header,
        token_type=config.token_type,
        token_header=config.token_header,
        extra_fields=frozenset(_field_names(config.extra_fields)),
    )


__all__ = ["DEFAULT_GRAPH_URL", "FacebookAuthSettings", "load_auth_settings"]
