from __future__ import annotations
import threading
import time
from collections.abc import Callable
from typing import TypeVar
from cachetools import Cache, LRUCache, TTLCache
from credentials_facebook.profile import FacebookProfile


ProfileT = TypeVar("ProfileT", bound=FacebookProfile)


class ProfileCache:
    """Map raw access tokens to resolved profiles, one store per schema type.

    The schema class itself is the first key, so two consumers that decode the
    same token into different shapes never share an entry. Each store is a
    bounded LRU; with ``ttl_seconds`` set, entries also expire after that many
    seconds.
    """

    def __init__(
        self,
        max_size: int = 1024,
        ttl_seconds: int = 0,
        *,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Configure the per-schema capacity and optional expiry."""
        if max_size <= 0:
            raise ValueError("max_size must be greater than zero")
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must not be negative")
        self._max_size = max_size
        self._ttl = ttl_seconds
        self._timer = timer
        self._lock = threading.RLock()
        self._stores: dict[type[FacebookProfile], Cache] = {}

    def _new_store(self) -> Cache:
        if self._ttl:
            return TTLCache(maxsize=self._max_size, ttl=self._ttl, timer=self._timer)
        return LRUCache(maxsize=self._max_size)

    def get(self, schema: type[ProfileT], token: str) -> ProfileT | None:
        """Return the profile stored for ``(schema, token)``, if any."""
        with self._lock:
            store = self._stores.get(schema)
            if store is None:
                return None
            return store.get(token)

    def put(self, schema: type[ProfileT], token: str, profile: ProfileT) -> None:
        """Store ``profile`` under ``(schema, token)``; the last write wins."""
        if not isinstance(profile, schema):
            msg = f"Expected a {schema.__qualname__} instance"
            raise TypeError(msg)
        with self._lock:
            store = self._stores.get(schema)
            if store is None:
                store = self._stores[schema] = self._new_store()
            store[token] = profile

    def clear(self) -> None:
        """Drop every cached profile for every schema."""
        with self._lock:
            self._stores.clear()

    def size(self, schema: type[FacebookProfile]) -> int:
        """Return the number of tokens cached for ``schema``."""
        with self._lock:
            store = self._stores.get(schema)
            return 0 if store is None else len(store)


__all__ = ["ProfileCache"]
