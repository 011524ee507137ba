"""Thin async transport for the Facebook Graph API."""

from __future__ import annotations
import hashlib
from collections.abc import Mapping
import httpx
from credentials_facebook.settings import FacebookAuthSettings


def token_fingerprint(token: str) -> str:
    """Return a short, non-reversible identifier safe to log for ``token``."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()[:12]


class GraphClient:
    """Issue token-authenticated GET requests against the Graph API.

    When ``client`` is provided it is reused and left open; otherwise a
    short-lived ``httpx.AsyncClient`` is created for every request.
    """

    def __init__(
        self,
        settings: FacebookAuthSettings,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Bind the transport to the resolved settings."""
        self._settings = settings
        self._client = client

    @property
    def base_url(self) -> str:
        """Expose the Graph API root used for requests."""
        return self._settings.graph_base_url

    def url_for(self, path: str) -> str:
        """Return the absolute URL for a Graph API ``path``."""
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get(
        self,
        path: str,
        token: str,
        params: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send a GET request for ``path`` authenticated with ``token``.

        Transport failures, including timeouts, surface as ``httpx.HTTPError``.
        """
        query = {"access_token": token}
        if params:
            query.update(params)
        headers = {"Accept": "application/json"}
        url = self.url_for(path)
        if self._client is not None:
            return await self._client.get(
                url,
                params=query,
                headers=headers,
                timeout=self._settings.timeout,
            )
        async with httpx.AsyncClient(timeout=self._settings.timeout) as client:
            return await client.get(url, params=query, headers=headers)


__all__ = ["GraphClient", "token_fingerprint"]
