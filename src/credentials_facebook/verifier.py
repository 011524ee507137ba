from __future__ import annotations
import json
import logging
from collections.abc import Mapping
import httpx
from credentials_facebook.graph import GraphClient, token_fingerprint


logger = logging.getLogger(__name__)


class AppIdentityVerifier:
    """Confirm that tokens were issued by the expected Facebook application.

    Facebook user ids are scoped to the issuing application, so a token from a
    different app could carry an id that collides with one of ours. Every
    token is therefore checked against ``/app`` before its profile is trusted.
    """

    def __init__(self, graph: GraphClient, app_id: str) -> None:
        """Store the transport and the application id tokens must match."""
        self._graph = graph
        self._app_id = app_id

    @property
    def app_id(self) -> str:
        """Expose the expected application id."""
        return self._app_id

    async def verify(self, token: str) -> bool:
        """Return True when ``token`` belongs to the configured application."""
        fingerprint = token_fingerprint(token)
        try:
            response = await self._graph.get("app", token)
        except httpx.HTTPError as exc:
            logger.warning(
                "Facebook app lookup failed: %s",
                exc,
                extra={"reason": "transport_error", "token": fingerprint},
            )
            return False

        if response.status_code != httpx.codes.OK:
            logger.warning(
                "Facebook app lookup returned status %s",
                response.status_code,
                extra={
                    "reason": "bad_status",
                    "status_code": response.status_code,
                    "token": fingerprint,
                },
            )
            return False

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            payload = None
        if not isinstance(payload, Mapping) or payload.get("id") is None:
            logger.warning(
                "Facebook app lookup returned an unexpected body",
                extra={"reason": "malformed_body", "token": fingerprint},
            )
            return False

        received = str(payload["id"])
        if received != self._app_id:
            logger.error(
                "Facebook token was issued for app %s, expected %s",
                received,
                self._app_id,
                extra={"reason": "app_id_mismatch", "token": fingerprint},
            )
            return False
        return True


__all__ = ["AppIdentityVerifier"]
