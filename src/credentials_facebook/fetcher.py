from __future__ import annotations
import logging
from typing import TypeVar
import httpx
from pydantic import ValidationError
from credentials_facebook.errors import ProfileFetchError
from credentials_facebook.graph import GraphClient, token_fingerprint
from credentials_facebook.profile import FacebookProfile


logger = logging.getLogger(__name__)

ProfileT = TypeVar("ProfileT", bound=FacebookProfile)


class ProfileFetcher:
    """Retrieve the token subject's profile and decode it into a schema."""

    def __init__(self, graph: GraphClient) -> None:
        """Store the transport used for ``/me`` requests."""
        self._graph = graph

    async def fetch(
        self, token: str, fields: str, schema: type[ProfileT]
    ) -> ProfileT:
        """Return ``schema`` decoded from ``/me`` or raise ProfileFetchError."""
        fingerprint = token_fingerprint(token)
        try:
            response = await self._graph.get("me", token, {"fields": fields})
        except httpx.HTTPError as exc:
            logger.warning(
                "Facebook profile request failed: %s",
                exc,
                extra={"reason": "transport_error", "token": fingerprint},
            )
            raise ProfileFetchError(code="auth.profile_transport") from exc

        if response.status_code != httpx.codes.OK:
            logger.error(
                "Facebook profile request returned status %s: %s",
                response.status_code,
                response.text,
                extra={
                    "reason": "bad_status",
                    "status_code": response.status_code,
                    "token": fingerprint,
                },
            )
            raise ProfileFetchError(code="auth.profile_status")

        # Partial profiles are never returned; a missing required field fails.
        try:
            return schema.model_validate_json(response.content)
        except ValidationError as exc:
            logger.error(
                "Failed to decode %s from Facebook response: %s",
                schema.__qualname__,
                exc,
                extra={"reason": "decode_error", "token": fingerprint},
            )
            logger.debug("Facebook response body: %s", response.text)
            raise ProfileFetchError(code="auth.profile_decode") from exc


__all__ = ["ProfileFetcher", "ProfileT"]
