from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Generic, TypeVar
import httpx
from credentials_facebook.cache import ProfileCache
from credentials_facebook.errors import (
    AuthenticationError,
    IdentityVerificationError,
    MissingCredentialError,
)
from credentials_facebook.fetcher import ProfileFetcher
from credentials_facebook.fields import negotiate_fields
from credentials_facebook.graph import GraphClient, token_fingerprint
from credentials_facebook.outcomes import (
    AuthFailure,
    AuthOutcome,
    AuthSkip,
    AuthSuccess,
)
from credentials_facebook.profile import FacebookProfile
from credentials_facebook.settings import FacebookAuthSettings
from credentials_facebook.verifier import AppIdentityVerifier


logger = logging.getLogger(__name__)

ProfileT = TypeVar("ProfileT", bound=FacebookProfile)


def _header(headers: Mapping[str, str], name: str) -> str | None:
    """Look up ``name`` case-insensitively in ``headers``."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


class FacebookTokenAuthenticator(Generic[ProfileT]):
    """Authenticate requests carrying a Facebook OAuth access token.

    A request opts in by sending the token-type header (``X-token-type:
    FacebookToken`` by default) together with the token header
    (``access_token``). Tokens seen before are answered from ``cache``;
    otherwise the token's application is verified and the profile fetched,
    at most two Graph API calls per unseen token.
    """

    def __init__(
        self,
        schema: type[ProfileT],
        settings: FacebookAuthSettings,
        *,
        cache: ProfileCache | None = None,
        verifier: AppIdentityVerifier | None = None,
        fetcher: ProfileFetcher | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Wire the pipeline for ``schema`` and negotiate its field list."""
        self._schema = schema
        self._settings = settings
        if cache is None:
            cache = ProfileCache(settings.cache_max_size, settings.cache_ttl)
        self._cache = cache
        graph = GraphClient(settings, client=client)
        self._verifier = verifier or AppIdentityVerifier(graph, settings.app_id)
        self._fetcher = fetcher or ProfileFetcher(graph)
        valid_fields = schema.valid_field_names | settings.extra_fields
        self._fields = negotiate_fields(schema, valid_fields)
        logger.info(
            "Facebook token authentication ready for %s (fields=%s)",
            schema.__qualname__,
            self._fields,
        )

    @property
    def schema(self) -> type[ProfileT]:
        """Expose the profile schema this authenticator resolves to."""
        return self._schema

    @property
    def settings(self) -> FacebookAuthSettings:
        """Expose the resolved settings."""
        return self._settings

    @property
    def cache(self) -> ProfileCache:
        """Expose the profile cache owned by the integrator."""
        return self._cache

    @property
    def field_list(self) -> str:
        """Return the negotiated, comma-joined field list."""
        return self._fields

    async def authenticate(
        self, headers: Mapping[str, str]
    ) -> AuthOutcome[ProfileT]:
        """Return the outcome of authenticating a request with ``headers``."""
        token_type = _header(headers, self._settings.token_type_header)
        if token_type != self._settings.token_type:
            return AuthSkip()

        token = _header(headers, self._settings.token_header) or ""
        try:
            if not token.strip():
                raise MissingCredentialError()
            profile = await self.resolve(token)
        except AuthenticationError as exc:
            logger.info(
                "Facebook token authentication failed: %s",
                exc.message,
                extra={"code": exc.code},
            )
            return AuthFailure(status_code=exc.status_code)
        return AuthSuccess(profile)

    async def resolve(self, token: str) -> ProfileT:
        """Return the profile for ``token``, consulting the cache first."""
        cached = self._cache.get(self._schema, token)
        if cached is not None:
            return cached

        fingerprint = token_fingerprint(token)
        if not await self._verifier.verify(token):
            raise IdentityVerificationError()

        profile = await self._fetcher.fetch(token, self._fields, self._schema)
        self._cache.put(self._schema, token, profile)
        logger.debug(
            "Cached Facebook profile for %s",
            self._schema.__qualname__,
            extra={"token": fingerprint},
        )
        return profile


__all__ = ["FacebookTokenAuthenticator"]
