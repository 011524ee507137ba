"""Internal error taxonomy for Facebook token authentication."""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from fastapi import HTTPException, status


AUTH_SCHEME = "FacebookToken"

PUBLIC_DETAIL: Mapping[str, str] = {
    "message": "Unauthorized",
    "code": "auth.unauthorized",
}


@dataclass(eq=False)
class AuthenticationError(Exception):
    """Domain-specific error describing why authentication failed.

    ``code`` is meant for server-side diagnostics only. Clients always receive
    the same detail, so a failure never reveals why a token was rejected.
    """

    message: str
    code: str = "auth.unauthorized"
    status_code: int = status.HTTP_401_UNAUTHORIZED
    headers: Mapping[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.message} ({self.code})"

    def as_http_exception(self) -> HTTPException:
        """Translate the authentication error to an HTTPException."""
        headers = {"WWW-Authenticate": AUTH_SCHEME}
        if self.headers:
            headers.update(self.headers)
        return HTTPException(
            status_code=self.status_code,
            detail=dict(PUBLIC_DETAIL),
            headers=headers,
        )


@dataclass(eq=False)
class MissingCredentialError(AuthenticationError):
    """The request declares a Facebook token but does not carry one."""

    message: str = "Missing Facebook access token"
    code: str = "auth.missing_token"


@dataclass(eq=False)
class IdentityVerificationError(AuthenticationError):
    """The token could not be confirmed as issued for the configured app."""

    message: str = "Facebook token was not issued for this application"
    code: str = "auth.identity_unverified"


@dataclass(eq=False)
class ProfileFetchError(AuthenticationError):
    """The profile request failed or its body did not match the schema."""

    message: str = "Unable to retrieve Facebook profile"
    code: str = "auth.profile_unavailable"


__all__ = [
    "AUTH_SCHEME",
    "PUBLIC_DETAIL",
    "AuthenticationError",
    "IdentityVerificationError",
    "MissingCredentialError",
    "ProfileFetchError",
]
