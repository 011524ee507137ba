"""Tests for the authentication error taxonomy."""

from __future__ import annotations
import pytest
from fastapi import HTTPException
from credentials_facebook.errors import (
    AuthenticationError,
    IdentityVerificationError,
    MissingCredentialError,
    ProfileFetchError,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (MissingCredentialError(), "auth.missing_token"),
        (IdentityVerificationError(), "auth.identity_unverified"),
        (ProfileFetchError(), "auth.profile_unavailable"),
        (ProfileFetchError(code="auth.profile_decode"), "auth.profile_decode"),
    ],
)
def test_errors_share_public_detail(error: AuthenticationError, code: str) -> None:
    """Internal codes differ while the client-facing response does not."""
    assert error.code == code
    assert code in str(error)

    exc = error.as_http_exception()

    assert isinstance(exc, HTTPException)
    assert exc.status_code == 401
    assert exc.detail == {"message": "Unauthorized", "code": "auth.unauthorized"}
    assert exc.headers == {"WWW-Authenticate": "FacebookToken"}


def test_extra_headers_are_merged() -> None:
    error = AuthenticationError(
        "Unauthorized", status_code=403, headers={"X-Reason": "blocked"}
    )

    exc = error.as_http_exception()

    assert exc.status_code == 403
    assert exc.headers == {"WWW-Authenticate": "FacebookToken", "X-Reason": "blocked"}
