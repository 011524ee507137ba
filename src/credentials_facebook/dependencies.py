"""FastAPI integration for Facebook token authentication."""

from __future__ import annotations
from collections.abc import Awaitable, Callable
from typing import Any
from fastapi import Request
from credentials_facebook.chain import AuthenticationScheme
from credentials_facebook.errors import AuthenticationError
from credentials_facebook.profile import FacebookProfile


ProfileDependency = Callable[[Request], Awaitable[Any]]


def require_facebook_profile(
    scheme: AuthenticationScheme,
    *,
    auto_error: bool = True,
) -> ProfileDependency:
    """Build a FastAPI dependency that authenticates requests with ``scheme``.

    The resolved profile is returned and attached to ``request.state.auth``.
    Rejected credentials always yield a 401. Requests that no scheme claims
    yield a 401 as well, unless ``auto_error`` is False, in which case the
    dependency resolves to None.
    """

    async def dependency(request: Request) -> FacebookProfile | None:
        outcome = await scheme.authenticate(request.headers)
        if outcome.is_success:
            request.state.auth = outcome.profile
            return outcome.profile
        if outcome.is_skip and not auto_error:
            request.state.auth = None
            return None
        status_code = outcome.status_code or AuthenticationError.status_code
        error = AuthenticationError("Unauthorized", status_code=status_code)
        raise error.as_http_exception()

    return dependency


__all__ = ["ProfileDependency", "require_facebook_profile"]
