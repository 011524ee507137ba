"""Ordered fallback across several authentication schemes."""

from __future__ import annotations
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable
from credentials_facebook.outcomes import AuthFailure, AuthOutcome


logger = logging.getLogger(__name__)


@runtime_checkable
class AuthenticationScheme(Protocol):
    """Anything that can turn request headers into an outcome."""

    async def authenticate(self, headers: Mapping[str, str]) -> AuthOutcome[Any]:
        """Return success, failure, or skip for the given request headers."""
        ...  # pragma: no cover


class AuthenticationChain:
    """Try each scheme in order until one claims the request.

    A scheme that skips hands the request to the next one. The first success
    or failure is final. When every scheme skips, the request is rejected.
    """

    def __init__(self, schemes: Sequence[AuthenticationScheme]) -> None:
        """Store the schemes in priority order."""
        self._schemes = tuple(schemes)

    @property
    def schemes(self) -> tuple[AuthenticationScheme, ...]:
        """Expose the configured schemes."""
        return self._schemes

    async def authenticate(self, headers: Mapping[str, str]) -> AuthOutcome[Any]:
        """Return the first non-skip outcome, or a failure when all skip."""
        for scheme in self._schemes:
            outcome = await scheme.authenticate(headers)
            if not outcome.is_skip:
                return outcome
        logger.debug("No authentication scheme recognised the request")
        return AuthFailure()


__all__ = ["AuthenticationChain", "AuthenticationScheme"]
