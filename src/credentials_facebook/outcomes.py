"""Outcomes returned by an authentication scheme."""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar
from fastapi import status
from credentials_facebook.profile import FacebookProfile


ProfileT = TypeVar("ProfileT", bound=FacebookProfile)


@dataclass(frozen=True)
class AuthSuccess(Generic[ProfileT]):
    """The credential was accepted and resolved to ``profile``."""

    profile: ProfileT

    is_success = True
    is_failure = False
    is_skip = False


@dataclass(frozen=True)
class AuthFailure:
    """The credential was meant for this scheme but was rejected."""

    status_code: int | None = status.HTTP_401_UNAUTHORIZED
    detail: Mapping[str, str] | None = None

    is_success = False
    is_failure = True
    is_skip = False


@dataclass(frozen=True)
class AuthSkip:
    """The request carries no credential for this scheme."""

    status_code: int | None = None
    detail: Mapping[str, str] | None = None

    is_success = False
    is_failure = False
    is_skip = True


AuthOutcome = AuthSuccess[ProfileT] | AuthFailure | AuthSkip


__all__ = ["AuthFailure", "AuthOutcome", "AuthSkip", "AuthSuccess"]
