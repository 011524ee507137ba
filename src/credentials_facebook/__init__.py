"""Authenticate requests with Facebook OAuth access tokens."""

from credentials_facebook.authenticator import FacebookTokenAuthenticator
from credentials_facebook.cache import ProfileCache
from credentials_facebook.chain import AuthenticationChain, AuthenticationScheme
from credentials_facebook.dependencies import require_facebook_profile
from credentials_facebook.errors import (
    AuthenticationError,
    IdentityVerificationError,
    MissingCredentialError,
    ProfileFetchError,
)
from credentials_facebook.fetcher import ProfileFetcher
from credentials_facebook.fields import (
    DEFAULT_VALID_FIELD_NAMES,
    declared_fields,
    negotiate_fields,
)
from credentials_facebook.outcomes import (
    AuthFailure,
    AuthOutcome,
    AuthSkip,
    AuthSuccess,
)
from credentials_facebook.logging_config import configure_logging, get_logger
from credentials_facebook.profile import FacebookProfile, FacebookTokenProfile
from credentials_facebook.settings import FacebookAuthSettings, load_auth_settings
from credentials_facebook.verifier import AppIdentityVerifier


__all__ = [
    "DEFAULT_VALID_FIELD_NAMES",
    "AppIdentityVerifier",
    "AuthFailure",
    "AuthOutcome",
    "AuthSkip",
    "AuthSuccess",
    "AuthenticationChain",
    "AuthenticationError",
    "AuthenticationScheme",
    "FacebookAuthSettings",
    "FacebookProfile",
    "FacebookTokenAuthenticator",
    "FacebookTokenProfile",
    "IdentityVerificationError",
    "MissingCredentialError",
    "ProfileCache",
    "ProfileFetchError",
    "ProfileFetcher",
    "configure_logging",
    "declared_fields",
    "get_logger",
    "load_auth_settings",
    "negotiate_fields",
    "require_facebook_profile",
]
