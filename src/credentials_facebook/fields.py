"""Negotiate which profile fields to request from the Graph API."""

from __future__ import annotations
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from credentials_facebook.profile import FacebookProfile


logger = logging.getLogger(__name__)


# Not exhaustive. Facebook answers 400 Bad Request for any undocumented name.
DEFAULT_VALID_FIELD_NAMES: frozenset[str] = frozenset(
    {
        # Public profile, always available
        "id",
        "first_name",
        "last_name",
        "name",
        "name_format",
        "picture",
        "short_name",
        # Only present when the user filled it in
        "middle_name",
        # No app review needed, but the user may decline
        "email",
        # App review required
        "age_range",
        "birthday",
        "friends",
        "gender",
        "hometown",
        "likes",
        "link",
        "location",
        "photos",
        "posts",
        "tagged_places",
    }
)


def declared_fields(schema: type[FacebookProfile]) -> tuple[str, ...]:
    """Return the attribute names ``schema`` wants, in declaration order."""
    explicit = schema.facebook_fields
    if explicit is not None:
        names: Iterable[str] = explicit
    else:
        names = (info.alias or name for name, info in schema.model_fields.items())
    return tuple(dict.fromkeys(name.strip() for name in names if name.strip()))


def negotiate_fields(
    schema: type[FacebookProfile],
    valid_fields: Iterable[str] | None = None,
) -> str:
    """Return the comma-joined fields to request for ``schema``.

    The result keeps the schema's declaration order and contains only names
    found in ``valid_fields`` (the schema's ``valid_field_names`` when
    omitted). Declared names Facebook does not serve are dropped and logged.
    """
    if valid_fields is None:
        valid_fields = schema.valid_field_names
    valid = frozenset(valid_fields)
    wanted = declared_fields(schema)
    requested = [name for name in wanted if name in valid]
    dropped = [name for name in wanted if name not in valid]
    if dropped:
        logger.warning(
            "Profile schema %s declares fields Facebook will not serve: %s",
            schema.__qualname__,
            ", ".join(dropped),
            extra={"schema": schema.__qualname__, "dropped_fields": dropped},
        )
    return ",".join(requested)


__all__ = ["DEFAULT_VALID_FIELD_NAMES", "declared_fields", "negotiate_fields"]
