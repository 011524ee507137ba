"""Profile schemas decoded from Facebook Graph API responses."""

from __future__ import annotations
from typing import ClassVar
from pydantic import BaseModel, ConfigDict
from credentials_facebook.fields import DEFAULT_VALID_FIELD_NAMES


class GraphModel(BaseModel):
    """Immutable base for structures returned by the Graph API."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class FacebookProfile(GraphModel):
    """Base class for application-defined Facebook profiles.

    Subclasses declare the attributes they want as regular pydantic fields.
    Only names present in ``valid_field_names`` are requested from Facebook;
    any other declared field must therefore be optional or have a default,
    otherwise decoding the response fails.

    ``id`` is application-scoped: it identifies the subject uniquely only
    within the OAuth application that issued the token.
    """

    facebook_fields: ClassVar[tuple[str, ...] | None] = None
    """Explicit list of attributes to request; defaults to the declared fields."""

    valid_field_names: ClassVar[frozenset[str]] = DEFAULT_VALID_FIELD_NAMES
    """Field names Facebook is known to serve for this schema."""

    id: str
    name: str

    @property
    def provider(self) -> str:
        """Return the name of the identity provider."""
        return "Facebook"


class FacebookPictureData(GraphModel):
    url: str
    height: int | None = None
    width: int | None = None
    is_silhouette: bool | None = None


class FacebookPicture(GraphModel):
    """Metadata giving access to the subject's profile picture."""

    data: FacebookPictureData


class FacebookAgeRange(GraphModel):
    min: int | None = None
    max: int | None = None


class FacebookFriendSummary(GraphModel):
    total_count: int


class FacebookFriends(GraphModel):
    data: tuple[str, ...] = ()
    summary: FacebookFriendSummary


class FacebookPage(GraphModel):
    id: str
    name: str


FacebookHometown = FacebookPage
FacebookLocation = FacebookPage


class FacebookCursors(GraphModel):
    before: str
    after: str


class FacebookPaging(GraphModel):
    cursors: FacebookCursors
    next: str | None = None
    previous: str | None = None


class FacebookLike(GraphModel):
    id: str
    name: str
    created_time: str


class FacebookLikes(GraphModel):
    data: tuple[FacebookLike, ...] = ()
    paging: FacebookPaging | None = None


class FacebookPhoto(GraphModel):
    id: str
    created_time: str
    name: str | None = None


class FacebookPhotos(GraphModel):
    data: tuple[FacebookPhoto, ...] = ()
    paging: FacebookPaging | None = None


class FacebookPost(GraphModel):
    id: str | None = None
    message: str | None = None
    created_time: str | None = None


class FacebookPostsPaging(GraphModel):
    previous: str | None = None
    next: str | None = None


class FacebookPosts(GraphModel):
    data: tuple[FacebookPost, ...] = ()
    paging: FacebookPostsPaging | None = None


class FacebookPlaceLocation(GraphModel):
    city: str | None = None
    country: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    state: str | None = None
    street: str | None = None
    zip: str | None = None


class FacebookPlace(GraphModel):
    id: str
    name: str | None = None
    location: FacebookPlaceLocation | None = None


class FacebookTaggedPlace(GraphModel):
    id: str
    created_time: str | None = None
    place: FacebookPlace | None = None


class FacebookTaggedPlaces(GraphModel):
    data: tuple[FacebookTaggedPlace, ...] = ()
    paging: FacebookPaging | None = None


class FacebookTokenProfile(FacebookProfile):
    """Ready-made profile requesting every field in the default field set.

    The public profile fields are always served. The remaining fields are
    returned only when the user granted the permission, and most of them
    require the Facebook app to pass review first.
    """

    picture: FacebookPicture | None = None
    first_name: str | None = None
    last_name: str | None = None
    name_format: str | None = None
    short_name: str | None = None

    middle_name: str | None = None
    email: str | None = None

    age_range: FacebookAgeRange | None = None
    birthday: str | None = None
    friends: FacebookFriends | None = None
    gender: str | None = None
    hometown: FacebookHometown | None = None
    likes: FacebookLikes | None = None
    link: str | None = None
    location: FacebookLocation | None = None
    photos: FacebookPhotos | None = None
    posts: FacebookPosts | None = None
    tagged_places: FacebookTaggedPlaces | None = None


__all__ = [
    "FacebookAgeRange",
    "FacebookFriendSummary",
    "FacebookFriends",
    "FacebookHometown",
    "FacebookLike",
    "FacebookLikes",
    "FacebookLocation",
    "FacebookPaging",
    "FacebookPhoto",
    "FacebookPhotos",
    "FacebookPicture",
    "FacebookPictureData",
    "FacebookPost",
    "FacebookPosts",
    "FacebookProfile",
    "FacebookTaggedPlaces",
    "FacebookTokenProfile",
    "GraphModel",
]
