"""
Endpoint builders for the supported X API v2 operations.

Every builder returns a fresh :class:`Endpoint` value that is handed to the
request executor for a single call; nothing is stored on the client.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable

EXPANDED_POST_PARAMS = (
    "expansions=referenced_tweets.id,author_id,attachments.media_keys"
    "&tweet.fields=created_at"
    "&user.fields=id,name,username,profile_image_url"
    "&media.fields=url,type,width,height,preview_image_url,variants"
)


class AuthStrategy(str, Enum):
    """Authentication applied to an outbound request."""

    BEARER = "bearer"
    OAUTH1 = "oauth1"

    @classmethod
    def for_method(cls, method: str) -> "AuthStrategy":
        return cls.BEARER if method.upper() == "GET" else cls.OAUTH1


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Relative API path (query string included) plus how to call it."""

    path: str
    method: str = "GET"
    auth: AuthStrategy | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        if self.auth is None:
            object.__setattr__(self, "auth", AuthStrategy.for_method(self.method))

    def with_resource_id(self, resource_id: int | str) -> "Endpoint":
        """Return a copy addressing ``{path}/{resource_id}``, keeping the query."""

        base, sep, query = self.path.partition("?")
        return replace(self, path=f"{base.rstrip('/')}/{resource_id}{sep}{query}")


def me() -> Endpoint:
    return Endpoint("users/me", "GET", AuthStrategy.BEARER)


def delete_like(user_id: int | str, post_id: int | str) -> Endpoint:
    return Endpoint(f"users/{user_id}/likes/{post_id}", "DELETE", AuthStrategy.OAUTH1)


def liked_posts(user_id: int | str, next_token: str | None = None) -> Endpoint:
    """Build the liked posts listing; ``next_token`` selects a later page."""

    path = f"users/{user_id}/liked_tweets?tweet.fields=author_id"
    if next_token:
        path += f"&pagination_token={next_token}"
    return Endpoint(path, "GET", AuthStrategy.BEARER)


def expanded_posts(ids: Iterable[int | str]) -> Endpoint:
    """
    Build the post lookup with author, referenced post and media expansions.

    Raises:
        ValueError: when ``ids`` is empty.
    """

    id_list = [str(value) for value in ids]
    if not id_list:
        raise ValueError("At least one post id is required.")
    return Endpoint(
        f"tweets?ids={','.join(id_list)}&{EXPANDED_POST_PARAMS}",
        "GET",
        AuthStrategy.BEARER,
    )


def custom(path: str, method: str = "GET") -> Endpoint:
    return Endpoint(path, method)
