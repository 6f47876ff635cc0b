"""
High level client for the liked-posts subset of the X API v2.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

from likes_client import endpoints
from likes_client.clients.http_client import RequestExecutor
from likes_client.config import ClientCredentials
from likes_client.endpoints import Endpoint
from likes_client.exceptions import ApiResponseError, RateLimitExceeded
from likes_client.results import RateLimited, RequestFailed, RequestOutcome, Success

logger = logging.getLogger(__name__)


class LikesClient:
    """
    Reads use the bearer token, writes are signed with the OAuth 1.0a
    credentials given at construction.

    Endpoints are passed through each call rather than kept on the instance,
    so one client can serve concurrent callers; only the bearer token is
    mutable.
    """

    def __init__(
        self,
        credentials: ClientCredentials,
        *,
        bearer_token: str | None = None,
        executor: RequestExecutor | None = None,
    ) -> None:
        self._credentials = credentials
        self._bearer_token = bearer_token
        self._executor = executor or RequestExecutor()

    @property
    def credentials(self) -> ClientCredentials:
        return self._credentials

    def set_bearer_token(self, token: str) -> None:
        self._bearer_token = token

    def get_me(self) -> Any:
        return self.perform_request(endpoints.me())

    def delete_like(self, user_id: int | str, post_id: int | str) -> Any:
        return self.perform_request(endpoints.delete_like(user_id, post_id))

    def get_liked_posts(self, user_id: int | str, next_token: str | None = None) -> Any:
        return self.perform_request(endpoints.liked_posts(user_id, next_token))

    def iter_liked_posts(
        self, user_id: int | str, next_token: str | None = None
    ) -> Iterator[Any]:
        """
        Yield liked-post pages, following ``meta.next_token`` to the end.

        A rate limit mid-way propagates as ``RateLimitExceeded``; already
        yielded pages stay with the caller.
        """

        token = next_token
        seen: set[str] = {next_token} if next_token else set()
        while True:
            page = self.get_liked_posts(user_id, token)
            yield page
            meta = page.get("meta") if isinstance(page, Mapping) else None
            token = meta.get("next_token") if isinstance(meta, Mapping) else None
            if not token:
                return
            if token in seen:
                logger.warning("Liked posts of %s repeated token %s; stopping", user_id, token)
                return
            seen.add(token)
            logger.debug("Following liked posts of %s to next page", user_id)

    def get_expanded_posts(self, ids: Iterable[int | str]) -> Any:
        return self.perform_request(endpoints.expanded_posts(ids))

    def get_by_id(self, path: str, resource_id: int | str) -> Any:
        """GET a single resource below ``path``, e.g. ``tweets`` + ``20``."""

        return self.perform_request(endpoints.custom(path).with_resource_id(resource_id))

    def perform_request(
        self,
        endpoint: Endpoint | str,
        method: str | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Send a request and return the decoded JSON unchanged.

        ``endpoint`` may be a relative path, in which case ``method`` (default
        GET) decides the auth strategy. An :class:`Endpoint` carries its own
        method; passing a different ``method`` alongside it raises
        ``ValueError``. For GET requests a numeric ``id`` in ``body`` is moved
        into the path (``users/me`` + ``{"id": 42}`` -> ``users/me/42``).
        """

        if isinstance(endpoint, str):
            endpoint = endpoints.custom(endpoint, method or "GET")
        elif method is not None and method.upper() != endpoint.method:
            raise ValueError(
                f"{endpoint.path} is declared as {endpoint.method}, not {method.upper()}."
            )
        return self._executor.perform(
            endpoint,
            credentials=self._credentials,
            bearer_token=self._bearer_token,
            body=body,
        )

    def execute(
        self,
        endpoint: Endpoint | str,
        method: str | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> RequestOutcome:
        """Like :meth:`perform_request`, but HTTP failures become tagged outcomes."""

        try:
            payload = self.perform_request(endpoint, method, body)
        except RateLimitExceeded as exc:
            return RateLimited(reset_at=exc.reset_at, endpoint=exc.endpoint)
        except ApiResponseError as exc:
            return RequestFailed(detail=str(exc), status_code=exc.code)
        return Success(payload=payload)
