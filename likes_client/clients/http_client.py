"""
Request execution against the X API v2 and HTTP failure classification.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import requests

from likes_client.auth import build_transport
from likes_client.config import ClientCredentials
from likes_client.endpoints import Endpoint
from likes_client.exceptions import ApiResponseError, RateLimitExceeded
from likes_client.rate_limit import RESET_HEADER

API_BASE_URI = "https://api.twitter.com/2/"

logger = logging.getLogger(__name__)


def classify_http_error(exc: requests.HTTPError, endpoint: Endpoint) -> ApiResponseError:
    """Translate a transport-raised 4xx/5xx into a domain exception."""

    response = exc.response
    status = response.status_code if response is not None else None

    if status == 429:
        reset_at = _first_header_value(response.headers, RESET_HEADER)
        logger.warning("Rate limited on %s, reset at %s", endpoint.path, reset_at)
        return RateLimitExceeded(reset_at=reset_at, endpoint=endpoint.path)

    raw = response.text if response is not None else str(exc)
    logger.warning("%s %s failed with status %s", endpoint.method, endpoint.path, status)
    return ApiResponseError(json.dumps(raw), code=status)


def resolve_resource_id(
    endpoint: Endpoint, body: Mapping[str, Any] | None
) -> tuple[Endpoint, dict[str, Any]]:
    """
    Move a numeric ``id`` from a GET body into the endpoint path.

    ``perform`` on ``users/me`` with ``{"id": 42}`` therefore fetches
    ``users/me/42`` and sends no ``id`` field.
    """

    payload = dict(body or {})
    if endpoint.method != "GET" or not _is_numeric(payload.get("id")):
        return endpoint, payload

    resource_id = payload.pop("id")
    return endpoint.with_resource_id(resource_id), payload


class RequestExecutor:
    """Runs one authenticated request per call; keeps no per-call state."""

    def __init__(self, base_uri: str = API_BASE_URI) -> None:
        self._base_uri = base_uri

    def perform(
        self,
        endpoint: Endpoint,
        *,
        credentials: ClientCredentials,
        bearer_token: str | None,
        body: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Send ``endpoint`` and return the decoded JSON body.

        Raises:
            RateLimitExceeded: on HTTP 429.
            ApiResponseError: on any other HTTP failure.
            ConfigurationError: when the required credentials are missing.
            requests.RequestException: on transport failures.
            requests.exceptions.JSONDecodeError: when the body is not valid JSON.
        """

        endpoint, payload = resolve_resource_id(endpoint, body)
        session, headers = build_transport(endpoint, credentials, bearer_token)
        url = f"{self._base_uri}{endpoint.path}"

        logger.debug("%s %s (%s auth)", endpoint.method, endpoint.path, endpoint.auth.value)
        with session:
            response = session.request(
                endpoint.method,
                url,
                headers=headers,
                json=payload or None,
            )
            try:
                response.raise_for_status()
            except requests.HTTPError as exc:
                raise classify_http_error(exc, endpoint) from exc

            decoded = response.json()

        if response.status_code >= 400:
            error: dict[str, Any] = {"message": "cURL error"}
            if decoded:
                error["details"] = decoded
            raise ApiResponseError(
                json.dumps(error), code=response.status_code, details=decoded or None
            )

        return decoded


def _first_header_value(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is None:
        return None
    return value.split(",")[0].strip()


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and value.isascii() and value.isdigit()
