"""
Domain specific exception hierarchy for the likes_client package.
"""

from __future__ import annotations

import json
from typing import Any


class LikesClientError(Exception):
    """Base exception for all library errors."""


class ConfigurationError(LikesClientError):
    """Raised when required configuration or credentials are missing."""


class ApiResponseError(LikesClientError):
    """Raised when the X API answers with an HTTP failure."""

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details


class RateLimitExceeded(ApiResponseError):
    """Raised when the X API enforces a rate limit (HTTP 429)."""

    def __init__(self, *, reset_at: str | None, endpoint: str) -> None:
        payload = {"error": "Too many requests", "timestamp": reset_at, "uri": endpoint}
        super().__init__(json.dumps(payload), code=429)
        self.reset_at = reset_at
        self.endpoint = endpoint
