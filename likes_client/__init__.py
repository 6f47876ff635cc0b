"""
Client for the liked-posts subset of the X (Twitter) API v2.
"""

from likes_client.client import LikesClient
from likes_client.clients.http_client import API_BASE_URI, RequestExecutor
from likes_client.config import ClientCredentials, ConfigManager
from likes_client.endpoints import AuthStrategy, Endpoint
from likes_client.exceptions import (
    ApiResponseError,
    ConfigurationError,
    LikesClientError,
    RateLimitExceeded,
)
from likes_client.factory import LikesClientFactory
from likes_client.results import RateLimited, RequestFailed, RequestOutcome, Success

__all__ = [
    "API_BASE_URI",
    "ApiResponseError",
    "AuthStrategy",
    "ClientCredentials",
    "ConfigManager",
    "ConfigurationError",
    "Endpoint",
    "LikesClient",
    "LikesClientError",
    "LikesClientFactory",
    "RateLimitExceeded",
    "RateLimited",
    "RequestExecutor",
    "RequestFailed",
    "RequestOutcome",
    "Success",
]
