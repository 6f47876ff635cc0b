"""
Factory for creating LikesClient instances from stored configuration.
"""

from __future__ import annotations

from likes_client.client import LikesClient
from likes_client.clients.http_client import RequestExecutor
from likes_client.config import ClientCredentials, ConfigManager
from likes_client.exceptions import ConfigurationError


class LikesClientFactory:
    """Factory for creating properly initialized LikesClient instances."""

    @staticmethod
    def create_from_config(
        config_manager: ConfigManager,
        *,
        executor: RequestExecutor | None = None,
    ) -> LikesClient:
        """
        Create a LikesClient from the credentials and bearer token on record.

        Raises:
            ConfigurationError: If credentials are missing or incomplete
        """
        credentials = config_manager.load_credentials()
        bearer_token = config_manager.load_bearer_token()
        return LikesClientFactory.create_from_credentials(
            credentials, bearer_token=bearer_token, executor=executor
        )

    @staticmethod
    def create_from_credentials(
        credentials: ClientCredentials,
        *,
        bearer_token: str | None = None,
        executor: RequestExecutor | None = None,
    ) -> LikesClient:
        """
        Create a LikesClient directly from credentials.

        Raises:
            ConfigurationError: If required credentials are missing
        """
        if not credentials.consumer_key or not credentials.consumer_secret:
            raise ConfigurationError("API key and secret are required")

        if not credentials.access_token or not credentials.access_token_secret:
            raise ConfigurationError("Access token and secret are required")

        return LikesClient(credentials, bearer_token=bearer_token, executor=executor)
