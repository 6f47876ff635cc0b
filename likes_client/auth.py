"""
Authentication selection for outbound requests.

Bearer-authenticated calls carry an ``Authorization`` header built here;
OAuth 1.0a calls are signed by the auth object tweepy derives from the user
credentials, so no header is set by hand.
"""

from __future__ import annotations

import requests
import tweepy

from likes_client.config import ClientCredentials
from likes_client.endpoints import AuthStrategy, Endpoint
from likes_client.exceptions import ConfigurationError

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def build_transport(
    endpoint: Endpoint,
    credentials: ClientCredentials,
    bearer_token: str | None,
) -> tuple[requests.Session, dict[str, str]]:
    """
    Create a session and header mapping for the endpoint's auth strategy.

    Raises:
        ConfigurationError: when the strategy's credentials are missing.
        ValueError: when the declared strategy contradicts the HTTP method.
    """

    expected = AuthStrategy.for_method(endpoint.method)
    if endpoint.auth is not expected:
        raise ValueError(
            f"{endpoint.method} {endpoint.path} declares {endpoint.auth.value} auth, "
            f"expected {expected.value}."
        )

    headers = dict(JSON_HEADERS)
    if endpoint.auth is AuthStrategy.BEARER:
        if not bearer_token:
            raise ConfigurationError("A bearer token is required for read requests.")
        headers["Authorization"] = f"Bearer {bearer_token}"
        return requests.Session(), headers

    auth = oauth1_auth(credentials)
    session = requests.Session()
    session.auth = auth
    return session, headers


def oauth1_auth(credentials: ClientCredentials) -> requests.auth.AuthBase:
    if not credentials.is_complete():
        raise ConfigurationError(
            "Consumer key/secret and access token/secret are required for write requests."
        )

    handler = tweepy.OAuth1UserHandler(
        credentials.consumer_key,
        credentials.consumer_secret,
        credentials.access_token,
        credentials.access_token_secret,
    )
    return handler.apply_auth()
