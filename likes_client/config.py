"""
Configuration management utilities for likes_client.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Mapping, Sequence

from dotenv import dotenv_values

from likes_client.exceptions import ConfigurationError

ENV_VAR_MAP = {
    "consumer_key": "TWITTER_API_KEY",
    "consumer_secret": "TWITTER_API_SECRET",
    "access_token": "TWITTER_ACCESS_TOKEN",
    "access_token_secret": "TWITTER_ACCESS_TOKEN_SECRET",
}
BEARER_TOKEN_ENV_VAR = "TWITTER_BEARER_TOKEN"
BEARER_TOKEN_KEY = "bearer_token"


@dataclass(frozen=True, slots=True, repr=False)
class ClientCredentials:
    """OAuth 1.0a user-context credentials used to sign write requests."""

    consumer_key: str | None = None
    consumer_secret: str | None = None
    access_token: str | None = None
    access_token_secret: str | None = None

    def is_empty(self) -> bool:
        return all(value in (None, "") for value in asdict(self).values())

    def is_complete(self) -> bool:
        return all(asdict(self).values())

    def merge(self, other: "ClientCredentials") -> "ClientCredentials":
        """Merge credential sets, preferring non-null values from ``other``."""

        return ClientCredentials(
            consumer_key=other.consumer_key or self.consumer_key,
            consumer_secret=other.consumer_secret or self.consumer_secret,
            access_token=other.access_token or self.access_token,
            access_token_secret=other.access_token_secret or self.access_token_secret,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            key: value
            for key, value in asdict(self).items()
            if isinstance(value, str) and value
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, str | None]) -> "ClientCredentials":
        return cls(
            consumer_key=data.get("consumer_key"),
            consumer_secret=data.get("consumer_secret"),
            access_token=data.get("access_token"),
            access_token_secret=data.get("access_token_secret"),
        )

    def __repr__(self) -> str:
        filled = sorted(self.to_dict())
        return f"ClientCredentials(filled={filled})"


class ConfigManager:
    """Loads and persists credentials from the environment, a .env file or disk."""

    def __init__(
        self,
        credential_path: Path | None = None,
        *,
        env: Mapping[str, str] | None = None,
        dotenv_path: Path | None = None,
    ) -> None:
        self._credential_path = credential_path or Path("credentials/twitter_config.json")
        self._env = os.environ if env is None else env
        self._dotenv_path = dotenv_path or Path(".env")

    def load_credentials(
        self,
        priority: Sequence[str] = ("env", "dotenv", "file"),
    ) -> ClientCredentials:
        """
        Load credentials according to the requested priority order.

        Raises:
            ConfigurationError: when no credentials are available.
        """

        for source in priority:
            values = self._read_source(source)
            if values is None:
                continue
            credentials = ClientCredentials.from_mapping(values)
            if not credentials.is_empty():
                return credentials

        raise ConfigurationError("Twitter credentials are not configured.")

    def load_bearer_token(
        self,
        priority: Sequence[str] = ("env", "dotenv", "file"),
    ) -> str | None:
        for source in priority:
            values = self._read_source(source)
            if values and values.get(BEARER_TOKEN_KEY):
                return values[BEARER_TOKEN_KEY]
        return None

    def save_credentials(
        self,
        credentials: ClientCredentials,
        *,
        bearer_token: str | None = None,
    ) -> None:
        """Persist credentials to disk, merging with existing values."""

        existing = self._load_from_file() or {}
        merged = ClientCredentials.from_mapping(existing).merge(credentials).to_dict()
        token = bearer_token or existing.get(BEARER_TOKEN_KEY)
        if token:
            merged[BEARER_TOKEN_KEY] = token

        self._credential_path.parent.mkdir(parents=True, exist_ok=True)
        with self._credential_path.open("w", encoding="utf-8") as fp:
            json.dump(merged, fp, indent=2, sort_keys=True)

        os.chmod(self._credential_path, 0o600)

    def _read_source(self, source: str) -> Mapping[str, str | None] | None:
        if source == "env":
            return self._map_env_names(self._env)
        if source == "dotenv":
            return self._load_from_dotenv()
        if source == "file":
            return self._load_from_file()
        raise ValueError(f"Unknown credential source '{source}'.")

    @staticmethod
    def _map_env_names(values: Mapping[str, str | None]) -> dict[str, str | None]:
        mapped = {field: values.get(env_name) for field, env_name in ENV_VAR_MAP.items()}
        mapped[BEARER_TOKEN_KEY] = values.get(BEARER_TOKEN_ENV_VAR)
        return mapped

    def _load_from_dotenv(self) -> dict[str, str | None] | None:
        if not self._dotenv_path.exists():
            return None
        return self._map_env_names(dotenv_values(self._dotenv_path))

    def _load_from_file(self) -> dict[str, str | None] | None:
        if not self._credential_path.exists():
            return None

        with self._credential_path.open("r", encoding="utf-8") as fp:
            data = json.load(fp)

        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Credential file {self._credential_path} did not contain a mapping."
            )
        return dict(data)
