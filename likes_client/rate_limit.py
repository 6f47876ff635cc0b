"""
Rate limit header parsing and reset-time helpers.

The client never waits on its own; these helpers let callers decide when to
try again after a :class:`~likes_client.exceptions.RateLimitExceeded`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping

RESET_HEADER = "x-rate-limit-reset"


@dataclass(slots=True)
class RateLimitStatus:
    """Represents parsed rate limit metadata from X API headers."""

    limit: int | None = None
    remaining: int | None = None
    reset_at: int | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitStatus":
        lowered = {key.lower(): value for key, value in headers.items()}
        return cls(
            limit=_to_int(lowered.get("x-rate-limit-limit")),
            remaining=_to_int(lowered.get("x-rate-limit-remaining")),
            reset_at=_to_int(lowered.get(RESET_HEADER)),
        )

    def is_exhausted(self) -> bool:
        return self.remaining is not None and self.remaining <= 0


def seconds_until_reset(reset_at: int | str | None, now: datetime | None = None) -> float:
    """Seconds from ``now`` until the epoch ``reset_at``; never negative."""

    reset = _to_int(reset_at)
    if reset is None:
        return 0.0
    current = now or datetime.now(timezone.utc)
    delta = reset - current.timestamp()
    return max(delta, 0.0)


def _to_int(value: int | str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
