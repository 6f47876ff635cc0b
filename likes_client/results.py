"""
Tagged request outcomes for callers that prefer matching over ``except``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Success(BaseModel):
    """Decoded JSON payload, passed through untouched."""

    kind: Literal["success"] = "success"
    payload: Any = None

    model_config = ConfigDict(frozen=True)


class RateLimited(BaseModel):
    kind: Literal["rate_limited"] = "rate_limited"
    reset_at: str | None = None
    endpoint: str

    model_config = ConfigDict(frozen=True)


class RequestFailed(BaseModel):
    kind: Literal["request_failed"] = "request_failed"
    detail: str
    status_code: int | None = None

    model_config = ConfigDict(frozen=True)


RequestOutcome = Annotated[
    Union[Success, RateLimited, RequestFailed],
    Field(discriminator="kind"),
]
