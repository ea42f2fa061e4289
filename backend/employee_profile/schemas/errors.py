"""Structured error payload schemas used by API responses."""

from __future__ import annotations

from typing import Any

from pydantic import Field
from sqlmodel import SQLModel


class ChangeRequestErrorDetail(SQLModel):
    """Machine-readable detail attached to change-request workflow errors."""

    code: str = Field(
        description="Stable error code.",
        examples=["transition_conflict", "invalid_national_id"],
    )
    message: str = Field(examples=["nationalId must be 14 digits"])
    requires_resubmission: bool = Field(
        description=(
            "True when the stored proposal can never be applied as-is: reject it "
            "or submit a corrected request. False when the request is simply not "
            "actionable now."
        ),
    )


class ErrorResponse(SQLModel):
    """Standard error envelope produced by the API error handlers."""

    detail: str | ChangeRequestErrorDetail | list[dict[str, Any]] = Field(
        description="Error payload: a message, a structured detail, or validation errors.",
    )
    request_id: str | None = Field(
        default=None,
        description="Request correlation identifier injected by middleware.",
    )
