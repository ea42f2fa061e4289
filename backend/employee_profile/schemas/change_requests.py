"""Schemas for profile change request submission, review, and listing."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field, StrictFloat, StrictInt, StrictStr
from sqlmodel import SQLModel

RUNTIME_ANNOTATION_TYPES = (datetime, UUID)


class ChangeRequestCreate(SQLModel):
    """Employee submission proposing a new value for one profile field."""

    subject_id: UUID
    field: str = Field(min_length=1)
    new_value: StrictStr | StrictInt | StrictFloat
    reason: str = ""


class ChangeRequestReject(SQLModel):
    """Reviewer rejection payload; the reason replaces the submitter's."""

    reason: str = Field(min_length=1)


class ChangeRequestRead(SQLModel):
    """Change request payload returned by read and review endpoints."""

    id: UUID
    subject_id: UUID
    encoded_change: str
    reason: str
    status: str
    submitted_at: datetime
    processed_at: datetime | None = None


class ChangeRequestApprovalRead(SQLModel):
    """Outcome of an approved change request."""

    message: str = "Request approved and employee updated"
    field_updated: str
    new_value: StrictStr | StrictInt | StrictFloat
