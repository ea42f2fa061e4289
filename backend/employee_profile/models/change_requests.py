"""Profile change request records and their review status."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlmodel import Field

from employee_profile.core.time import utcnow
from employee_profile.models.base import QueryModel

RUNTIME_ANNOTATION_TYPES = (datetime,)


class ChangeRequestStatus(str, Enum):
    """Review lifecycle; pending moves at most once to a terminal state."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ProfileChangeRequest(QueryModel, table=True):
    """Employee-submitted proposal to change one field of their profile."""

    __tablename__ = "profile_change_requests"  # pyright: ignore[reportAssignmentType]

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    subject_id: UUID = Field(foreign_key="employee_profiles.id", index=True)
    encoded_change: str
    reason: str = Field(default="")
    status: str = Field(default=ChangeRequestStatus.PENDING.value, index=True)
    submitted_at: datetime = Field(default_factory=utcnow, index=True, sa_type=DateTime())
    processed_at: datetime | None = Field(default=None, sa_type=DateTime())
