"""Position reference records targeted by profile position links."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlmodel import Field

from employee_profile.core.time import utcnow
from employee_profile.models.base import QueryModel

RUNTIME_ANNOTATION_TYPES = (datetime,)


class Position(QueryModel, table=True):
    """Job position, optionally owned by a department."""

    __tablename__ = "positions"  # pyright: ignore[reportAssignmentType]

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    code: str = Field(index=True, unique=True)
    title: str
    department_id: UUID | None = Field(default=None, foreign_key="departments.id", index=True)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime())
