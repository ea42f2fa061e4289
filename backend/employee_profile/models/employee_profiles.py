"""Employee profile records updated by CRUD, self-service, and change requests."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field

from employee_profile.core.time import utcnow
from employee_profile.models.base import QueryModel

RUNTIME_ANNOTATION_TYPES = (date, datetime)


class EmployeeProfile(QueryModel, table=True):
    """Employee master record; references departments and positions by id."""

    __tablename__ = "employee_profiles"  # pyright: ignore[reportAssignmentType]

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    employee_number: str = Field(index=True, unique=True)
    first_name: str
    last_name: str
    national_id: str = Field(index=True)

    # Mutable through approved change requests only
    primary_position_id: UUID | None = Field(
        default=None,
        foreign_key="positions.id",
        index=True,
    )
    primary_department_id: UUID | None = Field(
        default=None,
        foreign_key="departments.id",
        index=True,
    )
    supervisor_position_id: UUID | None = Field(
        default=None,
        foreign_key="positions.id",
    )
    contract_type: str | None = None
    work_type: str | None = None

    # Self-service contact fields
    phone: str | None = None
    personal_email: str | None = None
    work_email: str | None = None
    biography: str | None = None
    address: dict[str, object] | None = Field(default=None, sa_column=Column(JSON))

    date_of_hire: date
    contract_start_date: date | None = None
    contract_end_date: date | None = None
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime())
