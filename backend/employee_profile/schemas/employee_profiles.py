"""Schemas for employee profile CRUD and self-service payloads."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import Field
from sqlmodel import SQLModel

RUNTIME_ANNOTATION_TYPES = (date, datetime, UUID)

SELF_SERVICE_FIELDS = ("phone", "personal_email", "work_email", "biography", "address")


class ProfileAddress(SQLModel):
    """Postal address an employee maintains on their own profile."""

    street: str | None = None
    city: str | None = None
    country: str | None = None


class EmployeeProfileCreate(SQLModel):
    """Payload for creating an employee profile (HR/admin)."""

    employee_number: str = Field(min_length=1)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    national_id: str = Field(pattern=r"^[0-9]{14}$")
    primary_position_id: UUID | None = None
    primary_department_id: UUID | None = None
    supervisor_position_id: UUID | None = None
    contract_type: str | None = None
    work_type: str | None = None
    phone: str | None = None
    personal_email: str | None = None
    work_email: str | None = None
    biography: str | None = None
    address: ProfileAddress | None = None
    date_of_hire: date
    contract_start_date: date | None = None
    contract_end_date: date | None = None


class EmployeeProfileUpdate(SQLModel):
    """Partial update payload for HR/admin edits; unset fields are untouched."""

    employee_number: str | None = Field(default=None, min_length=1)
    first_name: str | None = Field(default=None, min_length=1)
    last_name: str | None = Field(default=None, min_length=1)
    national_id: str | None = Field(default=None, pattern=r"^[0-9]{14}$")
    primary_position_id: UUID | None = None
    primary_department_id: UUID | None = None
    supervisor_position_id: UUID | None = None
    contract_type: str | None = None
    work_type: str | None = None
    phone: str | None = None
    personal_email: str | None = None
    work_email: str | None = None
    biography: str | None = None
    address: ProfileAddress | None = None
    date_of_hire: date | None = None
    contract_start_date: date | None = None
    contract_end_date: date | None = None


class EmployeeProfileSelfUpdate(SQLModel):
    """Fields an employee may edit directly; other keys are ignored."""

    phone: str | None = None
    personal_email: str | None = None
    work_email: str | None = None
    biography: str | None = None
    address: ProfileAddress | None = None


class EmployeeProfileRead(SQLModel):
    """Employee profile payload returned by read endpoints."""

    id: UUID
    employee_number: str
    first_name: str
    last_name: str
    national_id: str
    primary_position_id: UUID | None = None
    primary_department_id: UUID | None = None
    supervisor_position_id: UUID | None = None
    contract_type: str | None = None
    work_type: str | None = None
    phone: str | None = None
    personal_email: str | None = None
    work_email: str | None = None
    biography: str | None = None
    address: dict[str, object] | None = None
    date_of_hire: date
    contract_start_date: date | None = None
    contract_end_date: date | None = None
    created_at: datetime
    updated_at: datetime
