"""Employee profile CRUD endpoints and the employee self-service edit."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, status

from employee_profile.api.deps import PROFILE_DEP, SESSION_DEP
from employee_profile.schemas.common import OkResponse
from employee_profile.schemas.employee_profiles import (
    EmployeeProfileCreate,
    EmployeeProfileRead,
    EmployeeProfileSelfUpdate,
    EmployeeProfileUpdate,
)
from employee_profile.services.employee_profiles import (
    create_profile,
    delete_profile,
    list_profiles,
    self_update_profile,
    update_profile,
)

if TYPE_CHECKING:
    from sqlmodel.ext.asyncio.session import AsyncSession

    from employee_profile.models.employee_profiles import EmployeeProfile

router = APIRouter(prefix="/employee-profiles", tags=["employee-profiles"])


def _to_read(profile: EmployeeProfile) -> EmployeeProfileRead:
    return EmployeeProfileRead.model_validate(profile, from_attributes=True)


@router.post("", response_model=EmployeeProfileRead, status_code=status.HTTP_201_CREATED)
async def create_employee_profile(
    payload: EmployeeProfileCreate,
    session: AsyncSession = SESSION_DEP,
) -> EmployeeProfileRead:
    """Create an employee profile."""
    return _to_read(await create_profile(session, payload=payload))


@router.get("", response_model=list[EmployeeProfileRead])
async def list_employee_profiles(
    session: AsyncSession = SESSION_DEP,
) -> list[EmployeeProfileRead]:
    """List employee profiles ordered by name."""
    return [_to_read(profile) for profile in await list_profiles(session)]


@router.get("/{profile_id}", response_model=EmployeeProfileRead)
async def get_employee_profile(
    profile: EmployeeProfile = PROFILE_DEP,
) -> EmployeeProfileRead:
    """Get one employee profile."""
    return _to_read(profile)


@router.patch("/{profile_id}", response_model=EmployeeProfileRead)
async def update_employee_profile(
    profile_id: UUID,
    payload: EmployeeProfileUpdate,
    session: AsyncSession = SESSION_DEP,
) -> EmployeeProfileRead:
    """Update profile fields (HR/admin)."""
    return _to_read(await update_profile(session, profile_id=profile_id, payload=payload))


@router.patch("/{profile_id}/self-update", response_model=EmployeeProfileRead)
async def self_update_employee_profile(
    profile_id: UUID,
    payload: EmployeeProfileSelfUpdate,
    session: AsyncSession = SESSION_DEP,
) -> EmployeeProfileRead:
    """Update the employee's own contact details."""
    return _to_read(
        await self_update_profile(session, profile_id=profile_id, payload=payload),
    )


@router.delete("/{profile_id}", response_model=OkResponse)
async def delete_employee_profile(
    profile_id: UUID,
    session: AsyncSession = SESSION_DEP,
) -> OkResponse:
    """Delete an employee profile without change-request history."""
    await delete_profile(session, profile_id=profile_id)
    return OkResponse()
