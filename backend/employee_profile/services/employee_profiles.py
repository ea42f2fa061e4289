"""Employee profile persistence: HR CRUD, self-service edits, single-field updates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, status
from sqlmodel import col

from employee_profile.core.logging import get_logger
from employee_profile.core.time import utcnow
from employee_profile.models.change_requests import ProfileChangeRequest
from employee_profile.models.employee_profiles import EmployeeProfile
from employee_profile.schemas.employee_profiles import SELF_SERVICE_FIELDS
from employee_profile.services.change_requests.errors import ProfileNotFoundError

if TYPE_CHECKING:
    from uuid import UUID

    from sqlmodel.ext.asyncio.session import AsyncSession

    from employee_profile.schemas.employee_profiles import (
        EmployeeProfileCreate,
        EmployeeProfileSelfUpdate,
        EmployeeProfileUpdate,
    )

logger = get_logger(__name__)


async def get_profile_or_404(session: AsyncSession, profile_id: UUID) -> EmployeeProfile:
    profile = await EmployeeProfile.objects.by_id(profile_id).first(session)
    if profile is None:
        raise ProfileNotFoundError
    return profile


async def create_profile(
    session: AsyncSession,
    *,
    payload: EmployeeProfileCreate,
) -> EmployeeProfile:
    """Create an employee profile record."""
    now = utcnow()
    profile = EmployeeProfile(
        **payload.model_dump(exclude={"address"}),
        address=payload.address.model_dump() if payload.address is not None else None,
        created_at=now,
        updated_at=now,
    )
    session.add(profile)
    await session.commit()
    await session.refresh(profile)
    logger.info("employee_profile.created", extra={"profile_id": str(profile.id)})
    return profile


async def list_profiles(session: AsyncSession) -> list[EmployeeProfile]:
    return (
        await EmployeeProfile.objects.all()
        .order_by(col(EmployeeProfile.last_name).asc(), col(EmployeeProfile.first_name).asc())
        .all(session)
    )


def _apply_changes(profile: EmployeeProfile, changes: dict[str, object]) -> None:
    for key, value in changes.items():
        setattr(profile, key, value)
    profile.updated_at = utcnow()


async def update_profile(
    session: AsyncSession,
    *,
    profile_id: UUID,
    payload: EmployeeProfileUpdate,
) -> EmployeeProfile:
    """Apply an HR/admin partial update."""
    profile = await get_profile_or_404(session, profile_id)
    _apply_changes(profile, payload.model_dump(exclude_unset=True))
    session.add(profile)
    await session.commit()
    await session.refresh(profile)
    return profile


async def self_update_profile(
    session: AsyncSession,
    *,
    profile_id: UUID,
    payload: EmployeeProfileSelfUpdate,
) -> EmployeeProfile:
    """Apply an employee's own edit, restricted to the self-service fields."""
    profile = await get_profile_or_404(session, profile_id)
    changes = payload.model_dump(exclude_unset=True, include=set(SELF_SERVICE_FIELDS))
    _apply_changes(profile, changes)
    session.add(profile)
    await session.commit()
    await session.refresh(profile)
    logger.info(
        "employee_profile.self_updated",
        extra={"profile_id": str(profile.id), "fields": sorted(changes)},
    )
    return profile


async def delete_profile(session: AsyncSession, *, profile_id: UUID) -> None:
    """Delete a profile that has no change-request history."""
    profile = await get_profile_or_404(session, profile_id)
    has_requests = await ProfileChangeRequest.objects.filter_by(subject_id=profile_id).first(
        session,
    )
    if has_requests is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Employee has change requests and cannot be deleted",
        )
    await session.delete(profile)
    await session.commit()
    logger.info("employee_profile.deleted", extra={"profile_id": str(profile_id)})


async def update_profile_field(
    session: AsyncSession,
    *,
    profile_id: UUID,
    attribute: str,
    value: object,
) -> EmployeeProfile:
    """Set exactly one profile attribute inside the caller's transaction."""
    profile = await get_profile_or_404(session, profile_id)
    _apply_changes(profile, {attribute: value})
    session.add(profile)
    await session.flush()
    return profile
