"""Profile change request endpoints: employee submission and reviewer decisions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import UUID

from fastapi import APIRouter, status

from employee_profile.api.deps import PROFILE_DEP, SESSION_DEP
from employee_profile.schemas.change_requests import (
    ChangeRequestApprovalRead,
    ChangeRequestCreate,
    ChangeRequestRead,
    ChangeRequestReject,
)
from employee_profile.schemas.errors import ErrorResponse
from employee_profile.services.change_requests.workflow import (
    approve_change_request,
    get_change_request,
    list_change_requests,
    reject_change_request,
    submit_change_request,
)

if TYPE_CHECKING:
    from sqlmodel.ext.asyncio.session import AsyncSession

    from employee_profile.models.employee_profiles import EmployeeProfile

router = APIRouter(prefix="/employee-profiles", tags=["change-requests"])

_NOT_FOUND: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}
_REVIEW_ERRORS: dict[int | str, dict[str, Any]] = {
    **_NOT_FOUND,
    status.HTTP_409_CONFLICT: {
        "model": ErrorResponse,
        "description": "Request is no longer pending.",
    },
}


@router.post(
    "/change-requests",
    response_model=ChangeRequestRead,
    status_code=status.HTTP_201_CREATED,
    responses=_NOT_FOUND,
)
async def create_change_request(
    payload: ChangeRequestCreate,
    session: AsyncSession = SESSION_DEP,
) -> ChangeRequestRead:
    """Submit a proposed change to one field of the employee's profile."""
    request = await submit_change_request(session, payload=payload)
    return ChangeRequestRead.model_validate(request, from_attributes=True)


@router.get("/{profile_id}/change-requests", response_model=list[ChangeRequestRead])
async def list_profile_change_requests(
    profile: EmployeeProfile = PROFILE_DEP,
    session: AsyncSession = SESSION_DEP,
) -> list[ChangeRequestRead]:
    """List the employee's change requests, newest first."""
    requests = await list_change_requests(session, subject_id=profile.id)
    return [ChangeRequestRead.model_validate(r, from_attributes=True) for r in requests]


@router.get(
    "/change-requests/{request_id}",
    response_model=ChangeRequestRead,
    responses=_NOT_FOUND,
)
async def read_change_request(
    request_id: UUID,
    session: AsyncSession = SESSION_DEP,
) -> ChangeRequestRead:
    """Get a single change request."""
    request = await get_change_request(session, request_id=request_id)
    return ChangeRequestRead.model_validate(request, from_attributes=True)


@router.patch(
    "/change-requests/{request_id}/approve",
    response_model=ChangeRequestApprovalRead,
    responses={
        **_REVIEW_ERRORS,
        422: {
            "model": ErrorResponse,
            "description": "Stored change cannot be applied; reject or resubmit.",
        },
    },
)
async def approve_change_request_endpoint(
    request_id: UUID,
    session: AsyncSession = SESSION_DEP,
) -> ChangeRequestApprovalRead:
    """Approve a pending request and apply its change to the profile."""
    return await approve_change_request(session, request_id=request_id)


@router.patch(
    "/change-requests/{request_id}/reject",
    response_model=ChangeRequestRead,
    responses=_REVIEW_ERRORS,
)
async def reject_change_request_endpoint(
    request_id: UUID,
    payload: ChangeRequestReject,
    session: AsyncSession = SESSION_DEP,
) -> ChangeRequestRead:
    """Reject a pending request, recording the reviewer's reason."""
    request = await reject_change_request(
        session,
        request_id=request_id,
        reason=payload.reason,
    )
    return ChangeRequestRead.model_validate(request, from_attributes=True)
