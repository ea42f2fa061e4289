"""Change request workflow: submission, approval, rejection, and listing.

State machine: ``pending -> approved`` or ``pending -> rejected``; terminal
states never transition again. Approval decodes and validates the stored
change before writing anything, then applies the profile update and the
status transition in one transaction. Any failure leaves both the profile and
the request exactly as they were.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from employee_profile.core.logging import get_logger
from employee_profile.core.time import utcnow
from employee_profile.models.change_requests import ChangeRequestStatus, ProfileChangeRequest
from employee_profile.schemas.change_requests import ChangeRequestApprovalRead
from employee_profile.services.change_requests.codec import decode, encode
from employee_profile.services.change_requests.errors import (
    ChangeRequestNotFoundError,
    TransitionConflictError,
)
from employee_profile.services.change_requests.fields import (
    ensure_reference_exists,
    validate_and_build_update,
)
from employee_profile.services.change_requests.store import ChangeRequestStore
from employee_profile.services.employee_profiles import get_profile_or_404, update_profile_field

if TYPE_CHECKING:
    from uuid import UUID

    from sqlmodel.ext.asyncio.session import AsyncSession

    from employee_profile.schemas.change_requests import ChangeRequestCreate

logger = get_logger(__name__)


async def get_change_request(
    session: AsyncSession,
    *,
    request_id: UUID,
) -> ProfileChangeRequest:
    request = await ChangeRequestStore(session).get_by_id(request_id)
    if request is None:
        raise ChangeRequestNotFoundError
    return request


async def submit_change_request(
    session: AsyncSession,
    *,
    payload: ChangeRequestCreate,
) -> ProfileChangeRequest:
    """Store a pending request; the field is only checked at approval time."""
    await get_profile_or_404(session, payload.subject_id)
    request = ProfileChangeRequest(
        subject_id=payload.subject_id,
        encoded_change=encode(payload.field, payload.new_value),
        reason=payload.reason,
        status=ChangeRequestStatus.PENDING.value,
        submitted_at=utcnow(),
    )
    await ChangeRequestStore(session).insert(request)
    await session.commit()
    await session.refresh(request)
    logger.info(
        "change_request.submitted",
        extra={"request_id": str(request.id), "subject_id": str(request.subject_id)},
    )
    return request


async def list_change_requests(
    session: AsyncSession,
    *,
    subject_id: UUID,
) -> list[ProfileChangeRequest]:
    """Return a subject's requests, newest submission first."""
    return await ChangeRequestStore(session).list_by_subject(subject_id)


async def approve_change_request(
    session: AsyncSession,
    *,
    request_id: UUID,
) -> ChangeRequestApprovalRead:
    """Apply a pending request's change to its profile and mark it approved."""
    store = ChangeRequestStore(session)
    request = await store.get_by_id(request_id)
    if request is None:
        raise ChangeRequestNotFoundError
    if request.status != ChangeRequestStatus.PENDING.value:
        raise TransitionConflictError

    field, new_value = decode(request.encoded_change)
    update = validate_and_build_update(field, new_value)
    await ensure_reference_exists(session, update)
    subject_id = request.subject_id

    try:
        # Claim the transition first so a concurrent reviewer blocks or fails
        # here instead of applying the same profile change twice.
        await store.mark_approved(request_id, processed_at=utcnow())
        await update_profile_field(
            session,
            profile_id=subject_id,
            attribute=update.attribute,
            value=update.value,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info(
        "change_request.approved",
        extra={
            "request_id": str(request_id),
            "subject_id": str(subject_id),
            "field": update.field.value,
        },
    )
    return ChangeRequestApprovalRead(field_updated=field, new_value=new_value)


async def reject_change_request(
    session: AsyncSession,
    *,
    request_id: UUID,
    reason: str,
) -> ProfileChangeRequest:
    """Mark a pending request rejected with the reviewer's reason."""
    store = ChangeRequestStore(session)
    request = await store.get_by_id(request_id)
    if request is None:
        raise ChangeRequestNotFoundError

    try:
        await store.mark_rejected(request_id, reason=reason, processed_at=utcnow())
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    await session.refresh(request)
    logger.info(
        "change_request.rejected",
        extra={"request_id": str(request_id), "subject_id": str(request.subject_id)},
    )
    return request
