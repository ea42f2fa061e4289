"""Persistence for profile change requests with guarded status transitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import update
from sqlmodel import col

from employee_profile.models.change_requests import ChangeRequestStatus, ProfileChangeRequest
from employee_profile.services.change_requests.errors import (
    ChangeRequestNotFoundError,
    TransitionConflictError,
)

if TYPE_CHECKING:
    from datetime import datetime
    from uuid import UUID

    from sqlmodel.ext.asyncio.session import AsyncSession


class ChangeRequestStore:
    """Repository over `profile_change_requests` bound to one session.

    Methods flush but never commit; the caller owns the transaction so a
    status transition can share it with the profile update it authorizes.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, request: ProfileChangeRequest) -> UUID:
        self.session.add(request)
        await self.session.flush()
        return request.id

    async def get_by_id(self, request_id: UUID) -> ProfileChangeRequest | None:
        return (
            await ProfileChangeRequest.objects.by_id(request_id)
            .execution_options(populate_existing=True)
            .first(self.session)
        )

    async def list_by_subject(self, subject_id: UUID) -> list[ProfileChangeRequest]:
        return (
            await ProfileChangeRequest.objects.filter_by(subject_id=subject_id)
            .order_by(
                col(ProfileChangeRequest.submitted_at).desc(),
                col(ProfileChangeRequest.id).desc(),
            )
            .execution_options(populate_existing=True)
            .all(self.session)
        )

    async def mark_approved(self, request_id: UUID, *, processed_at: datetime) -> None:
        await self._transition(
            request_id,
            status=ChangeRequestStatus.APPROVED,
            processed_at=processed_at,
        )

    async def mark_rejected(
        self,
        request_id: UUID,
        *,
        reason: str,
        processed_at: datetime,
    ) -> None:
        await self._transition(
            request_id,
            status=ChangeRequestStatus.REJECTED,
            processed_at=processed_at,
            reason=reason,
        )

    async def _transition(
        self,
        request_id: UUID,
        *,
        status: ChangeRequestStatus,
        processed_at: datetime,
        reason: str | None = None,
    ) -> None:
        """Move a pending request to `status` with a single compare-and-set UPDATE."""
        values: dict[str, object] = {"status": status.value, "processed_at": processed_at}
        if reason is not None:
            values["reason"] = reason
        statement = (
            update(ProfileChangeRequest)
            .where(col(ProfileChangeRequest.id) == request_id)
            .where(col(ProfileChangeRequest.status) == ChangeRequestStatus.PENDING.value)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.exec(statement)  # type: ignore[call-overload]
        if result.rowcount == 1:
            return
        if await self.get_by_id(request_id) is None:
            raise ChangeRequestNotFoundError
        raise TransitionConflictError
