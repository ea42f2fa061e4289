"""Reusable FastAPI dependencies for sessions and profile lookups.

Caller identity and reviewer permissions are established upstream of this
service; these dependencies only resolve the records a route operates on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import Depends

from employee_profile.db.session import get_session
from employee_profile.services.employee_profiles import get_profile_or_404

if TYPE_CHECKING:
    from sqlmodel.ext.asyncio.session import AsyncSession

    from employee_profile.models.employee_profiles import EmployeeProfile

SESSION_DEP = Depends(get_session)


async def get_employee_profile_or_404(
    profile_id: UUID,
    session: AsyncSession = SESSION_DEP,
) -> EmployeeProfile:
    """Load the profile named by the `profile_id` path parameter."""
    return await get_profile_or_404(session, profile_id)


PROFILE_DEP = Depends(get_employee_profile_or_404)
