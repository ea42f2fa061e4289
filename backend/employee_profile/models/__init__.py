"""Model exports for SQLAlchemy/SQLModel metadata discovery.

Referenced tables are imported before the tables that point at them so the
metadata registry never depends on incidental import order elsewhere.
"""

from employee_profile.models.departments import Department
from employee_profile.models.positions import Position
from employee_profile.models.employee_profiles import EmployeeProfile
from employee_profile.models.change_requests import ChangeRequestStatus, ProfileChangeRequest

__all__ = [
    "ChangeRequestStatus",
    "Department",
    "EmployeeProfile",
    "Position",
    "ProfileChangeRequest",
]
