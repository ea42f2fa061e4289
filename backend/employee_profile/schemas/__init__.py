"""Public schema exports shared across API route modules."""

from employee_profile.schemas.change_requests import (
    ChangeRequestApprovalRead,
    ChangeRequestCreate,
    ChangeRequestRead,
    ChangeRequestReject,
)
from employee_profile.schemas.common import OkResponse
from employee_profile.schemas.employee_profiles import (
    EmployeeProfileCreate,
    EmployeeProfileRead,
    EmployeeProfileSelfUpdate,
    EmployeeProfileUpdate,
)
from employee_profile.schemas.errors import ChangeRequestErrorDetail, ErrorResponse
from employee_profile.schemas.health import HealthStatusResponse

__all__ = [
    "ChangeRequestApprovalRead",
    "ChangeRequestCreate",
    "ChangeRequestErrorDetail",
    "ChangeRequestRead",
    "ChangeRequestReject",
    "EmployeeProfileCreate",
    "EmployeeProfileRead",
    "EmployeeProfileSelfUpdate",
    "EmployeeProfileUpdate",
    "ErrorResponse",
    "HealthStatusResponse",
    "OkResponse",
]
