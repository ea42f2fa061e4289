"""Profile change-request codec, field rules, store, and errors.

The workflow entry points live in ``services.change_requests.workflow``; it
depends on the profile service, which itself imports the errors below.
"""

from employee_profile.services.change_requests.codec import decode, encode
from employee_profile.services.change_requests.errors import (
    ChangeRequestError,
    ChangeRequestNotFoundError,
    InvalidFieldValueError,
    InvalidNationalIdError,
    MalformedPayloadError,
    ProfileNotFoundError,
    TransitionConflictError,
    UnsupportedFieldError,
)
from employee_profile.services.change_requests.fields import (
    ProfileField,
    ProfileUpdate,
    ensure_reference_exists,
    validate_and_build_update,
)
from employee_profile.services.change_requests.store import ChangeRequestStore

__all__ = [
    "ChangeRequestError",
    "ChangeRequestNotFoundError",
    "ChangeRequestStore",
    "InvalidFieldValueError",
    "InvalidNationalIdError",
    "MalformedPayloadError",
    "ProfileField",
    "ProfileNotFoundError",
    "ProfileUpdate",
    "TransitionConflictError",
    "UnsupportedFieldError",
    "decode",
    "ensure_reference_exists",
    "encode",
    "validate_and_build_update",
]
