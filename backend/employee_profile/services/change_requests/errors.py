"""Error taxonomy for the profile change-request workflow.

Every error is an ``HTTPException`` so the API error handlers render it with a
request id. The ``detail`` payload carries a machine-readable ``code`` plus a
``requires_resubmission`` flag:

- ``False``: the request cannot be acted on right now (missing, or already
  processed). Retrying the same call will not help.
- ``True``: the stored proposal cannot be applied mechanically. A reviewer
  should reject it, or the employee should submit a corrected request.
"""

from __future__ import annotations

from fastapi import HTTPException, status


class ChangeRequestError(HTTPException):
    """Base class for change-request workflow failures."""

    status_code_default: int = status.HTTP_400_BAD_REQUEST
    code: str = "change_request_error"
    default_message: str = "Change request could not be processed"
    requires_resubmission: bool = False

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(
            status_code=self.status_code_default,
            detail={
                "code": self.code,
                "message": self.message,
                "requires_resubmission": self.requires_resubmission,
            },
        )

    def __str__(self) -> str:
        return self.message


class ChangeRequestNotFoundError(ChangeRequestError):
    status_code_default = status.HTTP_404_NOT_FOUND
    code = "request_not_found"
    default_message = "Request not found"


class TransitionConflictError(ChangeRequestError):
    """Raised when the request is no longer pending at transition time."""

    status_code_default = status.HTTP_409_CONFLICT
    code = "transition_conflict"
    default_message = "Request has already been processed"


class ProfileNotFoundError(ChangeRequestError):
    status_code_default = status.HTTP_404_NOT_FOUND
    code = "profile_not_found"
    default_message = "Employee not found"


class MalformedPayloadError(ChangeRequestError):
    status_code_default = 422
    code = "malformed_payload"
    default_message = "Invalid JSON inside encoded change"
    requires_resubmission = True


class UnsupportedFieldError(ChangeRequestError):
    status_code_default = 422
    code = "unsupported_field"
    default_message = "Unsupported field"
    requires_resubmission = True

    def __init__(self, field: object) -> None:
        self.field = field
        super().__init__(f"Unsupported field: {field}")


class InvalidNationalIdError(ChangeRequestError):
    status_code_default = 422
    code = "invalid_national_id"
    default_message = "nationalId must be 14 digits"
    requires_resubmission = True


class InvalidFieldValueError(ChangeRequestError):
    """Raised when a value does not have the shape its field accepts."""

    status_code_default = 422
    code = "invalid_field_value"
    default_message = "Invalid value for field"
    requires_resubmission = True
