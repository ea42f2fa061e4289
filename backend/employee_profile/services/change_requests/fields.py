"""Allow-listed profile fields and their per-field value rules."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

from employee_profile.models.departments import Department
from employee_profile.models.positions import Position
from employee_profile.services.change_requests.errors import (
    InvalidFieldValueError,
    InvalidNationalIdError,
    UnsupportedFieldError,
)

if TYPE_CHECKING:
    from sqlmodel.ext.asyncio.session import AsyncSession

    from employee_profile.models.base import QueryModel

NATIONAL_ID_PATTERN = re.compile(r"[0-9]{14}")


class ProfileField(str, Enum):
    """Fields a change request may target, by their wire name."""

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    NATIONAL_ID = "nationalId"
    PRIMARY_POSITION_ID = "primaryPositionId"
    PRIMARY_DEPARTMENT_ID = "primaryDepartmentId"
    CONTRACT_TYPE = "contractType"
    WORK_TYPE = "workType"


@dataclass(frozen=True)
class ProfileUpdate:
    """Single-attribute update to apply to an employee profile."""

    field: ProfileField
    attribute: str
    value: str | UUID
    references: type[QueryModel] | None = None


def _require_str(field: ProfileField, value: object) -> str:
    if not isinstance(value, str):
        raise InvalidFieldValueError(f"{field.value} must be a string")
    return value


def _trimmed(field: ProfileField, value: object) -> str:
    return _require_str(field, value).strip()


def _verbatim(field: ProfileField, value: object) -> str:
    return _require_str(field, value)


def _national_id(field: ProfileField, value: object) -> str:
    if not isinstance(value, str) or NATIONAL_ID_PATTERN.fullmatch(value) is None:
        raise InvalidNationalIdError
    return value


def _reference_id(field: ProfileField, value: object) -> UUID:
    try:
        return UUID(_require_str(field, value))
    except ValueError as exc:
        raise InvalidFieldValueError(f"{field.value} must be a valid reference id") from exc


@dataclass(frozen=True)
class FieldRule:
    attribute: str
    convert: Callable[[ProfileField, object], str | UUID]
    references: type[QueryModel] | None = None


FIELD_RULES: dict[ProfileField, FieldRule] = {
    ProfileField.FIRST_NAME: FieldRule("first_name", _trimmed),
    ProfileField.LAST_NAME: FieldRule("last_name", _trimmed),
    ProfileField.NATIONAL_ID: FieldRule("national_id", _national_id),
    ProfileField.PRIMARY_POSITION_ID: FieldRule("primary_position_id", _reference_id, Position),
    ProfileField.PRIMARY_DEPARTMENT_ID: FieldRule(
        "primary_department_id",
        _reference_id,
        Department,
    ),
    ProfileField.CONTRACT_TYPE: FieldRule("contract_type", _verbatim),
    ProfileField.WORK_TYPE: FieldRule("work_type", _verbatim),
}


def parse_field(field: str) -> ProfileField:
    """Resolve a wire field name against the allow-list."""
    try:
        return ProfileField(field)
    except ValueError as exc:
        raise UnsupportedFieldError(field) from exc


def validate_and_build_update(field: str, new_value: object) -> ProfileUpdate:
    """Check the field and value and build the one-attribute update to apply."""
    profile_field = parse_field(field)
    rule = FIELD_RULES[profile_field]
    return ProfileUpdate(
        field=profile_field,
        attribute=rule.attribute,
        value=rule.convert(profile_field, new_value),
        references=rule.references,
    )


async def ensure_reference_exists(session: AsyncSession, update: ProfileUpdate) -> None:
    """Reject reference ids that do not name an existing row."""
    if update.references is None:
        return
    if await update.references.objects.by_id(update.value).first(session) is None:
        target = update.references.__name__.lower()
        raise InvalidFieldValueError(f"{update.field.value} does not match an existing {target}")
