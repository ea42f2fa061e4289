# ruff: noqa

from __future__ import annotations

from uuid import UUID, uuid4

import pytest

from employee_profile.models.departments import Department
from employee_profile.models.positions import Position
from employee_profile.services.change_requests.errors import (
    InvalidFieldValueError,
    InvalidNationalIdError,
    UnsupportedFieldError,
)
from employee_profile.services.change_requests.fields import (
    FIELD_RULES,
    ProfileField,
    parse_field,
    validate_and_build_update,
)


def test_every_allow_listed_field_has_a_rule() -> None:
    assert set(FIELD_RULES) == set(ProfileField)
    assert {field.value for field in ProfileField} == {
        "firstName",
        "lastName",
        "nationalId",
        "primaryPositionId",
        "primaryDepartmentId",
        "contractType",
        "workType",
    }


def test_parse_field_rejects_unknown_names() -> None:
    with pytest.raises(UnsupportedFieldError) as exc_info:
        parse_field("unknownThing")
    assert exc_info.value.field == "unknownThing"
    assert str(exc_info.value) == "Unsupported field: unknownThing"
    assert exc_info.value.detail["code"] == "unsupported_field"


def test_parse_field_is_case_sensitive() -> None:
    with pytest.raises(UnsupportedFieldError):
        parse_field("FirstName")


def test_names_are_trimmed() -> None:
    update = validate_and_build_update("firstName", "  Ahmed ")
    assert update.field is ProfileField.FIRST_NAME
    assert update.attribute == "first_name"
    assert update.value == "Ahmed"


def test_name_must_be_a_string() -> None:
    with pytest.raises(InvalidFieldValueError):
        validate_and_build_update("lastName", 42)


def test_national_id_accepts_exactly_fourteen_digits() -> None:
    update = validate_and_build_update("nationalId", "29901011234567")
    assert update.attribute == "national_id"
    assert update.value == "29901011234567"


@pytest.mark.parametrize(
    "value",
    ["1234", "299010112345678", "2990101123456a", " 29901011234567", 29901011234567],
)
def test_national_id_rejects_other_shapes(value: object) -> None:
    with pytest.raises(InvalidNationalIdError) as exc_info:
        validate_and_build_update("nationalId", value)
    assert str(exc_info.value) == "nationalId must be 14 digits"


def test_reference_ids_are_parsed_to_uuid() -> None:
    department_id = uuid4()
    update = validate_and_build_update("primaryDepartmentId", str(department_id))
    assert update.attribute == "primary_department_id"
    assert update.value == department_id
    assert isinstance(update.value, UUID)


def test_reference_id_must_be_a_uuid() -> None:
    with pytest.raises(InvalidFieldValueError):
        validate_and_build_update("primaryPositionId", "position-7")


def test_contract_and_work_type_are_taken_verbatim() -> None:
    assert validate_and_build_update("contractType", " Permanent ").value == " Permanent "
    assert validate_and_build_update("workType", "remote").attribute == "work_type"


def test_contract_type_number_is_rejected() -> None:
    with pytest.raises(InvalidFieldValueError):
        validate_and_build_update("contractType", 5)


def test_unknown_field_fails_before_value_checks() -> None:
    with pytest.raises(UnsupportedFieldError):
        validate_and_build_update("salary", 1_000_000)


def test_reference_fields_name_their_target_table() -> None:
    assert validate_and_build_update("primaryPositionId", str(uuid4())).references is Position
    assert validate_and_build_update("primaryDepartmentId", str(uuid4())).references is Department
    assert validate_and_build_update("workType", "remote").references is None
