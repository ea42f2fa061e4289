"""Departments, positions, employee profiles, and profile change requests.

Revision ID: 1f3a5c7e9b20
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "1f3a5c7e9b20"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    # Reference tables first; employee_profiles points at both.
    if not inspector.has_table("departments"):
        op.create_table(
            "departments",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("code", sa.String(), nullable=False),
            sa.Column("name", sa.String(), nullable=False),
            sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column("created_at", sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(op.f("ix_departments_code"), "departments", ["code"], unique=True)

    if not inspector.has_table("positions"):
        op.create_table(
            "positions",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("code", sa.String(), nullable=False),
            sa.Column("title", sa.String(), nullable=False),
            sa.Column("department_id", sa.Uuid(), nullable=True),
            sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column("created_at", sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(["department_id"], ["departments.id"]),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(op.f("ix_positions_code"), "positions", ["code"], unique=True)
        op.create_index(op.f("ix_positions_department_id"), "positions", ["department_id"])

    if not inspector.has_table("employee_profiles"):
        op.create_table(
            "employee_profiles",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("employee_number", sa.String(), nullable=False),
            sa.Column("first_name", sa.String(), nullable=False),
            sa.Column("last_name", sa.String(), nullable=False),
            sa.Column("national_id", sa.String(), nullable=False),
            sa.Column("primary_position_id", sa.Uuid(), nullable=True),
            sa.Column("primary_department_id", sa.Uuid(), nullable=True),
            sa.Column("supervisor_position_id", sa.Uuid(), nullable=True),
            sa.Column("contract_type", sa.String(), nullable=True),
            sa.Column("work_type", sa.String(), nullable=True),
            sa.Column("phone", sa.String(), nullable=True),
            sa.Column("personal_email", sa.String(), nullable=True),
            sa.Column("work_email", sa.String(), nullable=True),
            sa.Column("biography", sa.String(), nullable=True),
            sa.Column("address", sa.JSON(), nullable=True),
            sa.Column("date_of_hire", sa.Date(), nullable=False),
            sa.Column("contract_start_date", sa.Date(), nullable=True),
            sa.Column("contract_end_date", sa.Date(), nullable=True),
            sa.Column("created_at", sa.DateTime(), nullable=False),
            sa.Column("updated_at", sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(["primary_position_id"], ["positions.id"]),
            sa.ForeignKeyConstraint(["primary_department_id"], ["departments.id"]),
            sa.ForeignKeyConstraint(["supervisor_position_id"], ["positions.id"]),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(
            op.f("ix_employee_profiles_employee_number"),
            "employee_profiles",
            ["employee_number"],
            unique=True,
        )
        op.create_index(
            op.f("ix_employee_profiles_national_id"), "employee_profiles", ["national_id"]
        )
        op.create_index(
            op.f("ix_employee_profiles_primary_position_id"),
            "employee_profiles",
            ["primary_position_id"],
        )
        op.create_index(
            op.f("ix_employee_profiles_primary_department_id"),
            "employee_profiles",
            ["primary_department_id"],
        )

    if not inspector.has_table("profile_change_requests"):
        op.create_table(
            "profile_change_requests",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("subject_id", sa.Uuid(), nullable=False),
            sa.Column("encoded_change", sa.String(), nullable=False),
            sa.Column("reason", sa.String(), nullable=False, server_default=""),
            sa.Column("status", sa.String(), nullable=False, server_default="pending"),
            sa.Column("submitted_at", sa.DateTime(), nullable=False),
            sa.Column("processed_at", sa.DateTime(), nullable=True),
            sa.ForeignKeyConstraint(["subject_id"], ["employee_profiles.id"]),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(
            op.f("ix_profile_change_requests_subject_id"),
            "profile_change_requests",
            ["subject_id"],
        )
        op.create_index(
            op.f("ix_profile_change_requests_status"),
            "profile_change_requests",
            ["status"],
        )
        op.create_index(
            op.f("ix_profile_change_requests_submitted_at"),
            "profile_change_requests",
            ["submitted_at"],
        )


def downgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    for table in ("profile_change_requests", "employee_profiles", "positions", "departments"):
        if inspector.has_table(table):
            op.drop_table(table)
