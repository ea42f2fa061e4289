"""Shared SQLModel base class with the `objects` query manager."""

from __future__ import annotations

from typing import ClassVar

from sqlmodel import SQLModel

from employee_profile.db.query_manager import ManagerDescriptor


class QueryModel(SQLModel):
    """SQLModel base exposing `Model.objects` for chainable lookups."""

    objects: ClassVar[ManagerDescriptor] = ManagerDescriptor()
