"""Chainable query helpers exposed on models as `Model.objects`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlmodel import SQLModel, col, select

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement
    from sqlmodel.ext.asyncio.session import AsyncSession
    from sqlmodel.sql.expression import SelectOfScalar

ModelT = TypeVar("ModelT", bound=SQLModel)


class ModelQuery(Generic[ModelT]):
    """Immutable wrapper around a `select(Model)` statement."""

    def __init__(self, model: type[ModelT], statement: SelectOfScalar[ModelT]) -> None:
        self.model = model
        self.statement = statement

    def filter(self, *criteria: ColumnElement[bool] | bool) -> ModelQuery[ModelT]:
        return ModelQuery(self.model, self.statement.where(*criteria))

    def filter_by(self, **kwargs: Any) -> ModelQuery[ModelT]:
        return ModelQuery(self.model, self.statement.filter_by(**kwargs))

    def order_by(self, *clauses: Any) -> ModelQuery[ModelT]:
        return ModelQuery(self.model, self.statement.order_by(*clauses))

    def execution_options(self, **options: Any) -> ModelQuery[ModelT]:
        return ModelQuery(self.model, self.statement.execution_options(**options))

    async def first(self, session: AsyncSession) -> ModelT | None:
        return (await session.exec(self.statement)).first()

    async def all(self, session: AsyncSession) -> list[ModelT]:
        return list(await session.exec(self.statement))


class ModelManager(Generic[ModelT]):
    """Entry point for building queries against one model class."""

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    def all(self) -> ModelQuery[ModelT]:
        return ModelQuery(self.model, select(self.model))

    def by_id(self, obj_id: object) -> ModelQuery[ModelT]:
        return self.filter(col(self.model.id) == obj_id)  # type: ignore[attr-defined]

    def filter(self, *criteria: ColumnElement[bool] | bool) -> ModelQuery[ModelT]:
        return self.all().filter(*criteria)

    def filter_by(self, **kwargs: Any) -> ModelQuery[ModelT]:
        return self.all().filter_by(**kwargs)


class ManagerDescriptor:
    """Class-level descriptor returning a manager bound to the owner model."""

    def __get__(self, instance: object, owner: type[ModelT]) -> ModelManager[ModelT]:
        return ModelManager(owner)
