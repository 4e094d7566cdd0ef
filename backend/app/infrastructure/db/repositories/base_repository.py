"""
Base Repository for SlugSpace

Generic async repository with the CRUD operations shared by every table.
Database failures are wrapped in DatabaseError so routes can map them.
"""

from typing import TypeVar, Generic, Optional, Type
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from app.infrastructure.exceptions import DatabaseError


ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=SQLModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=SQLModel)


class BaseRepository(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Generic async repository.

    Args:
        model: The SQLModel table class to operate on
        session: Async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        self._model = model
        self._session = session

    @property
    def session(self) -> AsyncSession:
        """Get the current session."""
        return self._session

    @property
    def table_name(self) -> str:
        return getattr(self._model, "__tablename__", self._model.__name__)

    async def get_by_id(self, id: UUID) -> Optional[ModelType]:
        """
        Get a single record by its primary key.

        Returns:
            Model instance or None if not found
        """
        try:
            return await self._session.get(self._model, id)
        except SQLAlchemyError as e:
            raise DatabaseError(
                f"Failed to load {self.table_name} {id}",
                operation="get_by_id",
                table=self.table_name,
                original_error=e,
            ) from e

    async def create(self, data: CreateSchemaType) -> ModelType:
        """Create a new record from a create schema."""
        db_obj = self._model.model_validate(data)
        self._session.add(db_obj)
        await self._session.flush()
        await self._session.refresh(db_obj)
        return db_obj

    async def update(self, id: UUID, data: UpdateSchemaType) -> Optional[ModelType]:
        """
        Update an existing record.

        Only fields set on ``data`` are written.

        Returns:
            Updated model instance or None if not found
        """
        db_obj = await self.get_by_id(id)
        if not db_obj:
            return None

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(db_obj, field, value)

        self._session.add(db_obj)
        await self._session.flush()
        await self._session.refresh(db_obj)
        return db_obj

    async def _execute(self, stmt, operation: str):
        """Execute a statement, wrapping driver errors in DatabaseError."""
        try:
            return await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise DatabaseError(
                f"Query failed on {self.table_name}",
                operation=operation,
                table=self.table_name,
                original_error=e,
            ) from e

    async def _scalars(self, stmt, operation: str) -> list:
        """Execute a select and return all scalar rows."""
        result = await self._execute(stmt, operation)
        return list(result.scalars().all())

    async def _count_by(self, stmt, operation: str) -> dict:
        """Execute a ``(key, count)`` aggregate and return it as a dict."""
        result = await self._execute(stmt, operation)
        return {key: count for key, count in result.all()}
