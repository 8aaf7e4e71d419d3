"""
Base Repository

Generic repository with the CRUD operations shared by every entity.

What This Provides:
===================
- get(id)        → Fetch single record by primary key
- exists(id)     → Check if record exists without loading it
- create()       → Insert a record inside a SAVEPOINT
- update()       → Apply changes inside a SAVEPOINT
- delete()       → Hard delete record

Generic Type Pattern:
=====================
    class UserRepository(BaseRepository[User]):
        pass

    repo = UserRepository(db)
    user = await repo.get(id)  # Returns User, not Any!

Uniqueness and SAVEPOINTs:
==========================
Unique indexes (email, slug) are the source of truth for uniqueness. Writes run
inside session.begin_nested(), so when a concurrent request wins the race:

    SAVEPOINT sp1
    INSERT ...             → IntegrityError
    ROLLBACK TO sp1        → request transaction still usable
    raise DuplicateResourceError(conflict_message)

This lets services retry (slug disambiguation) or surface a 409.

flush() vs commit():
====================
Repositories never commit. get_db() commits once the handler returns, so
every change made during a request lands in one transaction.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from src.shared.core.exceptions import DuplicateResourceError
from src.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
        conflict_message: Message used when a unique index rejects a write
    """

    conflict_message = "Resource already exists"

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., User, BlogPost)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: Any) -> Optional[ModelType]:
        """
        Get a single record by its primary key.

        Args:
            record_id: Primary key value (UUID for users, int for posts)

        Returns:
            The model instance if found, None otherwise
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def exists(self, record_id: Any) -> bool:
        """
        Check if a record exists without loading it.

        Args:
            record_id: Primary key to check

        Returns:
            True if record exists, False otherwise
        """
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        The INSERT is flushed inside a SAVEPOINT so a unique-index violation
        rolls back only this statement.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values

        Raises:
            DuplicateResourceError: If a unique index rejects the row
        """
        instance = self.model(**kwargs)

        try:
            async with self.session.begin_nested():
                self.session.add(instance)
        except IntegrityError as e:
            raise DuplicateResourceError(self.conflict_message) from e

        # Reload DB-generated values (id, server defaults, eager relationships)
        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(
        self,
        record_id: Any,
        **kwargs: Any,
    ) -> Optional[ModelType]:
        """
        Update a record by primary key.

        Only fields that exist on the model and are not None are applied.

        Args:
            record_id: Primary key of the record to update
            **kwargs: Fields to update

        Returns:
            Updated model instance, or None if not found

        Raises:
            DuplicateResourceError: If a unique index rejects the new values
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        try:
            async with self.session.begin_nested():
                for field, value in kwargs.items():
                    if hasattr(instance, field) and value is not None:
                        setattr(instance, field, value)
        except IntegrityError as e:
            raise DuplicateResourceError(self.conflict_message) from e

        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: Any) -> bool:
        """
        Hard delete a record by primary key.

        Args:
            record_id: Primary key of the record to delete

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
