"""Generic data-access layer.

Query helpers shared by every entity repository. No business logic, no HTTP
concerns, and no transaction control: ``get_db`` commits or rolls back.
"""

from typing import Any

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from pcms.models import Entity
from pcms.schemas.pagination import (
    DEFAULT_PAGE_SIZE,
    UNPAGED,
    PaginatedList,
    create_paginated_list,
)


class SelectSource[T]:
    """PageSource over a SQLAlchemy ``Select`` returning one entity per row."""

    def __init__(self, db: AsyncSession, stmt: Select[tuple[T]]) -> None:
        self.db = db
        self.stmt = stmt

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self.stmt.order_by(None).subquery())
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def fetch(self, offset: int, limit: int) -> list[T]:
        result = await self.db.execute(self.stmt.offset(offset).limit(limit))
        return list(result.scalars().all())

    async def fetch_all(self) -> list[T]:
        result = await self.db.execute(self.stmt)
        return list(result.scalars().all())


class GenericRepository[E: Entity]:
    """CRUD over one entity type within a request-scoped session.

    Subclasses set ``model``::

        class MemberRepository(GenericRepository[Member]):
            model = Member
    """

    model: type[E]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @property
    def primary_key(self) -> InstrumentedAttribute[Any]:
        column = self.model.__mapper__.primary_key[0]
        return getattr(self.model, column.key)  # type: ignore[no-any-return]

    def query(
        self, *filters: ColumnElement[bool], include_deleted: bool = False
    ) -> Select[tuple[E]]:
        """Base select ordered by primary key (ULIDs, so creation order)."""
        stmt = select(self.model).where(*filters).order_by(self.primary_key)
        if not include_deleted:
            stmt = stmt.where(self.model.deleted_date.is_(None))
        return stmt

    async def get_by_id(self, identifier: str, *, include_deleted: bool = False) -> E | None:
        """Return the entity with the given primary key, or None."""
        return await self.get(self.primary_key == identifier, include_deleted=include_deleted)

    async def get(self, *filters: ColumnElement[bool], include_deleted: bool = False) -> E | None:
        """Return the single entity matching ``filters``, or None."""
        result = await self.db.execute(self.query(*filters, include_deleted=include_deleted))
        return result.scalar_one_or_none()

    async def list_all(self, *filters: ColumnElement[bool]) -> list[E]:
        return await SelectSource(self.db, self.query(*filters)).fetch_all()

    async def list_page(
        self,
        *filters: ColumnElement[bool],
        page_index: int = UNPAGED,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> PaginatedList[E]:
        """Return one page of entities (all of them for ``page_index`` 0)."""
        source = SelectSource(self.db, self.query(*filters))
        return await create_paginated_list(source, page_index, page_size)

    async def add(self, entity: E) -> E:
        """Stage a new entity and flush so database defaults are populated."""
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def update(self, entity: E) -> E:
        """Stamp ``modified_date`` and flush pending attribute changes."""
        entity.mark_modified()
        await self.db.flush()
        return entity

    async def soft_delete(self, identifier: str) -> bool:
        """Mark an entity deleted without removing its row.

        Returns False when no live entity has this identifier.
        """
        entity = await self.get_by_id(identifier)
        if entity is None:
            return False
        entity.mark_deleted()
        await self.db.flush()
        return True
