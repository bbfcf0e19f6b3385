"""Base repository shared by feature repositories."""
from typing import Any, Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from api.shared.entities.base import BaseEntity

T = TypeVar("T", bound=BaseEntity)


class BaseRepository(Generic[T]):
    """Base repository with the CRUD operations the features need."""

    model: Type[T]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entity: T) -> T:
        """Create new entity."""
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def get_by_field(
        self, field_name: str, value: Any, limit: Optional[int] = None
    ) -> List[T]:
        """Get entities by field value."""
        field = getattr(self.model, field_name)
        stmt = select(self.model).where(field == value)

        if limit:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list(
        self,
        offset: int = 0,
        limit: int = 100,
        order_by: Optional[str] = None,
        **filters: Any,
    ) -> Tuple[List[T], int]:
        """List entities with pagination and filters.

        ``order_by`` names a column; prefix it with ``-`` for descending order.
        Ties are broken by id in the same direction so pages are stable.
        """
        count_stmt = select(func.count(self.model.id))
        stmt = select(self.model)

        for field_name, value in filters.items():
            if value is None or not hasattr(self.model, field_name):
                continue
            field = getattr(self.model, field_name)
            if isinstance(value, (list, tuple)):
                stmt = stmt.where(field.in_(value))
                count_stmt = count_stmt.where(field.in_(value))
            else:
                stmt = stmt.where(field == value)
                count_stmt = count_stmt.where(field == value)

        if order_by:
            descending = order_by.startswith("-")
            field_name = order_by.lstrip("-")
            if hasattr(self.model, field_name):
                field = getattr(self.model, field_name)
                if descending:
                    stmt = stmt.order_by(field.desc(), self.model.id.desc())
                else:
                    stmt = stmt.order_by(field.asc(), self.model.id.asc())
        else:
            stmt = stmt.order_by(self.model.id.asc())

        stmt = stmt.offset(offset).limit(limit)

        result = await self.session.execute(stmt)
        count_result = await self.session.execute(count_stmt)

        # count_result.scalar() may be None, default to 0
        total = count_result.scalar() or 0
        return list(result.scalars().all()), int(total)
