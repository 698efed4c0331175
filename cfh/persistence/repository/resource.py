"""PostgreSQL implementation of Resource repository."""

from typing import List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cfh.domain.model import Resource
from cfh.domain.repository import ResourceRepository
from cfh.domain.value import CounterDelta, UserId
from cfh.persistence.mappers import row_to_resource
from cfh.persistence.tables import resources_table


class PostgresResourceRepository(ResourceRepository):
    """PostgreSQL implementation of ResourceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, entity_id: int, for_update: bool = False
    ) -> Optional[Resource]:
        """Find a resource by ID, optionally locking its row."""
        stmt = select(resources_table).where(resources_table.c.id == entity_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_resource(row._asdict()) if row else None

    async def find_all(self) -> List[Resource]:
        """Find all resources in ID order."""
        stmt = select(resources_table).order_by(resources_table.c.id)
        result = await self.session.execute(stmt)
        return [row_to_resource(row._asdict()) for row in result.fetchall()]

    async def create(
        self,
        title: str,
        category: Optional[str] = None,
        markdown: Optional[str] = None,
        download_url: Optional[str] = None,
        created_by: Optional[UserId] = None,
    ) -> Resource:
        """Insert a resource and return it with its serial ID."""
        stmt = (
            insert(resources_table)
            .values(
                title=title,
                category=category,
                markdown=markdown,
                download_url=download_url,
                created_by=created_by,
            )
            .returning(*resources_table.c)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_resource(result.one()._asdict())

    async def apply_vote_delta(self, entity_id: int, delta: CounterDelta) -> None:
        """Atomically add a delta to the signed vote counter."""
        stmt = (
            update(resources_table)
            .where(resources_table.c.id == entity_id)
            .values(votes=resources_table.c.votes + delta.votes)
        )
        await self.session.execute(stmt)
        await self.session.flush()
