"""PostgreSQL implementation of Newsletter repository."""

from typing import List

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from cfh.domain.repository import NewsletterRepository
from cfh.persistence.tables import newsletter_subscribers_table


class PostgresNewsletterRepository(NewsletterRepository):
    """PostgreSQL implementation of NewsletterRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, email: str) -> bool:
        """Insert a subscriber unless the address is already present."""
        stmt = (
            insert(newsletter_subscribers_table)
            .values(email=email)
            .on_conflict_do_nothing(index_elements=["email"])
            .returning(newsletter_subscribers_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.fetchone() is not None

    async def find_all(self) -> List[str]:
        """List subscriber addresses in subscription order."""
        stmt = select(newsletter_subscribers_table.c.email).order_by(
            newsletter_subscribers_table.c.id
        )
        result = await self.session.execute(stmt)
        return [row.email for row in result.fetchall()]
