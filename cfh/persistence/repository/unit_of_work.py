"""PostgreSQL unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from cfh.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Commits the request-scoped session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        """Commit the current transaction; later writes start a new one."""
        await self.session.commit()
        logfire.info("Session committed early")
