"""In-memory unit of work for testing."""

from cfh.domain.repository import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """Writes to the in-memory store are visible immediately."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        """Count the commit."""
        self.commits += 1
