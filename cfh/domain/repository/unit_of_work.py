"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Boundary of the request's writes."""

    @abstractmethod
    async def commit(self) -> None:
        """Make the writes done so far durable.

        Callers commit before announcing a change to anyone outside the
        request, so nothing is announced that could still be rolled back.
        """
        pass
