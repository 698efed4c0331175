"""Shared contract of repositories whose entities can be voted on."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from cfh.domain.value import CounterDelta

EntityT = TypeVar("EntityT")


class VotableRepository(ABC, Generic[EntityT]):
    """Repository for an entity kind that carries vote counters.

    The score aggregator only talks to this contract, so memes, comments and
    resources share one vote code path.
    """

    @abstractmethod
    async def find_by_id(
        self, entity_id: int, for_update: bool = False
    ) -> Optional[EntityT]:
        """Find an entity by ID.

        Args:
            entity_id: The entity's identifier
            for_update: Lock the entity until the end of the current
                transaction (used while a vote is being cast)

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def apply_vote_delta(self, entity_id: int, delta: CounterDelta) -> None:
        """Atomically add a delta to the entity's vote counters.

        Args:
            entity_id: The entity's identifier
            delta: Counter changes to apply
        """
        pass
