"""Feed ranking domain service.

Pure ordering and pagination; ranking never mutates entities.
"""

from typing import Optional, Sequence

from cfh.config import RankingSettings
from cfh.domain.error import ValidationError
from cfh.domain.model import Meme, Resource
from cfh.domain.value import FeedSort

from .base import Service


class FeedRanker(Service):
    """Orders memes for the feed and resources for the library."""

    def __init__(self, ranking_settings: RankingSettings) -> None:
        """Initialize feed ranker.

        Args:
            ranking_settings: Ranking configuration
        """
        self.ranking_settings = ranking_settings

    def hot_score(self, meme: Meme) -> float:
        """Net score plus a small boost that grows with creation time."""
        return (
            meme.net_score
            + meme.created_at.timestamp() / self.ranking_settings.hot_recency_divisor
        )

    def rank(
        self,
        memes: Sequence[Meme],
        policy: FeedSort = FeedSort.HOT,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[Meme]:
        """Sort memes by a policy and cut out one page.

        Sorting is stable, so ties keep their input order.

        Args:
            memes: Memes to rank
            policy: Ordering policy
            offset: Number of ranked items to skip
            limit: Page size (None means no limit)

        Returns:
            The requested page, possibly empty

        Raises:
            ValidationError: If offset or limit is negative
        """
        if offset < 0:
            raise ValidationError("offset must not be negative")
        if limit is not None and limit < 0:
            raise ValidationError("limit must not be negative")

        if policy is FeedSort.NEW:
            ranked = sorted(memes, key=lambda m: m.created_at, reverse=True)
        elif policy is FeedSort.TOP:
            ranked = sorted(memes, key=lambda m: m.net_score, reverse=True)
        else:
            ranked = sorted(memes, key=self.hot_score, reverse=True)

        end = None if limit is None else offset + limit
        return ranked[offset:end]

    def rank_resources(
        self, resources: Sequence[Resource], category: Optional[str] = None
    ) -> list[Resource]:
        """Filter resources by exact category and sort by votes, highest first."""
        if category is not None:
            resources = [r for r in resources if r.category == category]
        return sorted(resources, key=lambda r: r.votes, reverse=True)
