"""Cast vote use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from cfh.domain.model import Comment, Meme, Resource
from cfh.domain.service import VoteService
from cfh.domain.value import UserId, VotableType, VoteDirection


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    subject_kind: VotableType
    subject_id: int
    user_id: int  # From authenticated user
    direction: VoteDirection


class CastVoteResponse(BaseModel):
    """Cast vote response.

    Only the counters the subject kind carries are set.
    """

    subject_kind: VotableType
    subject_id: int
    upvotes: Optional[int] = None
    downvotes: Optional[int] = None
    votes: Optional[int] = None
    user_vote: Optional[VoteDirection]
    transition: str


class CastVoteUseCase:
    """Use case for voting on a meme, comment or resource.

    Voting the same direction twice withdraws the vote; voting the other
    direction switches it.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Updated counters and the caller's resulting vote

        Raises:
            InvalidDirectionError: If the direction is illegal for the kind
            NotFoundError: If the user or the subject does not exist
        """
        with logfire.span(
            "cast_vote.execute",
            subject_kind=request.subject_kind.value,
            subject_id=request.subject_id,
        ):
            outcome = await self.vote_service.cast_vote(
                request.subject_kind,
                request.subject_id,
                UserId(request.user_id),
                request.direction,
            )

            response = CastVoteResponse(
                subject_kind=request.subject_kind,
                subject_id=request.subject_id,
                user_vote=outcome.transition.destination,
                transition=str(outcome.transition),
            )
            subject = outcome.subject
            if isinstance(subject, Meme):
                response.upvotes = subject.upvotes
                response.downvotes = subject.downvotes
            elif isinstance(subject, Comment):
                response.upvotes = subject.upvotes
            elif isinstance(subject, Resource):
                response.votes = subject.votes
            return response
