"""Domain layer DI providers."""

from dishka import Scope, provide

from cfh.config import AuthSettings, RankingSettings
from cfh.domain.repository import (
    CommentRepository,
    GameSessionRepository,
    MemeRepository,
    NewsletterRepository,
    ResourceRepository,
    UserRepository,
    VoteRepository,
)
from cfh.domain.service import (
    AuthService,
    CommentService,
    FeedRanker,
    GameSessionService,
    JWTService,
    MemeService,
    NewsletterService,
    ResourceService,
    ScoreAggregator,
    SubjectLockRegistry,
    UserService,
    VoteLedger,
    VoteService,
)
from cfh.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_auth_service(
        self, user_service: UserService, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide password authentication domain service."""
        return AuthService(user_service=user_service, auth_settings=auth_settings)

    @provide
    def get_meme_service(self, meme_repository: MemeRepository) -> MemeService:
        """Provide meme domain service."""
        return MemeService(meme_repository=meme_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, meme_service: MemeService
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, meme_service=meme_service
        )

    @provide
    def get_resource_service(
        self, resource_repository: ResourceRepository
    ) -> ResourceService:
        """Provide resource domain service."""
        return ResourceService(resource_repository=resource_repository)

    @provide
    def get_game_session_service(
        self, game_session_repository: GameSessionRepository
    ) -> GameSessionService:
        """Provide game session domain service."""
        return GameSessionService(game_session_repository=game_session_repository)

    @provide
    def get_newsletter_service(
        self, newsletter_repository: NewsletterRepository
    ) -> NewsletterService:
        """Provide newsletter domain service."""
        return NewsletterService(newsletter_repository=newsletter_repository)

    @provide
    def get_vote_ledger(self, vote_repository: VoteRepository) -> VoteLedger:
        """Provide vote ledger."""
        return VoteLedger(vote_repository=vote_repository)

    @provide
    def get_score_aggregator(
        self,
        meme_repository: MemeRepository,
        comment_repository: CommentRepository,
        resource_repository: ResourceRepository,
    ) -> ScoreAggregator:
        """Provide score aggregator."""
        return ScoreAggregator(
            meme_repository=meme_repository,
            comment_repository=comment_repository,
            resource_repository=resource_repository,
        )

    @provide
    def get_vote_service(
        self,
        vote_ledger: VoteLedger,
        score_aggregator: ScoreAggregator,
        user_service: UserService,
        lock_registry: SubjectLockRegistry,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_ledger=vote_ledger,
            score_aggregator=score_aggregator,
            user_service=user_service,
            lock_registry=lock_registry,
        )

    @provide
    def get_feed_ranker(self, ranking_settings: RankingSettings) -> FeedRanker:
        """Provide feed ranker."""
        return FeedRanker(ranking_settings=ranking_settings)
