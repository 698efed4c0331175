"""Application layer DI providers."""

from dishka import Scope, provide

from cfh.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
    UpdateProfileUseCase,
)
from cfh.application.usecase.comment import CreateCommentUseCase, GetCommentsUseCase
from cfh.application.usecase.game import (
    CreateGameSessionUseCase,
    ListGameSessionsUseCase,
    UpdateGameSessionUseCase,
)
from cfh.application.usecase.meme import (
    CreateMemeUseCase,
    GetMemeUseCase,
    ListMemesUseCase,
)
from cfh.application.usecase.newsletter import SubscribeNewsletterUseCase
from cfh.application.usecase.resource import (
    CreateResourceUseCase,
    GetResourceUseCase,
    ListResourcesUseCase,
)
from cfh.application.usecase.vote import CastVoteUseCase
from cfh.config import RankingSettings
from cfh.domain.service import (
    AuthService,
    CommentService,
    FeedRanker,
    GameSessionService,
    JWTService,
    MemeService,
    NewsletterService,
    ResourceService,
    UserService,
    VoteLedger,
    VoteService,
)
from cfh.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)

    # Meme use cases
    @provide(scope=Scope.REQUEST)
    def get_list_memes_use_case(
        self,
        meme_service: MemeService,
        user_service: UserService,
        vote_ledger: VoteLedger,
        feed_ranker: FeedRanker,
        ranking_settings: RankingSettings,
    ) -> ListMemesUseCase:
        """Provide list memes use case."""
        return ListMemesUseCase(
            meme_service=meme_service,
            user_service=user_service,
            vote_ledger=vote_ledger,
            feed_ranker=feed_ranker,
            ranking_settings=ranking_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_meme_use_case(
        self,
        meme_service: MemeService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> GetMemeUseCase:
        """Provide get meme use case."""
        return GetMemeUseCase(
            meme_service=meme_service,
            user_service=user_service,
            vote_ledger=vote_ledger,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_meme_use_case(
        self,
        meme_service: MemeService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> CreateMemeUseCase:
        """Provide create meme use case."""
        return CreateMemeUseCase(
            meme_service=meme_service,
            user_service=user_service,
            vote_ledger=vote_ledger,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        meme_service: MemeService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            meme_service=meme_service,
            user_service=user_service,
            vote_ledger=vote_ledger,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            vote_ledger=vote_ledger,
        )

    # Resource use cases
    @provide(scope=Scope.REQUEST)
    def get_list_resources_use_case(
        self,
        resource_service: ResourceService,
        feed_ranker: FeedRanker,
        vote_ledger: VoteLedger,
    ) -> ListResourcesUseCase:
        """Provide list resources use case."""
        return ListResourcesUseCase(
            resource_service=resource_service,
            feed_ranker=feed_ranker,
            vote_ledger=vote_ledger,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_resource_use_case(
        self, resource_service: ResourceService
    ) -> GetResourceUseCase:
        """Provide get resource use case."""
        return GetResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_create_resource_use_case(
        self, resource_service: ResourceService, user_service: UserService
    ) -> CreateResourceUseCase:
        """Provide create resource use case."""
        return CreateResourceUseCase(
            resource_service=resource_service, user_service=user_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Game session use cases
    @provide(scope=Scope.REQUEST)
    def get_list_game_sessions_use_case(
        self, game_session_service: GameSessionService
    ) -> ListGameSessionsUseCase:
        """Provide list game sessions use case."""
        return ListGameSessionsUseCase(game_session_service=game_session_service)

    @provide(scope=Scope.REQUEST)
    def get_create_game_session_use_case(
        self, game_session_service: GameSessionService, user_service: UserService
    ) -> CreateGameSessionUseCase:
        """Provide create game session use case."""
        return CreateGameSessionUseCase(
            game_session_service=game_session_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_game_session_use_case(
        self, game_session_service: GameSessionService
    ) -> UpdateGameSessionUseCase:
        """Provide update game session use case."""
        return UpdateGameSessionUseCase(game_session_service=game_session_service)

    # Newsletter use cases
    @provide(scope=Scope.REQUEST)
    def get_subscribe_newsletter_use_case(
        self, newsletter_service: NewsletterService
    ) -> SubscribeNewsletterUseCase:
        """Provide subscribe newsletter use case."""
        return SubscribeNewsletterUseCase(newsletter_service=newsletter_service)
