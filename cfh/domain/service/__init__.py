"""Domain services."""

from .auth_service import AuthService, check_password_policy
from .base import Service
from .comment_service import CommentService
from .feed_ranker import FeedRanker
from .game_session_service import GameSessionService
from .jwt_service import JWTService
from .meme_service import MemeService
from .newsletter_service import NewsletterService
from .resource_service import ResourceService
from .score_aggregator import ScoreAggregator, compute_delta
from .user_service import UserService
from .vote_ledger import VoteLedger
from .vote_service import SubjectLockRegistry, VoteOutcome, VoteService

__all__ = [
    "AuthService",
    "CommentService",
    "FeedRanker",
    "GameSessionService",
    "JWTService",
    "MemeService",
    "NewsletterService",
    "ResourceService",
    "ScoreAggregator",
    "Service",
    "SubjectLockRegistry",
    "UserService",
    "VoteLedger",
    "VoteOutcome",
    "VoteService",
    "check_password_policy",
    "compute_delta",
]
