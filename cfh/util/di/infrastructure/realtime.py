"""Realtime and in-process coordination providers."""

from dishka import Scope, provide

from cfh.adapter.realtime import Broadcaster
from cfh.domain.service import SubjectLockRegistry
from cfh.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Application-wide singletons shared by every request - concrete."""

    @provide(scope=Scope.APP)
    def get_broadcaster(self) -> Broadcaster:
        """Provide WebSocket broadcaster."""
        return Broadcaster()

    @provide(scope=Scope.APP)
    def get_subject_lock_registry(self) -> SubjectLockRegistry:
        """Provide per-subject vote locks."""
        return SubjectLockRegistry()
