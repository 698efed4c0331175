"""Newsletter use cases."""

from .subscribe import (
    SubscribeNewsletterRequest,
    SubscribeNewsletterResponse,
    SubscribeNewsletterUseCase,
)

__all__ = [
    "SubscribeNewsletterRequest",
    "SubscribeNewsletterResponse",
    "SubscribeNewsletterUseCase",
]
