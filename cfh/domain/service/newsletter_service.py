"""Newsletter domain service."""

import logfire

from cfh.domain.repository import NewsletterRepository
from cfh.domain.value import EmailAddress

from .base import Service


class NewsletterService(Service):
    """Domain service for newsletter subscriptions."""

    def __init__(self, newsletter_repository: NewsletterRepository) -> None:
        """Initialize newsletter service.

        Args:
            newsletter_repository: Subscriber repository
        """
        self.newsletter_repository = newsletter_repository

    async def subscribe(self, email: EmailAddress) -> bool:
        """Subscribe an address.

        Returns:
            True if newly subscribed, False if already on the list
        """
        with logfire.span("newsletter_service.subscribe"):
            added = await self.newsletter_repository.add(email.root)
            if added:
                logfire.info("Newsletter subscriber added")
            else:
                logfire.info("Newsletter address already subscribed")
            return added
