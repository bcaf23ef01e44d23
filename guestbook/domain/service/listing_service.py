"""Listing domain service."""

import logfire

from guestbook.domain.error import StoreUnavailableError
from guestbook.domain.model.greeting import Greeting, ScoredGreeting
from guestbook.domain.repository import GreetingRepository, VoteRepository
from guestbook.domain.value import RequestContext

from .base import Service

DEFAULT_LIMIT = 10


class ListingService(Service):
    """Domain service for reading the guestbook.

    Scores are derived on every read: one query for the greetings, then one
    vote count per greeting. The listing is small, so the extra round trips
    are accepted.
    """

    def __init__(
        self, greeting_repository: GreetingRepository, vote_repository: VoteRepository
    ) -> None:
        """Initialize listing service.

        Args:
            greeting_repository: Greeting repository
            vote_repository: Vote repository
        """
        self.greeting_repository = greeting_repository
        self.vote_repository = vote_repository

    async def list_recent(
        self, context: RequestContext, limit: int = DEFAULT_LIMIT
    ) -> list[ScoredGreeting]:
        """List the most recent greetings of the context's guestbook with scores.

        Args:
            context: Request context carrying the guestbook key
            limit: Maximum number of greetings

        Returns:
            Greetings newest first, each with its distinct vote count

        Raises:
            ValueError: If limit is not positive
            StoreUnavailableError: If the greeting query fails
        """
        if limit < 1:
            raise ValueError("Listing limit must be at least 1")

        with logfire.span(
            "listing_service.list_recent",
            guestbook=str(context.guestbook),
            limit=limit,
        ):
            greetings = await self.greeting_repository.find_recent(
                context.guestbook, limit
            )

            scored = [
                ScoredGreeting(greeting=greeting, score=await self._score(greeting))
                for greeting in greetings
            ]

            logfire.info("Greetings listed", count=len(scored))
            return scored

    async def _score(self, greeting: Greeting) -> int:
        """Count distinct votes on a greeting; a failed count scores zero."""
        try:
            return await self.vote_repository.count_by_topic(greeting.key)
        except StoreUnavailableError as e:
            logfire.warn(
                "Vote count failed, reporting zero",
                greeting_key=str(greeting.key),
                error=str(e),
            )
            return 0
