"""Posting domain service."""

from datetime import datetime, timezone

import logfire

from guestbook.domain.model.greeting import Greeting
from guestbook.domain.repository import GreetingRepository
from guestbook.domain.value import RequestContext

from .base import Service


class PostingService(Service):
    """Domain service for signing the guestbook."""

    def __init__(self, greeting_repository: GreetingRepository) -> None:
        """Initialize posting service.

        Args:
            greeting_repository: Greeting repository
        """
        self.greeting_repository = greeting_repository

    async def post_greeting(self, context: RequestContext, content: str) -> Greeting:
        """Store a new greeting in the context's guestbook.

        Content is stored verbatim, including empty content. Escaping is left
        to whoever renders it.

        Args:
            context: Request context carrying guestbook key and caller
            content: Message body

        Returns:
            The stored greeting with its allocated id

        Raises:
            StoreUnavailableError: If the write fails (not retried)
        """
        author = str(context.user) if context.user is not None else ""

        with logfire.span(
            "posting_service.post_greeting",
            guestbook=str(context.guestbook),
            author=author,
        ):
            greeting = Greeting(
                guestbook=context.guestbook,
                author=author,
                content=content,
                created_at=datetime.now(timezone.utc),
            )

            saved = await self.greeting_repository.save(greeting)
            logfire.debug(
                "User {author} submitted post {key}",
                author=saved.author,
                key=str(saved.key),
            )
            return saved
