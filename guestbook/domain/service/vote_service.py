"""Vote domain service."""

import logfire

from guestbook.domain.error import StoreUnavailableError
from guestbook.domain.model.vote import Vote
from guestbook.domain.repository import VoteRepository
from guestbook.domain.value import (
    GreetingId,
    GreetingKey,
    RequestContext,
    VoteOutcome,
)

from .base import Service


class VoteService(Service):
    """Domain service for vote operations.

    One vote per identity per greeting, checked with a count before the
    write. The check and the write are not atomic, so two concurrent votes
    from the same identity can both be stored.
    """

    def __init__(
        self, vote_repository: VoteRepository, surface_store_errors: bool = False
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            surface_store_errors: Raise on vote write failure instead of
                logging and reporting STORE_FAILED
        """
        self.vote_repository = vote_repository
        self.surface_store_errors = surface_store_errors

    async def cast_vote(
        self, context: RequestContext, target_id: GreetingId
    ) -> VoteOutcome:
        """Cast the caller's vote on a greeting.

        Args:
            context: Request context carrying guestbook key and caller
            target_id: Id of the greeting voted on

        Returns:
            AUTHENTICATION_REQUIRED for anonymous callers, ALREADY_VOTED when a
            vote exists or the existence check failed, STORE_FAILED when the
            write failed, RECORDED otherwise

        Raises:
            StoreUnavailableError: Only if the write fails and
                surface_store_errors is set
        """
        if context.user is None:
            return VoteOutcome.AUTHENTICATION_REQUIRED

        topic = GreetingKey(guestbook=context.guestbook, id=target_id)
        author = context.user

        with logfire.span(
            "vote_service.cast_vote", topic=str(topic), author=str(author)
        ):
            # Fail closed: a failed check counts as an existing vote
            try:
                existing = await self.vote_repository.count_by_topic_and_author(
                    topic, author
                )
            except StoreUnavailableError as e:
                logfire.warn(
                    "Duplicate vote check failed, treating as already voted",
                    topic=str(topic),
                    author=str(author),
                    error=str(e),
                )
                return VoteOutcome.ALREADY_VOTED

            if existing > 0:
                logfire.info(
                    "Duplicate vote ignored", topic=str(topic), author=str(author)
                )
                return VoteOutcome.ALREADY_VOTED

            try:
                vote = await self.vote_repository.save(
                    Vote(topic=topic, author=author)
                )
            except StoreUnavailableError as e:
                if self.surface_store_errors:
                    raise
                logfire.warn(
                    "Vote write failed, dropping vote",
                    topic=str(topic),
                    author=str(author),
                    error=str(e),
                )
                return VoteOutcome.STORE_FAILED

            logfire.debug(
                "User {author} submitted vote on {topic}",
                author=str(vote.author),
                topic=str(vote.topic),
            )
            return VoteOutcome.RECORDED
