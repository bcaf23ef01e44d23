"""Vote repository interface."""

from abc import ABC, abstractmethod

from guestbook.domain.model.vote import Vote
from guestbook.domain.value import GreetingKey, Identity


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    Every method raises StoreUnavailableError when the store fails.
    """

    @abstractmethod
    async def count_by_topic(self, topic: GreetingKey) -> int:
        """Count distinct votes on a greeting.

        Identical (topic, author) records are counted once.

        Args:
            topic: Key of the voted greeting

        Returns:
            Number of distinct votes
        """
        pass

    @abstractmethod
    async def count_by_topic_and_author(
        self, topic: GreetingKey, author: Identity
    ) -> int:
        """Count votes cast by one identity on one greeting.

        Args:
            topic: Key of the voted greeting
            author: Voter identity

        Returns:
            Number of matching vote records
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Store a new vote under its topic's guestbook key.

        No uniqueness is enforced here; callers check for an existing vote first.

        Args:
            vote: Vote without an id

        Returns:
            The stored vote, carrying the allocated id
        """
        pass
