"""Greeting repository interface."""

from abc import ABC, abstractmethod
from typing import List

from guestbook.domain.model.greeting import Greeting
from guestbook.domain.value import GuestbookKey


class GreetingRepository(ABC):
    """Repository for Greeting entity.

    Defines the contract for greeting persistence operations.
    Implementations live in the infrastructure layer.
    Every method raises StoreUnavailableError when the store fails.
    """

    @abstractmethod
    async def find_recent(self, guestbook: GuestbookKey, limit: int) -> List[Greeting]:
        """Find the most recent greetings under a guestbook key.

        Args:
            guestbook: Parent key the query is scoped to
            limit: Maximum number of greetings to return

        Returns:
            Greetings ordered by created_at descending, then id descending
        """
        pass

    @abstractmethod
    async def save(self, greeting: Greeting) -> Greeting:
        """Store a new greeting, allocating its id under its guestbook key.

        Args:
            greeting: Greeting without an id

        Returns:
            The stored greeting, carrying the allocated id
        """
        pass
