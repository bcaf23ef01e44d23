"""PostgreSQL repository implementations."""

from guestbook.persistence.repository.greeting import PostgresGreetingRepository
from guestbook.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresGreetingRepository",
    "PostgresVoteRepository",
]
