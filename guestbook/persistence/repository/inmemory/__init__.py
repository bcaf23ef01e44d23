"""In-memory repository implementations for testing."""

from .datastore import InMemoryDatastore
from .greeting import InMemoryGreetingRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryDatastore",
    "InMemoryGreetingRepository",
    "InMemoryVoteRepository",
]
