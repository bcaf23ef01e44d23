"""Repository interfaces for the guestbook domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from guestbook.domain.repository.greeting import GreetingRepository
from guestbook.domain.repository.vote import VoteRepository

__all__ = [
    "GreetingRepository",
    "VoteRepository",
]
