"""Domain model entities for the guestbook."""

from guestbook.domain.model.greeting import Greeting, ScoredGreeting
from guestbook.domain.model.vote import Vote

__all__ = [
    "Greeting",
    "ScoredGreeting",
    "Vote",
]
