"""Process-local datastore backing the in-memory repositories."""

from itertools import count

from guestbook.domain.model import Greeting, Vote


class InMemoryDatastore:
    """Holds greetings and votes for in-memory repositories.

    Shared between request-scoped repositories so that writes from one
    request are visible to the next. Ids are allocated from per-kind counters
    starting at 1.
    """

    def __init__(self) -> None:
        self.greetings: list[Greeting] = []
        self.votes: list[Vote] = []
        self._greeting_ids = count(1)
        self._vote_ids = count(1)

    def next_greeting_id(self) -> int:
        return next(self._greeting_ids)

    def next_vote_id(self) -> int:
        return next(self._vote_ids)
