"""In-memory vote repository for testing."""

from typing import Optional

from guestbook.domain.model.vote import Vote
from guestbook.domain.repository.vote import VoteRepository
from guestbook.domain.value import GreetingKey, Identity, VoteId

from .datastore import InMemoryDatastore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, datastore: Optional[InMemoryDatastore] = None) -> None:
        self._store = datastore or InMemoryDatastore()

    async def count_by_topic(self, topic: GreetingKey) -> int:
        """Count distinct (topic, author) votes on a greeting."""
        return len({v.author for v in self._store.votes if v.topic == topic})

    async def count_by_topic_and_author(
        self, topic: GreetingKey, author: Identity
    ) -> int:
        """Count votes cast by one identity on one greeting."""
        return sum(
            1 for v in self._store.votes if v.topic == topic and v.author == author
        )

    async def save(self, vote: Vote) -> Vote:
        """Store a vote. Duplicates are not rejected."""
        saved = vote.model_copy(update={"id": VoteId(self._store.next_vote_id())})
        self._store.votes.append(saved)
        return saved
