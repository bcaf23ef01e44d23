"""In-memory greeting repository for testing."""

from typing import Optional

from guestbook.domain.model.greeting import Greeting
from guestbook.domain.repository.greeting import GreetingRepository
from guestbook.domain.value import GreetingId, GuestbookKey

from .datastore import InMemoryDatastore


class InMemoryGreetingRepository(GreetingRepository):
    """In-memory implementation of GreetingRepository for testing."""

    def __init__(self, datastore: Optional[InMemoryDatastore] = None) -> None:
        self._store = datastore or InMemoryDatastore()

    async def find_recent(self, guestbook: GuestbookKey, limit: int) -> list[Greeting]:
        """Find the most recent greetings under a guestbook key."""
        greetings = [g for g in self._store.greetings if g.guestbook == guestbook]
        greetings.sort(key=lambda g: (g.created_at, g.id), reverse=True)
        return greetings[:limit]

    async def save(self, greeting: Greeting) -> Greeting:
        """Store a greeting with a freshly allocated id."""
        saved = greeting.model_copy(
            update={"id": GreetingId(self._store.next_greeting_id())}
        )
        self._store.greetings.append(saved)
        return saved
