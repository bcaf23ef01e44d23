"""Mock persistence providers for testing."""

from dishka import Scope, provide

from guestbook.domain.repository import GreetingRepository, VoteRepository
from guestbook.persistence.repository.inmemory import (
    InMemoryDatastore,
    InMemoryGreetingRepository,
    InMemoryVoteRepository,
)
from guestbook.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The datastore is APP-scoped so writes survive across requests of one
    container; each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_datastore(self) -> InMemoryDatastore:
        """Provide the shared in-memory datastore."""
        return InMemoryDatastore()

    @provide(scope=Scope.REQUEST)
    def get_greeting_repository(
        self, datastore: InMemoryDatastore
    ) -> GreetingRepository:
        """Provide in-memory greeting repository."""
        return InMemoryGreetingRepository(datastore)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, datastore: InMemoryDatastore) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(datastore)
