"""In-memory persistence that fails selected store operations."""

from dishka import Provider, Scope, provide

from guestbook.domain.error import StoreUnavailableError
from guestbook.domain.repository import GreetingRepository, VoteRepository
from guestbook.persistence.repository.inmemory import (
    InMemoryDatastore,
    InMemoryGreetingRepository,
    InMemoryVoteRepository,
)

# Operation names, matching those reported by the PostgreSQL repositories
GREETING_QUERY = "greeting query"
GREETING_WRITE = "greeting write"
VOTE_COUNT = "vote count"
DUPLICATE_VOTE_CHECK = "duplicate vote check"
VOTE_WRITE = "vote write"


class FailingGreetingRepository(InMemoryGreetingRepository):
    def __init__(self, datastore: InMemoryDatastore, fail: frozenset[str]) -> None:
        super().__init__(datastore)
        self.fail = fail

    async def find_recent(self, guestbook, limit):
        if GREETING_QUERY in self.fail:
            raise StoreUnavailableError(GREETING_QUERY)
        return await super().find_recent(guestbook, limit)

    async def save(self, greeting):
        if GREETING_WRITE in self.fail:
            raise StoreUnavailableError(GREETING_WRITE)
        return await super().save(greeting)


class FailingVoteRepository(InMemoryVoteRepository):
    def __init__(self, datastore: InMemoryDatastore, fail: frozenset[str]) -> None:
        super().__init__(datastore)
        self.fail = fail

    async def count_by_topic(self, topic):
        if VOTE_COUNT in self.fail:
            raise StoreUnavailableError(VOTE_COUNT)
        return await super().count_by_topic(topic)

    async def count_by_topic_and_author(self, topic, author):
        if DUPLICATE_VOTE_CHECK in self.fail:
            raise StoreUnavailableError(DUPLICATE_VOTE_CHECK)
        return await super().count_by_topic_and_author(topic, author)

    async def save(self, vote):
        if VOTE_WRITE in self.fail:
            raise StoreUnavailableError(VOTE_WRITE)
        return await super().save(vote)


class FailingPersistenceProvider(Provider):
    """Persistence component whose repositories raise on the named operations.

    Not a PersistenceProvider subclass, so production/mock selection is
    unaffected; pass it to build_test_container(replace=...) instead.
    """

    def __init__(self, *fail: str) -> None:
        super().__init__()
        self.fail = frozenset(fail)

    @provide(scope=Scope.APP)
    def get_datastore(self) -> InMemoryDatastore:
        return InMemoryDatastore()

    @provide(scope=Scope.REQUEST)
    def get_greeting_repository(
        self, datastore: InMemoryDatastore
    ) -> GreetingRepository:
        return FailingGreetingRepository(datastore, self.fail)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, datastore: InMemoryDatastore) -> VoteRepository:
        return FailingVoteRepository(datastore, self.fail)
