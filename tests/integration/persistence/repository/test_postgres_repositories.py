"""Integration tests for PostgreSQL repositories.

Requires PostgreSQL at DATABASE__URL with migrations applied:
    python scripts/run_migrations.py
    pytest -m integration
"""

from uuid import uuid4

import pytest

from guestbook.domain.model import Vote
from guestbook.domain.repository import GreetingRepository, VoteRepository
from guestbook.domain.service import ListingService, VoteService
from guestbook.domain.value import GreetingKey, Identity, VoteOutcome, guestbook_key
from tests.conftest import make_context, make_greeting
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration fixture - real persistence, assumes postgres running
integration_env = create_env_fixture(unmock={"persistence"})


@pytest.fixture
def guestbook():
    """A fresh guestbook key per test, so tests never see each other's rows."""
    return guestbook_key(f"test_{uuid4().hex}")


class TestPostgresGreetingRepository:
    """Tests for PostgresGreetingRepository."""

    @pytest.mark.asyncio
    async def test_save_allocates_id(self, integration_env, guestbook):
        repo = await integration_env.get(GreetingRepository)

        saved = await repo.save(make_greeting("Hello", guestbook=guestbook))

        assert saved.id is not None
        assert saved.content == "Hello"

    @pytest.mark.asyncio
    async def test_find_recent_orders_newest_first(self, integration_env, guestbook):
        repo = await integration_env.get(GreetingRepository)
        first = await repo.save(make_greeting("first", minutes=0, guestbook=guestbook))
        second = await repo.save(
            make_greeting("second", minutes=1, guestbook=guestbook)
        )
        tied = await repo.save(make_greeting("tied", minutes=1, guestbook=guestbook))

        result = await repo.find_recent(guestbook, 10)

        assert [g.id for g in result] == [tied.id, second.id, first.id]

    @pytest.mark.asyncio
    async def test_find_recent_applies_limit(self, integration_env, guestbook):
        repo = await integration_env.get(GreetingRepository)
        for i in range(3):
            await repo.save(make_greeting(f"g{i}", minutes=i, guestbook=guestbook))

        result = await repo.find_recent(guestbook, 2)

        assert [g.content for g in result] == ["g2", "g1"]

    @pytest.mark.asyncio
    async def test_anonymous_author_round_trips_as_empty(
        self, integration_env, guestbook
    ):
        repo = await integration_env.get(GreetingRepository)
        await repo.save(make_greeting("anon", guestbook=guestbook))

        [stored] = await repo.find_recent(guestbook, 10)

        assert stored.author == ""
        assert stored.guestbook == guestbook


class TestPostgresVoteRepository:
    """Tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_counts_distinct_authors(self, integration_env, guestbook):
        repo = await integration_env.get(VoteRepository)
        topic = GreetingKey(guestbook=guestbook, id=1)
        alice = Identity("alice@example.com")
        bob = Identity("bob@example.com")

        await repo.save(Vote(topic=topic, author=alice))
        await repo.save(Vote(topic=topic, author=alice))
        await repo.save(Vote(topic=topic, author=bob))

        assert await repo.count_by_topic(topic) == 2
        assert await repo.count_by_topic_and_author(topic, alice) == 2
        assert await repo.count_by_topic_and_author(topic, bob) == 1


class TestVotingAgainstPostgres:
    """Service-level flow against the real store."""

    @pytest.mark.asyncio
    async def test_vote_then_list(self, integration_env, guestbook):
        greeting_repo = await integration_env.get(GreetingRepository)
        vote_service = await integration_env.get(VoteService)
        listing_service = await integration_env.get(ListingService)
        greeting = await greeting_repo.save(
            make_greeting("Vote for me", guestbook=guestbook)
        )
        alice = make_context(user="alice@example.com", guestbook=guestbook)

        assert await vote_service.cast_vote(alice, greeting.id) == VoteOutcome.RECORDED
        assert (
            await vote_service.cast_vote(alice, greeting.id)
            == VoteOutcome.ALREADY_VOTED
        )

        [scored] = await listing_service.list_recent(make_context(guestbook=guestbook))
        assert scored.score == 1
