"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from guestbook.config import Settings
from guestbook.domain.error import StoreUnavailableError
from guestbook.domain.repository import GreetingRepository, VoteRepository
from guestbook.persistence.database import create_engine, create_session_factory
from guestbook.persistence.repository import (
    PostgresGreetingRepository,
    PostgresVoteRepository,
)
from guestbook.util.di.base import ProviderBase
from guestbook.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the app container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Repositories commit each write themselves, so the commit at request
        end only closes out read transactions. An exception raised during
        the request rolls back anything left uncommitted.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

            try:
                await session.commit()
            except SQLAlchemyError as e:
                logfire.error("Session commit failed", error=str(e))
                raise StoreUnavailableError("commit", e) from e
            logfire.debug("Session committed")

    @provide(scope=Scope.REQUEST)
    def get_greeting_repository(self, session: AsyncSession) -> GreetingRepository:
        """Provide Greeting repository."""
        return PostgresGreetingRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)
