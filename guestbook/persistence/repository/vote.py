"""PostgreSQL implementation of Vote repository."""

from sqlalchemy import and_, func, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from guestbook.domain.error import StoreUnavailableError
from guestbook.domain.model import Vote
from guestbook.domain.repository import VoteRepository
from guestbook.domain.value import GreetingKey, Identity, VoteId
from guestbook.persistence.mappers import vote_to_dict
from guestbook.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def count_by_topic(self, topic: GreetingKey) -> int:
        """Count distinct (topic, author) votes on a greeting."""
        distinct_votes = (
            select(votes_table.c.topic_id, votes_table.c.author)
            .where(
                and_(
                    votes_table.c.guestbook == topic.guestbook.name,
                    votes_table.c.topic_id == topic.id,
                )
            )
            .distinct()
            .subquery()
        )
        stmt = select(func.count()).select_from(distinct_votes)
        return await self._count(stmt, "vote count")

    async def count_by_topic_and_author(
        self, topic: GreetingKey, author: Identity
    ) -> int:
        """Count votes cast by one identity on one greeting."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(
                and_(
                    votes_table.c.guestbook == topic.guestbook.name,
                    votes_table.c.topic_id == topic.id,
                    votes_table.c.author == author.root,
                )
            )
        )
        return await self._count(stmt, "duplicate vote check")

    async def save(self, vote: Vote) -> Vote:
        """Insert and commit a vote, returning it with the allocated id."""
        stmt = (
            insert(votes_table)
            .values(**vote_to_dict(vote))
            .returning(votes_table.c.id)
        )
        try:
            result = await self.session.execute(stmt)
            vote_id = result.scalar_one()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreUnavailableError("vote write", e) from e
        return vote.model_copy(update={"id": VoteId(vote_id)})

    async def _count(self, stmt, operation: str) -> int:
        try:
            result = await self.session.execute(stmt)
            return result.scalar_one()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreUnavailableError(operation, e) from e
