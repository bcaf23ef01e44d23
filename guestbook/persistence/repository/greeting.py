"""PostgreSQL implementation of Greeting repository."""

from typing import List

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from guestbook.domain.error import StoreUnavailableError
from guestbook.domain.model import Greeting
from guestbook.domain.repository import GreetingRepository
from guestbook.domain.value import GreetingId, GuestbookKey
from guestbook.persistence.mappers import greeting_to_dict, row_to_greeting
from guestbook.persistence.tables import greetings_table


class PostgresGreetingRepository(GreetingRepository):
    """PostgreSQL implementation of GreetingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_recent(self, guestbook: GuestbookKey, limit: int) -> List[Greeting]:
        """Find the most recent greetings under a guestbook key."""
        stmt = (
            select(greetings_table)
            .where(greetings_table.c.guestbook == guestbook.name)
            .order_by(greetings_table.c.created_at.desc(), greetings_table.c.id.desc())
            .limit(limit)
        )
        try:
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreUnavailableError("greeting query", e) from e
        return [row_to_greeting(row._asdict()) for row in rows]

    async def save(self, greeting: Greeting) -> Greeting:
        """Insert and commit a greeting, returning it with the allocated id.

        The write is durable once this returns.
        """
        stmt = (
            insert(greetings_table)
            .values(**greeting_to_dict(greeting))
            .returning(greetings_table.c.id)
        )
        try:
            result = await self.session.execute(stmt)
            greeting_id = result.scalar_one()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreUnavailableError("greeting write", e) from e
        return greeting.model_copy(update={"id": GreetingId(greeting_id)})
