"""Greeting entity.

A greeting is one message posted to the guestbook. It is written once and
never updated or deleted.
"""

from datetime import datetime, timezone

from pydantic import Field

from guestbook.domain.model.common import DomainModel
from guestbook.domain.value import GreetingId, GreetingKey, GuestbookKey


class Greeting(DomainModel):
    """Greeting entity.

    `id` is None until the store allocates one on first write.
    `author` is empty for anonymous posts.
    """

    id: GreetingId | None = None
    guestbook: GuestbookKey
    author: str = ""
    content: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def key(self) -> GreetingKey:
        """Complete store key of this greeting.

        Raises:
            ValueError: If the greeting has not been stored yet
        """
        if self.id is None:
            raise ValueError("Greeting has no id until it is stored")
        return GreetingKey(guestbook=self.guestbook, id=self.id)


class ScoredGreeting(DomainModel):
    """A stored greeting with its vote count.

    The score is computed by the listing service on every read and is never
    written back.
    """

    greeting: Greeting
    score: int = Field(ge=0)
