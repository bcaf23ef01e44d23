"""Store keys for the guestbook namespace.

Every greeting and vote is written under a single parent key. Keeping them
in one group means queries scoped to that parent see every prior write to
the group, at the cost of limiting writes to roughly one per second.
"""

from pydantic import Field

from guestbook.domain.value.common import ValueObject
from guestbook.domain.value.identifiers import MAX_ID, GreetingId

DEFAULT_GUESTBOOK = "default_guestbook"


class GuestbookKey(ValueObject):
    """Parent key grouping all entities of one guestbook."""

    kind: str = "Guestbook"
    name: str = Field(min_length=1, max_length=500)

    def __str__(self) -> str:
        return f"{self.kind}/{self.name}"


class GreetingKey(ValueObject):
    """Complete key of one greeting inside a guestbook."""

    guestbook: GuestbookKey
    id: GreetingId = Field(ge=0, le=MAX_ID)

    def __str__(self) -> str:
        return f"{self.guestbook}/Greeting/{self.id}"


def guestbook_key(name: str = DEFAULT_GUESTBOOK) -> GuestbookKey:
    """Return the parent key used for all entries of a guestbook.

    Deterministic and side-effect free: the same name always yields an equal key.
    """
    return GuestbookKey(name=name)
