"""Vote entity.

A vote is a single endorsement of one greeting by one identity.
"""

from guestbook.domain.model.common import DomainModel
from guestbook.domain.value import GreetingKey, GuestbookKey, Identity, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - Anonymous callers cannot vote, so `author` is always an Identity
    - At most one vote per (topic, author), checked before writing;
      the store itself does not enforce it
    """

    id: VoteId | None = None
    topic: GreetingKey
    author: Identity

    @property
    def guestbook(self) -> GuestbookKey:
        """Parent key the vote is stored under (same as its topic's)."""
        return self.topic.guestbook
