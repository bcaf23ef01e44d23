"""Domain value objects for the guestbook."""

from guestbook.domain.value.identifiers import MAX_ID, GreetingId, VoteId
from guestbook.domain.value.keys import (
    DEFAULT_GUESTBOOK,
    GreetingKey,
    GuestbookKey,
    guestbook_key,
)
from guestbook.domain.value.types import Identity, VoteOutcome
from guestbook.domain.value.context import RequestContext

__all__ = [
    # Identifiers
    "GreetingId",
    "VoteId",
    "MAX_ID",
    # Keys
    "DEFAULT_GUESTBOOK",
    "GuestbookKey",
    "GreetingKey",
    "guestbook_key",
    # Types
    "Identity",
    "VoteOutcome",
    # Context
    "RequestContext",
]
