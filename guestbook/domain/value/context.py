"""Per-request context passed into every guestbook operation."""

from guestbook.domain.value.common import ValueObject
from guestbook.domain.value.keys import GuestbookKey
from guestbook.domain.value.types import Identity


class RequestContext(ValueObject):
    """Explicit per-request context.

    Built once by the interface layer for each request and handed to the
    listing, posting and voting operations.
    `user` is None for anonymous callers.
    """

    guestbook: GuestbookKey
    user: Identity | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None
