"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import logfire

from guestbook.domain.model import Greeting
from guestbook.domain.value import GuestbookKey, Identity, RequestContext, guestbook_key

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def pytest_configure(config):
    """Keep Logfire local and quiet during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_context(
    user: str | None = None, guestbook: GuestbookKey | None = None
) -> RequestContext:
    """Helper to build a request context for the default guestbook.

    Args:
        user: Caller identity, or None for an anonymous caller
        guestbook: Guestbook key; the default guestbook if omitted

    Returns:
        Request context
    """
    return RequestContext(
        guestbook=guestbook or guestbook_key(),
        user=Identity(user) if user is not None else None,
    )


def make_greeting(
    content: str,
    minutes: int = 0,
    author: str = "",
    guestbook: GuestbookKey | None = None,
) -> Greeting:
    """Helper to build an unsaved greeting `minutes` after BASE_TIME."""
    return Greeting(
        guestbook=guestbook or guestbook_key(),
        author=author,
        content=content,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
