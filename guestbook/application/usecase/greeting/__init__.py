"""Greeting use cases."""

from .list_greetings import (
    GreetingListItem,
    ListGreetingsRequest,
    ListGreetingsResponse,
    ListGreetingsUseCase,
)
from .sign_guestbook import (
    SignGuestbookRequest,
    SignGuestbookResponse,
    SignGuestbookUseCase,
)

__all__ = [
    "GreetingListItem",
    "ListGreetingsRequest",
    "ListGreetingsResponse",
    "ListGreetingsUseCase",
    "SignGuestbookRequest",
    "SignGuestbookResponse",
    "SignGuestbookUseCase",
]
