"""Sign guestbook use case."""

from datetime import datetime

from pydantic import BaseModel

from guestbook.application.usecase.base import BaseUseCase
from guestbook.domain.service import PostingService
from guestbook.domain.value import RequestContext


class SignGuestbookRequest(BaseModel):
    """Sign guestbook request."""

    context: RequestContext
    content: str = ""  # Stored verbatim, empty allowed


class SignGuestbookResponse(BaseModel):
    """Sign guestbook response."""

    greeting_id: int
    author: str
    created_at: datetime


class SignGuestbookUseCase(
    BaseUseCase[SignGuestbookRequest, SignGuestbookResponse]
):
    """Use case for posting a greeting."""

    def __init__(self, posting_service: PostingService) -> None:
        """Initialize sign guestbook use case.

        Args:
            posting_service: Posting domain service
        """
        self.posting_service = posting_service

    async def execute(self, request: SignGuestbookRequest) -> SignGuestbookResponse:
        """Execute sign guestbook flow.

        Args:
            request: Sign guestbook request

        Returns:
            Id and attribution of the stored greeting

        Raises:
            StoreUnavailableError: If the write fails
        """
        greeting = await self.posting_service.post_greeting(
            request.context, request.content
        )

        return SignGuestbookResponse(
            greeting_id=greeting.id,
            author=greeting.author,
            created_at=greeting.created_at,
        )
