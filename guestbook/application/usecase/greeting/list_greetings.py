"""List greetings use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from guestbook.application.usecase.base import BaseUseCase
from guestbook.domain.service import DEFAULT_LIMIT, ListingService
from guestbook.domain.value import RequestContext


class GreetingListItem(BaseModel):
    """Greeting list item in response."""

    greeting_id: int
    author: str  # "" for anonymous greetings
    content: str
    created_at: datetime
    score: int


class ListGreetingsRequest(BaseModel):
    """List greetings request."""

    context: RequestContext
    limit: int = Field(default=DEFAULT_LIMIT, ge=1)


class ListGreetingsResponse(BaseModel):
    """List greetings response."""

    greetings: list[GreetingListItem]
    limit: int


class ListGreetingsUseCase(
    BaseUseCase[ListGreetingsRequest, ListGreetingsResponse]
):
    """Use case for listing recent greetings with their scores."""

    def __init__(self, listing_service: ListingService) -> None:
        """Initialize list greetings use case.

        Args:
            listing_service: Listing domain service
        """
        self.listing_service = listing_service

    async def execute(self, request: ListGreetingsRequest) -> ListGreetingsResponse:
        """Execute list greetings flow.

        Args:
            request: List greetings request

        Returns:
            Greetings newest first with derived scores

        Raises:
            StoreUnavailableError: If the greeting query fails
        """
        with logfire.span("list_greetings.execute", limit=request.limit):
            scored = await self.listing_service.list_recent(
                request.context, limit=request.limit
            )

            return ListGreetingsResponse(
                greetings=[
                    GreetingListItem(
                        greeting_id=item.greeting.id,
                        author=item.greeting.author,
                        content=item.greeting.content,
                        created_at=item.greeting.created_at,
                        score=item.score,
                    )
                    for item in scored
                ],
                limit=request.limit,
            )
