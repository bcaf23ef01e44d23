"""Application layer DI providers."""

from dishka import Scope, provide

from guestbook.application.usecase.greeting import (
    ListGreetingsUseCase,
    SignGuestbookUseCase,
)
from guestbook.application.usecase.vote import CastVoteUseCase
from guestbook.domain.service import ListingService, PostingService, VoteService
from guestbook.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Greeting use cases
    @provide(scope=Scope.REQUEST)
    def get_list_greetings_use_case(
        self, listing_service: ListingService
    ) -> ListGreetingsUseCase:
        """Provide list greetings use case."""
        return ListGreetingsUseCase(listing_service=listing_service)

    @provide(scope=Scope.REQUEST)
    def get_sign_guestbook_use_case(
        self, posting_service: PostingService
    ) -> SignGuestbookUseCase:
        """Provide sign guestbook use case."""
        return SignGuestbookUseCase(posting_service=posting_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)
