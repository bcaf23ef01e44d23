"""Domain layer DI providers."""

from dishka import Scope, provide

from guestbook.config import VotingSettings
from guestbook.domain.repository import GreetingRepository, VoteRepository
from guestbook.domain.service import (
    AuthService,
    IdentityProvider,
    ListingService,
    PostingService,
    VoteService,
)
from guestbook.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, identity_provider: IdentityProvider) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(identity_provider=identity_provider)

    @provide
    def get_listing_service(
        self,
        greeting_repository: GreetingRepository,
        vote_repository: VoteRepository,
    ) -> ListingService:
        """Provide listing domain service."""
        return ListingService(
            greeting_repository=greeting_repository,
            vote_repository=vote_repository,
        )

    @provide
    def get_posting_service(
        self, greeting_repository: GreetingRepository
    ) -> PostingService:
        """Provide posting domain service."""
        return PostingService(greeting_repository=greeting_repository)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, voting_settings: VotingSettings
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            surface_store_errors=voting_settings.surface_store_errors,
        )
