"""Domain services."""

from .auth_service import AuthService, IdentityProvider, safe_continue
from .base import Service
from .listing_service import DEFAULT_LIMIT, ListingService
from .posting_service import PostingService
from .vote_service import VoteService

__all__ = [
    "AuthService",
    "DEFAULT_LIMIT",
    "IdentityProvider",
    "ListingService",
    "PostingService",
    "Service",
    "VoteService",
    "safe_continue",
]
