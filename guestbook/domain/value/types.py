"""Domain value objects for the guestbook."""

from enum import Enum

from pydantic import field_validator

from guestbook.domain.value.common import RootValueObject


class Identity(RootValueObject[str]):
    """Identity of an authenticated caller, as reported by the identity provider.

    Usually an email address. Anonymous callers have no Identity at all,
    so an Identity is never empty.
    """

    @field_validator("root")
    @classmethod
    def validate_identity(cls, v: str) -> str:
        """Validate identity is not empty and within length limits."""
        if len(v) < 1 or len(v) > 500:
            raise ValueError("Identity must be 1-500 characters")
        return v


class VoteOutcome(str, Enum):
    """Result of a single vote attempt."""

    RECORDED = "recorded"
    ALREADY_VOTED = "already_voted"
    STORE_FAILED = "store_failed"
    AUTHENTICATION_REQUIRED = "authentication_required"
