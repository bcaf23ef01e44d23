"""Identity provider adapters."""

from .provider import (
    MockIdentityProvider,
    SessionIdentityProvider,
    SessionIdentityProviderBase,
)

__all__ = [
    "MockIdentityProvider",
    "SessionIdentityProvider",
    "SessionIdentityProviderBase",
]
