"""Mock providers for testing."""

from .failing import FailingPersistenceProvider
from .identity import MockIdentityProviderProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "FailingPersistenceProvider",
    "MockIdentityProviderProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
