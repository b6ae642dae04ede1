"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .shopify import MockShopifyProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockShopifyProvider",
    "build_test_container",
]
