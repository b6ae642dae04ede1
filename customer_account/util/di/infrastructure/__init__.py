"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .shopify import ShopifyProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .shopify import ProdShopifyProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdShopifyProvider",
    "ShopifyProvider",
]
