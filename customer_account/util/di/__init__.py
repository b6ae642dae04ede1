"""Dependency injection wiring.

Providers come in two kinds: concrete providers used as-is, and component
bases ("shopify", "persistence") with one production and one mock subclass.
Mock subclasses live in tests/di and register themselves on import.
"""

from typing import Type

from customer_account.util.di.application import ProdApplicationProvider
from customer_account.util.di.base import Component, ProviderBase
from customer_account.util.di.core import ProdConfigProvider
from customer_account.util.di.domain import ProdDomainProvider
from customer_account.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdShopifyProvider,
    ShopifyProvider,
)
from customer_account.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    ShopifyProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation slot."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for an entry of PROVIDERS.

    Args:
        base: Concrete provider or component base
        use_mock: Select the mock subclass of a component base

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If the requested implementation is not
            registered (e.g. a mock requested outside the test suite)
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    for candidate in subclasses:
        if candidate.__is_mock__ == use_mock:
            return candidate

    kind = "mock" if use_mock else "production"
    name = base.__mock_component__ or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {name}")


def build_providers(mocked: set[Component] | None = None) -> list[ProviderBase]:
    """Instantiate one provider for every entry of PROVIDERS.

    Args:
        mocked: Components to back with their mock implementation

    Returns:
        Provider instances, ready for make_async_container

    Raises:
        DependencyInjectionError: If an unknown component is named
    """
    mocked = mocked or set()
    unknown = mocked - mockable_components()
    if unknown:
        raise DependencyInjectionError(f"Unknown components: {sorted(unknown)}")

    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_providers",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ShopifyProvider",
    "ProdPersistenceProvider",
    "ProdShopifyProvider",
]
