"""Shopify infrastructure providers."""

from dishka import Scope, provide

from customer_account.adapter.shopify.client import ShopifyCustomerAccountClient
from customer_account.config import HTTPSettings
from customer_account.domain.service import CustomerAccountClient
from customer_account.util.di.base import ProviderBase


class ShopifyProvider(ProviderBase):
    """Shopify component base."""

    __mock_component__ = "shopify"


class ProdShopifyProvider(ShopifyProvider):
    """Production Shopify provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_customer_account_client(
        self, http_settings: HTTPSettings
    ) -> CustomerAccountClient:
        """Provide Customer Account API client.

        The client is stateless; discovery caching lives in the
        request-scoped AuthService.
        """
        return ShopifyCustomerAccountClient(timeout=http_settings.timeout_seconds)
