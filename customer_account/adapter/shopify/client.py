"""Shopify Customer Account API client.

Implements the provider side of the OAuth 2.0 authorization code flow with
PKCE (public client, no client secret) and the customer GraphQL query.
"""

import logging
from typing import Any

import httpx
import logfire

from customer_account.adapter.error import (
    ApiQueryError,
    DiscoveryError,
    TokenExchangeError,
)
from customer_account.adapter.shopify.metadata import (
    discover_customer_account_api,
    discover_openid_configuration,
)
from customer_account.adapter.shopify.query import CUSTOMER_QUERY, parse_customer
from customer_account.domain.model.customer import Customer
from customer_account.domain.service.auth_service import CustomerAccountClient
from customer_account.domain.value import (
    CustomerAccountApiConfiguration,
    OpenIDConfiguration,
    TokenGrant,
)

logger = logging.getLogger(__name__)


class ShopifyCustomerAccountClient(CustomerAccountClient):
    """Client talking to the real storefront endpoints over httpx."""

    def __init__(self, timeout: float = 10.0) -> None:
        """Initialize client.

        Args:
            timeout: Timeout in seconds for every outbound request
        """
        self.timeout = timeout

    async def fetch_openid_configuration(self, shop_domain: str) -> OpenIDConfiguration:
        return await discover_openid_configuration(shop_domain, timeout=self.timeout)

    async def fetch_customer_account_api_configuration(
        self, shop_domain: str
    ) -> CustomerAccountApiConfiguration:
        return await discover_customer_account_api(shop_domain, timeout=self.timeout)

    async def exchange_code(
        self, token_endpoint: str, form: dict[str, str]
    ) -> TokenGrant:
        """Exchange authorization code for access token.

        Args:
            token_endpoint: Discovered token endpoint
            form: authorization_code grant fields

        Returns:
            Token grant

        Raises:
            TokenExchangeError: If the request fails or the response lacks
                an access_token
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    token_endpoint,
                    data=form,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
        except httpx.HTTPError as e:
            logfire.error("Token exchange HTTP error", error=str(e))
            raise TokenExchangeError(f"Token exchange failed: {e}") from e

        if not response.is_success:
            logfire.error(
                "Token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise TokenExchangeError(
                f"Token exchange failed: {response.reason_phrase} - {response.text}",
                status_code=response.status_code,
            )

        try:
            return TokenGrant.model_validate(response.json())
        except ValueError as e:
            raise TokenExchangeError(
                "Token exchange failed: response did not contain a valid access_token"
            ) from e

    async def query_customer(self, graphql_api: str, access_token: str) -> Customer:
        """Run the customer query against the Customer Account API.

        The token is sent as the raw Authorization header value, without a
        "Bearer" prefix.

        Args:
            graphql_api: Discovered GraphQL endpoint
            access_token: Customer access token

        Returns:
            Customer with up to 10 orders

        Raises:
            ApiQueryError: kind="transport" for HTTP failures, kind="graphql"
                when the response carries no customer. Errors reported next to
                a customer are logged and the partial customer is returned.
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    graphql_api,
                    json={"query": CUSTOMER_QUERY},
                    headers={
                        "Content-Type": "application/json",
                        "Authorization": access_token,
                    },
                )
        except httpx.HTTPError as e:
            raise ApiQueryError(f"API request failed: {e}", kind="transport") from e

        if not response.is_success:
            logger.error(
                f"Customer Account API request failed: status={response.status_code}"
            )
            raise ApiQueryError(
                f"API request failed: {response.status_code} - {response.text}",
                kind="transport",
                status_code=response.status_code,
            )

        try:
            payload: dict[str, Any] = response.json()
        except ValueError as e:
            raise ApiQueryError(
                "API request failed: response is not JSON", kind="transport"
            ) from e

        errors = payload.get("errors") or []
        messages = "; ".join(
            str(error.get("message", error)) if isinstance(error, dict) else str(error)
            for error in errors
        )
        if messages:
            logger.warning(f"Customer Account API returned errors: {messages}")

        # Partial results are shown; errors only fail the query without a customer
        customer = (payload.get("data") or {}).get("customer")
        if not customer:
            detail = messages or "no customer in response"
            raise ApiQueryError(
                f"Failed to query Customer Account API: {detail}", kind="graphql"
            )

        try:
            return parse_customer(customer)
        except (KeyError, TypeError, ValueError) as e:
            raise ApiQueryError(
                f"Failed to query Customer Account API: unexpected response shape ({e})",
                kind="graphql",
            ) from e


class MockCustomerAccountClient(CustomerAccountClient):
    """Mock client for testing.

    Returns configurable canned responses without network access and records
    every call so tests can assert on what was sent.
    """

    def __init__(self, shop_domain: str = "shop.example.com") -> None:
        """Initialize mock client with canned endpoints under shop_domain."""
        base = f"https://{shop_domain}"
        self.openid_configuration = OpenIDConfiguration(
            authorization_endpoint=f"{base}/authentication/oauth/authorize",
            token_endpoint=f"{base}/authentication/oauth/token",
        )
        self.api_configuration = CustomerAccountApiConfiguration(
            graphql_api=f"{base}/account/customer/api/unstable/graphql",
        )
        self.token_grant = TokenGrant(access_token="mock-access-token", expires_in=3600)
        self.customer = Customer(
            id="gid://shopify/Customer/1",
            email_address="customer@example.com",
            first_name="Mock",
            last_name="Customer",
        )

        # Failures to raise instead of returning canned data
        self.discovery_error: DiscoveryError | None = None
        self.api_discovery_error: DiscoveryError | None = None
        self.token_error: TokenExchangeError | None = None
        self.query_error: ApiQueryError | None = None

        self.discovery_calls: list[str] = []
        self.exchanged_forms: list[dict[str, str]] = []
        self.queried_tokens: list[str] = []

    async def fetch_openid_configuration(self, shop_domain: str) -> OpenIDConfiguration:
        self.discovery_calls.append(shop_domain)
        if self.discovery_error:
            raise self.discovery_error
        return self.openid_configuration

    async def fetch_customer_account_api_configuration(
        self, shop_domain: str
    ) -> CustomerAccountApiConfiguration:
        if self.api_discovery_error:
            raise self.api_discovery_error
        return self.api_configuration

    async def exchange_code(
        self, token_endpoint: str, form: dict[str, str]
    ) -> TokenGrant:
        self.exchanged_forms.append(dict(form))
        if self.token_error:
            raise self.token_error
        return self.token_grant

    async def query_customer(self, graphql_api: str, access_token: str) -> Customer:
        self.queried_tokens.append(access_token)
        if self.query_error:
            raise self.query_error
        return self.customer
