"""Customer authentication domain service."""

import httpx
import logfire

from customer_account.config import ShopSettings
from customer_account.domain.model.customer import Customer
from customer_account.domain.value import (
    CustomerAccountApiConfiguration,
    OpenIDConfiguration,
    PkceMaterial,
    TokenGrant,
)
from customer_account.util.pkce import generate_pkce_pair, generate_state

from .base import Service

CUSTOMER_ACCOUNT_SCOPE = "openid email customer-account-api:full"


class CustomerAccountClient:
    """Interface to the storefront's identity provider and Customer Account API."""

    async def fetch_openid_configuration(self, shop_domain: str) -> OpenIDConfiguration:
        """Fetch the OpenID Connect discovery document.

        Args:
            shop_domain: Storefront domain (no scheme)

        Returns:
            Authorization and token endpoints

        Raises:
            DiscoveryError: If the document cannot be fetched or is incomplete
        """
        raise NotImplementedError

    async def fetch_customer_account_api_configuration(
        self, shop_domain: str
    ) -> CustomerAccountApiConfiguration:
        """Fetch the Customer Account API discovery document.

        Args:
            shop_domain: Storefront domain (no scheme)

        Returns:
            GraphQL endpoint

        Raises:
            DiscoveryError: If the document cannot be fetched or is incomplete
        """
        raise NotImplementedError

    async def exchange_code(
        self, token_endpoint: str, form: dict[str, str]
    ) -> TokenGrant:
        """Redeem an authorization code at the token endpoint.

        Args:
            token_endpoint: Token endpoint URL
            form: Form fields of the authorization_code grant

        Returns:
            Issued access token and its lifetime

        Raises:
            TokenExchangeError: If the provider rejects the exchange
        """
        raise NotImplementedError

    async def query_customer(self, graphql_api: str, access_token: str) -> Customer:
        """Fetch the customer profile and recent orders.

        Args:
            graphql_api: GraphQL endpoint URL
            access_token: Raw bearer token

        Returns:
            Customer with orders

        Raises:
            ApiQueryError: On transport failure or GraphQL errors
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for the PKCE authorization code flow.

    REQUEST-scoped: discovery documents are fetched at most once per request
    so every step of a request sees the same endpoints.
    """

    def __init__(self, client: CustomerAccountClient, shop_settings: ShopSettings) -> None:
        """Initialize auth service.

        Args:
            client: Identity provider client
            shop_settings: Storefront domain and client id
        """
        self.client = client
        self.shop_settings = shop_settings
        self._openid_configuration: OpenIDConfiguration | None = None
        self._api_configuration: CustomerAccountApiConfiguration | None = None

    def generate_pkce(self) -> PkceMaterial:
        """Generate fresh verifier, challenge and state."""
        verifier, challenge = generate_pkce_pair()
        return PkceMaterial(verifier=verifier, challenge=challenge, state=generate_state())

    async def get_openid_configuration(self) -> OpenIDConfiguration:
        """Get the storefront's OpenID configuration.

        Raises:
            DiscoveryError: If discovery fails
        """
        if self._openid_configuration is None:
            with logfire.span(
                "auth_service.discover_openid",
                shop=self.shop_settings.storefront_domain,
            ):
                self._openid_configuration = (
                    await self.client.fetch_openid_configuration(
                        self.shop_settings.storefront_domain
                    )
                )
        return self._openid_configuration

    async def get_customer_account_api_configuration(
        self,
    ) -> CustomerAccountApiConfiguration:
        """Get the storefront's Customer Account API configuration.

        Raises:
            DiscoveryError: If discovery fails
        """
        if self._api_configuration is None:
            with logfire.span(
                "auth_service.discover_customer_account_api",
                shop=self.shop_settings.storefront_domain,
            ):
                self._api_configuration = (
                    await self.client.fetch_customer_account_api_configuration(
                        self.shop_settings.storefront_domain
                    )
                )
        return self._api_configuration

    def build_authorization_url(
        self,
        configuration: OpenIDConfiguration,
        material: PkceMaterial,
        redirect_uri: str,
    ) -> str:
        """Build the URL that sends the customer to the identity provider.

        Query parameters already present on the authorization endpoint are
        preserved.

        Args:
            configuration: Discovered OpenID configuration
            material: PKCE material for this attempt
            redirect_uri: Our callback URL

        Returns:
            Authorization URL
        """
        params = {
            "client_id": self.shop_settings.api_client_id,
            "response_type": "code",
            "redirect_uri": redirect_uri,
            "scope": CUSTOMER_ACCOUNT_SCOPE,
            "state": material.state,
            "code_challenge": material.challenge,
            "code_challenge_method": "S256",
        }
        url = httpx.URL(configuration.authorization_endpoint).copy_merge_params(params)
        return str(url)

    async def exchange_code(
        self, code: str, code_verifier: str, redirect_uri: str
    ) -> TokenGrant:
        """Exchange an authorization code for an access token.

        Args:
            code: Authorization code from the callback
            code_verifier: Verifier stored for the callback's state
            redirect_uri: Same callback URL used at initiation

        Returns:
            Token grant

        Raises:
            DiscoveryError: If the token endpoint cannot be discovered
            TokenExchangeError: If the provider rejects the exchange
        """
        configuration = await self.get_openid_configuration()
        with logfire.span("auth_service.exchange_code"):
            grant = await self.client.exchange_code(
                configuration.token_endpoint,
                {
                    "grant_type": "authorization_code",
                    "client_id": self.shop_settings.api_client_id,
                    "redirect_uri": redirect_uri,
                    "code": code,
                    "code_verifier": code_verifier,
                },
            )
            logfire.info(
                "Authorization code exchanged",
                has_expiry=grant.expires_in is not None,
            )
            return grant

    async def fetch_customer(self, access_token: str) -> Customer:
        """Query the Customer Account API on behalf of the customer.

        Args:
            access_token: Raw bearer token

        Returns:
            Customer with recent orders

        Raises:
            DiscoveryError: If the GraphQL endpoint cannot be discovered
            ApiQueryError: If the query fails
        """
        configuration = await self.get_customer_account_api_configuration()
        with logfire.span("auth_service.fetch_customer"):
            return await self.client.query_customer(
                configuration.graphql_api, access_token
            )
