"""Unit tests for the Shopify Customer Account API client."""

import httpx
import pytest
from httpx import Response
from unittest.mock import AsyncMock, patch

from customer_account.adapter.error import ApiQueryError, TokenExchangeError
from customer_account.adapter.shopify.client import ShopifyCustomerAccountClient
from customer_account.adapter.shopify.query import CUSTOMER_QUERY

TOKEN_ENDPOINT = "https://shopify.com/authentication/1234/oauth/token"
GRAPHQL_API = "https://store.example.com/customer/api/2025-01/graphql"
FORM = {
    "grant_type": "authorization_code",
    "client_id": "client-123",
    "redirect_uri": "https://app.example.com/customer-account-api/callback",
    "code": "abc",
    "code_verifier": "verifier-xyz",
}
CUSTOMER_DATA = {
    "id": "gid://shopify/Customer/42",
    "emailAddress": {"emailAddress": "ada@example.com"},
    "firstName": "Ada",
    "lastName": "Lovelace",
    "orders": {
        "edges": [
            {"node": {"id": "gid://shopify/Order/1", "name": "#1001"}},
            {"node": {"id": "gid://shopify/Order/2", "name": "#1002"}},
        ]
    },
}


@pytest.fixture
def mock_http():
    """Patch httpx.AsyncClient and yield the inner client mock."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client


class TestExchangeCode:
    """Tests for ShopifyCustomerAccountClient.exchange_code."""

    @pytest.mark.asyncio
    async def test_posts_form_encoded_grant(self, mock_http):
        """Should POST the grant fields as a form."""
        mock_http.post.return_value = Response(
            200, json={"access_token": "tok1", "expires_in": 3600, "token_type": "Bearer"}
        )
        client = ShopifyCustomerAccountClient()

        grant = await client.exchange_code(TOKEN_ENDPOINT, FORM)

        assert grant.access_token == "tok1"
        assert grant.expires_in == 3600
        mock_http.post.assert_called_once_with(
            TOKEN_ENDPOINT,
            data=FORM,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

    @pytest.mark.asyncio
    async def test_missing_expires_in_is_allowed(self, mock_http):
        """expires_in is optional in the token response."""
        mock_http.post.return_value = Response(200, json={"access_token": "tok1"})

        grant = await ShopifyCustomerAccountClient().exchange_code(TOKEN_ENDPOINT, FORM)

        assert grant.expires_in is None

    @pytest.mark.asyncio
    async def test_rejected_exchange_includes_status_and_body(self, mock_http):
        """Non-success should raise with provider status text and body."""
        mock_http.post.return_value = Response(400, text='{"error":"invalid_grant"}')

        with pytest.raises(TokenExchangeError) as exc_info:
            await ShopifyCustomerAccountClient().exchange_code(TOKEN_ENDPOINT, FORM)

        assert (
            str(exc_info.value)
            == 'Token exchange failed: Bad Request - {"error":"invalid_grant"}'
        )
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_response_without_access_token_raises(self, mock_http):
        """A success response lacking access_token should be rejected."""
        mock_http.post.return_value = Response(200, json={"expires_in": 3600})

        with pytest.raises(TokenExchangeError, match="access_token"):
            await ShopifyCustomerAccountClient().exchange_code(TOKEN_ENDPOINT, FORM)

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, mock_http):
        """Timeouts should surface as TokenExchangeError."""
        mock_http.post.side_effect = httpx.ReadTimeout("timed out")

        with pytest.raises(TokenExchangeError, match="timed out"):
            await ShopifyCustomerAccountClient().exchange_code(TOKEN_ENDPOINT, FORM)


class TestQueryCustomer:
    """Tests for ShopifyCustomerAccountClient.query_customer."""

    @pytest.mark.asyncio
    async def test_sends_raw_token_and_parses_customer(self, mock_http):
        """Token goes in Authorization without a Bearer prefix."""
        mock_http.post.return_value = Response(
            200, json={"data": {"customer": CUSTOMER_DATA}}
        )

        customer = await ShopifyCustomerAccountClient().query_customer(
            GRAPHQL_API, "tok1"
        )

        assert customer.email_address == "ada@example.com"
        assert customer.first_name == "Ada"
        assert customer.last_name == "Lovelace"
        assert [order.name for order in customer.orders] == ["#1001", "#1002"]
        mock_http.post.assert_called_once_with(
            GRAPHQL_API,
            json={"query": CUSTOMER_QUERY},
            headers={"Content-Type": "application/json", "Authorization": "tok1"},
        )

    @pytest.mark.asyncio
    async def test_http_failure_is_transport_error(self, mock_http):
        """Non-success status should be a transport ApiQueryError."""
        mock_http.post.return_value = Response(401, text="Unauthorized")

        with pytest.raises(ApiQueryError) as exc_info:
            await ShopifyCustomerAccountClient().query_customer(GRAPHQL_API, "tok1")

        assert exc_info.value.kind == "transport"
        assert str(exc_info.value) == "API request failed: 401 - Unauthorized"

    @pytest.mark.asyncio
    async def test_graphql_errors_are_graphql_error(self, mock_http):
        """Errors in the response body should be a graphql ApiQueryError."""
        mock_http.post.return_value = Response(
            200,
            json={
                "data": None,
                "errors": [{"message": "Field 'orders' doesn't exist"}],
            },
        )

        with pytest.raises(ApiQueryError) as exc_info:
            await ShopifyCustomerAccountClient().query_customer(GRAPHQL_API, "tok1")

        assert exc_info.value.kind == "graphql"
        assert (
            str(exc_info.value)
            == "Failed to query Customer Account API: Field 'orders' doesn't exist"
        )

    @pytest.mark.asyncio
    async def test_customer_without_orders(self, mock_http):
        """Missing optional fields should map to empty values."""
        mock_http.post.return_value = Response(
            200, json={"data": {"customer": {"id": "gid://shopify/Customer/7"}}}
        )

        customer = await ShopifyCustomerAccountClient().query_customer(
            GRAPHQL_API, "tok1"
        )

        assert customer.email_address is None
        assert customer.orders == ()

    @pytest.mark.asyncio
    async def test_errors_with_customer_return_partial_result(self, mock_http):
        """A customer next to field errors is still returned."""
        mock_http.post.return_value = Response(
            200,
            json={
                "data": {"customer": {**CUSTOMER_DATA, "orders": None}},
                "errors": [{"message": "Access denied for orders field"}],
            },
        )

        customer = await ShopifyCustomerAccountClient().query_customer(
            GRAPHQL_API, "tok1"
        )

        assert customer.email_address == "ada@example.com"
        assert customer.orders == ()

    @pytest.mark.asyncio
    async def test_missing_customer_without_errors_is_graphql_error(self, mock_http):
        mock_http.post.return_value = Response(200, json={"data": {"customer": None}})

        with pytest.raises(ApiQueryError) as exc_info:
            await ShopifyCustomerAccountClient().query_customer(GRAPHQL_API, "tok1")

        assert exc_info.value.kind == "graphql"
        assert str(exc_info.value) == (
            "Failed to query Customer Account API: no customer in response"
        )
