"""Unit tests for storefront discovery documents."""

import httpx
import pytest
from httpx import Response
from unittest.mock import AsyncMock, patch

from customer_account.adapter.error import DiscoveryError
from customer_account.adapter.shopify.metadata import (
    discover_customer_account_api,
    discover_openid_configuration,
)

OPENID_DOCUMENT = {
    "issuer": "https://shopify.com/authentication/1234",
    "authorization_endpoint": "https://shopify.com/authentication/1234/oauth/authorize",
    "token_endpoint": "https://shopify.com/authentication/1234/oauth/token",
    "end_session_endpoint": "https://shopify.com/authentication/1234/logout",
    "jwks_uri": "https://shopify.com/authentication/1234/.well-known/jwks.json",
}


def _patched_get(response=None, side_effect=None):
    """Patch httpx.AsyncClient so that get() returns response."""
    patcher = patch("httpx.AsyncClient")
    mock_client_class = patcher.start()
    mock_client = AsyncMock()
    mock_client_class.return_value.__aenter__.return_value = mock_client
    if side_effect is not None:
        mock_client.get.side_effect = side_effect
    else:
        mock_client.get.return_value = response
    return patcher, mock_client_class, mock_client


class TestDiscoverOpenIDConfiguration:
    """Tests for discover_openid_configuration function."""

    @pytest.mark.asyncio
    async def test_discovers_endpoints(self):
        """Should fetch and parse the well-known document."""
        patcher, mock_client_class, mock_client = _patched_get(
            Response(200, json=OPENID_DOCUMENT)
        )
        try:
            config = await discover_openid_configuration("store.example.com", timeout=5.0)
        finally:
            patcher.stop()

        assert config.authorization_endpoint == OPENID_DOCUMENT["authorization_endpoint"]
        assert config.token_endpoint == OPENID_DOCUMENT["token_endpoint"]
        mock_client.get.assert_called_once_with(
            "https://store.example.com/.well-known/openid-configuration"
        )
        mock_client_class.assert_called_once_with(timeout=5.0)

    @pytest.mark.asyncio
    async def test_non_success_status_raises_with_status_text(self):
        """HTTP 500 should raise DiscoveryError embedding the status text."""
        patcher, _, _ = _patched_get(Response(500, text="oops"))
        try:
            with pytest.raises(DiscoveryError) as exc_info:
                await discover_openid_configuration("store.example.com")
        finally:
            patcher.stop()

        assert (
            str(exc_info.value)
            == "Failed to fetch OpenID configuration: Internal Server Error"
        )
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_missing_token_endpoint_raises(self):
        """A document without token_endpoint should be rejected."""
        document = {k: v for k, v in OPENID_DOCUMENT.items() if k != "token_endpoint"}
        patcher, _, _ = _patched_get(Response(200, json=document))
        try:
            with pytest.raises(DiscoveryError, match="token_endpoint"):
                await discover_openid_configuration("store.example.com")
        finally:
            patcher.stop()

    @pytest.mark.asyncio
    async def test_non_json_body_raises(self):
        """A non-JSON body should be rejected."""
        patcher, _, _ = _patched_get(Response(200, text="<html>maintenance</html>"))
        try:
            with pytest.raises(DiscoveryError, match="not JSON"):
                await discover_openid_configuration("store.example.com")
        finally:
            patcher.stop()

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        """Connection failures should surface as DiscoveryError."""
        patcher, _, _ = _patched_get(
            side_effect=httpx.ConnectError("connection refused")
        )
        try:
            with pytest.raises(DiscoveryError, match="connection refused"):
                await discover_openid_configuration("store.example.com")
        finally:
            patcher.stop()


class TestDiscoverCustomerAccountApi:
    """Tests for discover_customer_account_api function."""

    @pytest.mark.asyncio
    async def test_discovers_graphql_api(self):
        """Should fetch and parse the Customer Account API document."""
        graphql_api = "https://store.example.com/customer/api/2025-01/graphql"
        patcher, _, mock_client = _patched_get(
            Response(200, json={"graphql_api": graphql_api, "mcp_api": "ignored"})
        )
        try:
            config = await discover_customer_account_api("store.example.com")
        finally:
            patcher.stop()

        assert config.graphql_api == graphql_api
        mock_client.get.assert_called_once_with(
            "https://store.example.com/.well-known/customer-account-api"
        )

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self):
        """HTTP 404 should raise DiscoveryError with the status text."""
        patcher, _, _ = _patched_get(Response(404))
        try:
            with pytest.raises(DiscoveryError) as exc_info:
                await discover_customer_account_api("store.example.com")
        finally:
            patcher.stop()

        assert (
            str(exc_info.value)
            == "Failed to fetch Customer Account API configuration: Not Found"
        )

    @pytest.mark.asyncio
    async def test_missing_graphql_api_raises(self):
        """A document without graphql_api should be rejected."""
        patcher, _, _ = _patched_get(Response(200, json={}))
        try:
            with pytest.raises(DiscoveryError, match="graphql_api"):
                await discover_customer_account_api("store.example.com")
        finally:
            patcher.stop()


class TestOpenIDConfigurationFields:
    """Only the endpoints the flow uses are kept from the document."""

    @pytest.mark.asyncio
    async def test_unused_document_fields_are_dropped(self):
        patcher, _, _ = _patched_get(Response(200, json=OPENID_DOCUMENT))
        try:
            config = await discover_openid_configuration("store.example.com")
        finally:
            patcher.stop()

        assert config.model_dump() == {
            "authorization_endpoint": OPENID_DOCUMENT["authorization_endpoint"],
            "token_endpoint": OPENID_DOCUMENT["token_endpoint"],
        }
