"""Discovery documents published by the storefront.

Two well-known documents are consumed:
- /.well-known/openid-configuration: authorization and token endpoints
- /.well-known/customer-account-api: GraphQL endpoint
"""

import logging

import httpx

from customer_account.adapter.error import DiscoveryError
from customer_account.domain.value import (
    CustomerAccountApiConfiguration,
    OpenIDConfiguration,
)

logger = logging.getLogger(__name__)

OPENID_CONFIGURATION_PATH = "/.well-known/openid-configuration"
CUSTOMER_ACCOUNT_API_PATH = "/.well-known/customer-account-api"


async def _fetch_document(url: str, label: str, timeout: float) -> dict:
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(url)
    except httpx.HTTPError as e:
        raise DiscoveryError(f"Failed to fetch {label}: {e}") from e

    if not response.is_success:
        logger.error(
            f"Discovery request failed: url={url}, status={response.status_code}"
        )
        raise DiscoveryError(
            f"Failed to fetch {label}: {response.reason_phrase}",
            status_code=response.status_code,
        )

    try:
        document = response.json()
    except ValueError as e:
        raise DiscoveryError(f"Invalid {label}: response is not JSON") from e

    if not isinstance(document, dict):
        raise DiscoveryError(f"Invalid {label}: expected a JSON object")
    return document


async def discover_openid_configuration(
    shop_domain: str, timeout: float = 10.0
) -> OpenIDConfiguration:
    """Fetch the storefront's OpenID Connect configuration.

    Args:
        shop_domain: Storefront domain (e.g., "my-store.myshopify.com")
        timeout: Request timeout in seconds

    Returns:
        Parsed configuration

    Raises:
        DiscoveryError: On transport failure, non-success status, or a
            document missing authorization_endpoint/token_endpoint

    Example:
        >>> config = await discover_openid_configuration("my-store.myshopify.com")
        >>> config.token_endpoint
        "https://shopify.com/authentication/1234/oauth/token"
    """
    url = f"https://{shop_domain}{OPENID_CONFIGURATION_PATH}"
    document = await _fetch_document(url, "OpenID configuration", timeout)
    try:
        return OpenIDConfiguration.model_validate(document)
    except ValueError as e:
        raise DiscoveryError(
            "Invalid OpenID configuration: missing authorization_endpoint or token_endpoint"
        ) from e


async def discover_customer_account_api(
    shop_domain: str, timeout: float = 10.0
) -> CustomerAccountApiConfiguration:
    """Fetch the storefront's Customer Account API configuration.

    Args:
        shop_domain: Storefront domain
        timeout: Request timeout in seconds

    Returns:
        Parsed configuration

    Raises:
        DiscoveryError: On transport failure, non-success status, or a
            document missing graphql_api
    """
    url = f"https://{shop_domain}{CUSTOMER_ACCOUNT_API_PATH}"
    document = await _fetch_document(
        url, "Customer Account API configuration", timeout
    )
    try:
        return CustomerAccountApiConfiguration.model_validate(document)
    except ValueError as e:
        raise DiscoveryError(
            "Invalid Customer Account API configuration: missing graphql_api"
        ) from e
