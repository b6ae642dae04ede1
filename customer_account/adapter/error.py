"""Adapter layer errors."""

from typing import Literal


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External provider error.

    Attributes:
        status_code: Upstream HTTP status, if a response was received
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class DiscoveryError(ProviderError):
    """Discovery document could not be fetched or was incomplete."""

    pass


class TokenExchangeError(ProviderError):
    """Token endpoint rejected the authorization code exchange."""

    pass


class ApiQueryError(ProviderError):
    """Customer Account API query failed.

    Attributes:
        kind: "transport" for HTTP-level failures, "graphql" for errors
            reported in the GraphQL response body
    """

    def __init__(
        self,
        message: str,
        kind: Literal["transport", "graphql"],
        status_code: int | None = None,
    ):
        self.kind = kind
        super().__init__(message, status_code=status_code)
