"""Value objects exchanged with the identity provider.

Discovery and token responses are validated at the boundary: a payload
missing a required field never becomes one of these objects.
"""

from pydantic import field_validator

from customer_account.domain.value.common import ValueObject


class PkceMaterial(ValueObject):
    """Secrets generated for one authorization attempt.

    Attributes:
        verifier: PKCE code verifier, kept server-side until the callback
        challenge: S256 challenge sent to the authorization endpoint
        state: Anti-CSRF token correlating the callback with this attempt
    """

    verifier: str
    challenge: str
    state: str


class OpenIDConfiguration(ValueObject):
    """Subset of the storefront's OpenID Connect discovery document."""

    authorization_endpoint: str
    token_endpoint: str

    @field_validator("authorization_endpoint", "token_endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Endpoints must be non-empty URLs."""
        if not v.strip():
            raise ValueError("Endpoint URL must not be empty")
        return v


class CustomerAccountApiConfiguration(ValueObject):
    """Customer Account API discovery document."""

    graphql_api: str

    @field_validator("graphql_api")
    @classmethod
    def validate_graphql_api(cls, v: str) -> str:
        """GraphQL endpoint must be a non-empty URL."""
        if not v.strip():
            raise ValueError("GraphQL endpoint URL must not be empty")
        return v


class TokenGrant(ValueObject):
    """Successful response from the token endpoint."""

    access_token: str
    expires_in: int | None = None
    token_type: str | None = None
    id_token: str | None = None

    @field_validator("access_token")
    @classmethod
    def validate_access_token(cls, v: str) -> str:
        """Access token must be present."""
        if not v:
            raise ValueError("access_token must not be empty")
        return v

    @field_validator("expires_in")
    @classmethod
    def validate_expires_in(cls, v: int | None) -> int | None:
        """Lifetime cannot be negative."""
        if v is not None and v < 0:
            raise ValueError("expires_in must not be negative")
        return v
