"""In-memory access token repository for testing."""

from typing import Optional

from customer_account.domain.model.access_token import CustomerAccessToken
from customer_account.domain.repository.access_token import AccessTokenRepository
from customer_account.domain.value import AccessTokenId


class InMemoryAccessTokenRepository(AccessTokenRepository):
    """In-memory implementation of AccessTokenRepository for testing."""

    def __init__(self) -> None:
        self._tokens: dict[AccessTokenId, CustomerAccessToken] = {}

    async def save(self, token: CustomerAccessToken) -> CustomerAccessToken:
        """Save access token."""
        self._tokens[token.id] = token
        return token

    async def find_by_id(self, token_id: AccessTokenId) -> Optional[CustomerAccessToken]:
        """Find access token by ID."""
        return self._tokens.get(token_id)

    def count(self) -> int:
        """Number of stored records."""
        return len(self._tokens)
