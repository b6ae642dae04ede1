"""Access token repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from customer_account.domain.model.access_token import CustomerAccessToken
from customer_account.domain.value import AccessTokenId


class AccessTokenRepository(ABC):
    """Repository for customer access tokens.

    Reads never mutate records and expired tokens are not purged here;
    expiry is enforced by callers.
    """

    @abstractmethod
    async def save(self, token: CustomerAccessToken) -> CustomerAccessToken:
        """Persist a new access token.

        Args:
            token: Token to persist

        Returns:
            The persisted token
        """
        pass

    @abstractmethod
    async def find_by_id(self, token_id: AccessTokenId) -> Optional[CustomerAccessToken]:
        """Find a token by ID.

        Args:
            token_id: The token's unique identifier

        Returns:
            The token if found, None otherwise
        """
        pass
