"""Access token domain service."""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

import logfire

from customer_account.config import AuthSettings
from customer_account.domain.error import TokenExpiredError, TokenNotFoundError
from customer_account.domain.model.access_token import CustomerAccessToken
from customer_account.domain.repository.access_token import AccessTokenRepository
from customer_account.domain.value import AccessTokenId, TokenGrant

from .base import Service


class AccessTokenService(Service):
    """Creates access tokens and enforces their expiry."""

    def __init__(
        self, access_token_repository: AccessTokenRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize access token service.

        Args:
            access_token_repository: Access token repository
            auth_settings: Token lifecycle settings
        """
        self.access_token_repository = access_token_repository
        self.auth_settings = auth_settings

    def compute_expiry(
        self, grant: TokenGrant, now: datetime
    ) -> Optional[datetime]:
        """Turn a grant's relative lifetime into an absolute instant.

        expires_in=0 is a real lifetime and yields an already-expired token.
        Without expires_in the configured default lifetime applies, if any.

        Args:
            grant: Token endpoint response
            now: Instant the grant was received

        Returns:
            Absolute expiry, or None for a non-expiring token
        """
        if grant.expires_in is not None:
            return now + timedelta(seconds=grant.expires_in)
        if self.auth_settings.default_token_lifetime_seconds is not None:
            return now + timedelta(
                seconds=self.auth_settings.default_token_lifetime_seconds
            )
        return None

    async def create(
        self, shop: str, grant: TokenGrant, now: datetime | None = None
    ) -> CustomerAccessToken:
        """Persist the access token from a successful code exchange.

        Args:
            shop: Storefront domain the token belongs to
            grant: Token endpoint response
            now: Instant the grant was received (defaults to current UTC time)

        Returns:
            The stored access token
        """
        now = now or datetime.now(timezone.utc)
        with logfire.span("access_token_service.create", shop=shop):
            token = CustomerAccessToken(
                id=AccessTokenId(uuid4()),
                shop=shop,
                access_token=grant.access_token,
                expires_at=self.compute_expiry(grant, now),
                created_at=now,
                updated_at=now,
            )
            saved = await self.access_token_repository.save(token)
            if saved.expires_at is None:
                logfire.warn(
                    "Access token stored without expiry",
                    token_id=str(saved.id),
                    shop=shop,
                )
            else:
                logfire.info(
                    "Access token stored",
                    token_id=str(saved.id),
                    shop=shop,
                    expires_at=saved.expires_at.isoformat(),
                )
            return saved

    async def get_by_id(self, token_id: AccessTokenId) -> CustomerAccessToken:
        """Get a token by ID regardless of expiry.

        Raises:
            TokenNotFoundError: If the token does not exist
        """
        token = await self.access_token_repository.find_by_id(token_id)
        if token is None:
            logfire.warn("Access token not found", token_id=str(token_id))
            raise TokenNotFoundError(str(token_id))
        return token

    async def get_valid(
        self, token_id: AccessTokenId, now: datetime | None = None
    ) -> CustomerAccessToken:
        """Get a token that may still be used against the API.

        Args:
            token_id: Token ID from the customer's session
            now: Reference instant (defaults to current UTC time)

        Returns:
            The unexpired access token

        Raises:
            TokenNotFoundError: If the token does not exist
            TokenExpiredError: If the token is past its expiry
        """
        with logfire.span("access_token_service.get_valid", token_id=str(token_id)):
            token = await self.get_by_id(token_id)
            if token.is_expired(now):
                logfire.warn(
                    "Access token expired",
                    token_id=str(token_id),
                    expires_at=token.expires_at.isoformat(),
                )
                raise TokenExpiredError(str(token_id), token.expires_at)
            return token
