"""CustomerAccessToken repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from customer_account.domain.model.access_token import CustomerAccessToken
from customer_account.domain.repository.access_token import AccessTokenRepository
from customer_account.domain.value import AccessTokenId
from customer_account.persistence.mappers import (
    access_token_to_dict,
    row_to_access_token,
)
from customer_account.persistence.tables import customer_access_tokens_table


class PostgresAccessTokenRepository(AccessTokenRepository):
    """PostgreSQL implementation of AccessTokenRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, token: CustomerAccessToken) -> CustomerAccessToken:
        """Insert access token.

        Args:
            token: Token to insert

        Returns:
            The inserted token
        """
        stmt = customer_access_tokens_table.insert().values(
            **access_token_to_dict(token)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return token

    async def find_by_id(self, token_id: AccessTokenId) -> Optional[CustomerAccessToken]:
        """Get access token by ID.

        Args:
            token_id: Token ID to look up

        Returns:
            Token if found, None otherwise
        """
        stmt = select(customer_access_tokens_table).where(
            customer_access_tokens_table.c.id == token_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_access_token(dict(row))
