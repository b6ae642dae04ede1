"""CodeVerifier repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from customer_account.domain.error import DuplicateStateError
from customer_account.domain.model.code_verifier import CodeVerifier
from customer_account.domain.repository.code_verifier import CodeVerifierRepository
from customer_account.persistence.mappers import (
    code_verifier_to_dict,
    row_to_code_verifier,
)
from customer_account.persistence.tables import code_verifiers_table


class PostgresCodeVerifierRepository(CodeVerifierRepository):
    """PostgreSQL implementation of CodeVerifierRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, code_verifier: CodeVerifier) -> CodeVerifier:
        """Insert a pending authorization.

        The insert runs in a savepoint so a unique violation on state leaves
        the request's transaction usable.

        Raises:
            DuplicateStateError: If the state already exists
        """
        stmt = code_verifiers_table.insert().values(
            **code_verifier_to_dict(code_verifier)
        )
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise DuplicateStateError(code_verifier.state) from e

        return code_verifier

    async def consume(self, state: str) -> Optional[CodeVerifier]:
        """Delete and return the record for a state in one statement.

        DELETE ... RETURNING takes a row lock, so a concurrent consumer of
        the same state deletes nothing and gets None.
        """
        stmt = (
            delete(code_verifiers_table)
            .where(code_verifiers_table.c.state == state)
            .returning(*code_verifiers_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()

        if not row:
            return None

        return row_to_code_verifier(dict(row))

    async def find_by_state(self, state: str) -> Optional[CodeVerifier]:
        stmt = select(code_verifiers_table).where(
            code_verifiers_table.c.state == state
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_code_verifier(dict(row))
