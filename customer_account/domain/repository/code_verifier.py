"""Code verifier repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from customer_account.domain.model.code_verifier import CodeVerifier


class CodeVerifierRepository(ABC):
    """Repository for pending authorizations keyed by state."""

    @abstractmethod
    async def save(self, code_verifier: CodeVerifier) -> CodeVerifier:
        """Store a new pending authorization.

        Args:
            code_verifier: Record to store

        Returns:
            The stored record

        Raises:
            DuplicateStateError: If a record with the same state exists
        """
        pass

    @abstractmethod
    async def consume(self, state: str) -> Optional[CodeVerifier]:
        """Atomically fetch and delete the record for a state.

        Of two concurrent calls with the same state, at most one receives
        the record.

        Args:
            state: State value from the callback

        Returns:
            The removed record, or None if no record matched
        """
        pass

    @abstractmethod
    async def find_by_state(self, state: str) -> Optional[CodeVerifier]:
        """Look up a record without consuming it.

        Args:
            state: State value

        Returns:
            The record if found, None otherwise
        """
        pass
