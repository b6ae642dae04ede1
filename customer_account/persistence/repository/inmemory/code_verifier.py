"""In-memory code verifier repository for testing."""

from typing import Optional

from customer_account.domain.error import DuplicateStateError
from customer_account.domain.model.code_verifier import CodeVerifier
from customer_account.domain.repository.code_verifier import CodeVerifierRepository


class InMemoryCodeVerifierRepository(CodeVerifierRepository):
    """In-memory implementation of CodeVerifierRepository for testing.

    consume() has no await between lookup and removal, so it is atomic
    with respect to other coroutines on the same event loop.
    """

    def __init__(self) -> None:
        self._by_state: dict[str, CodeVerifier] = {}

    async def save(self, code_verifier: CodeVerifier) -> CodeVerifier:
        """Save pending authorization."""
        if code_verifier.state in self._by_state:
            raise DuplicateStateError(code_verifier.state)
        self._by_state[code_verifier.state] = code_verifier
        return code_verifier

    async def consume(self, state: str) -> Optional[CodeVerifier]:
        """Remove and return the record for a state."""
        return self._by_state.pop(state, None)

    async def find_by_state(self, state: str) -> Optional[CodeVerifier]:
        """Find pending authorization by state."""
        return self._by_state.get(state)

    def count(self) -> int:
        """Number of stored records."""
        return len(self._by_state)
