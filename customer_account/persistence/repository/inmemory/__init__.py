"""In-memory repository implementations for testing."""

from .access_token import InMemoryAccessTokenRepository
from .code_verifier import InMemoryCodeVerifierRepository
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryAccessTokenRepository",
    "InMemoryCodeVerifierRepository",
    "InMemoryUnitOfWork",
]
