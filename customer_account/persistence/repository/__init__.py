"""PostgreSQL repository implementations."""

from customer_account.persistence.repository.access_token import (
    PostgresAccessTokenRepository,
)
from customer_account.persistence.repository.code_verifier import (
    PostgresCodeVerifierRepository,
)

__all__ = [
    "PostgresAccessTokenRepository",
    "PostgresCodeVerifierRepository",
]
