"""Repository interfaces.

Interfaces live in the domain layer; implementations live in persistence.
"""

from customer_account.domain.repository.access_token import AccessTokenRepository
from customer_account.domain.repository.code_verifier import CodeVerifierRepository
from customer_account.domain.repository.unit_of_work import UnitOfWork

__all__ = [
    "AccessTokenRepository",
    "CodeVerifierRepository",
    "UnitOfWork",
]
