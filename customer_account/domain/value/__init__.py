"""Domain value objects."""

from customer_account.domain.value.identifiers import AccessTokenId, CodeVerifierId
from customer_account.domain.value.types import (
    CustomerAccountApiConfiguration,
    OpenIDConfiguration,
    PkceMaterial,
    TokenGrant,
)

__all__ = [
    # Identifiers
    "AccessTokenId",
    "CodeVerifierId",
    # Types
    "CustomerAccountApiConfiguration",
    "OpenIDConfiguration",
    "PkceMaterial",
    "TokenGrant",
]
