"""Domain services."""

from .access_token_service import AccessTokenService
from .auth_service import CUSTOMER_ACCOUNT_SCOPE, AuthService, CustomerAccountClient
from .base import Service
from .code_verifier_service import CodeVerifierService

__all__ = [
    "AccessTokenService",
    "AuthService",
    "CodeVerifierService",
    "CUSTOMER_ACCOUNT_SCOPE",
    "CustomerAccountClient",
    "Service",
]
