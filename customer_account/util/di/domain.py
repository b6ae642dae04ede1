"""Domain layer DI providers."""

from dishka import Scope, provide

from customer_account.config import AuthSettings, ShopSettings
from customer_account.domain.repository import (
    AccessTokenRepository,
    CodeVerifierRepository,
)
from customer_account.domain.service import (
    AccessTokenService,
    AuthService,
    CodeVerifierService,
    CustomerAccountClient,
)
from customer_account.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session
    lifecycle. AuthService also caches discovery documents per request.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, client: CustomerAccountClient, shop_settings: ShopSettings
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(client=client, shop_settings=shop_settings)

    @provide
    def get_code_verifier_service(
        self, code_verifier_repository: CodeVerifierRepository
    ) -> CodeVerifierService:
        """Provide pending authorization domain service."""
        return CodeVerifierService(code_verifier_repository=code_verifier_repository)

    @provide
    def get_access_token_service(
        self,
        access_token_repository: AccessTokenRepository,
        auth_settings: AuthSettings,
    ) -> AccessTokenService:
        """Provide access token domain service."""
        return AccessTokenService(
            access_token_repository=access_token_repository,
            auth_settings=auth_settings,
        )
