"""Application layer DI providers."""

from dishka import Scope, provide

from customer_account.application.usecase.auth import (
    CompleteAuthorizationUseCase,
    GetOrderListUseCase,
    InitiateAuthorizationUseCase,
)
from customer_account.config import ShopSettings
from customer_account.domain.repository import UnitOfWork
from customer_account.domain.service import (
    AccessTokenService,
    AuthService,
    CodeVerifierService,
)
from customer_account.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_initiate_authorization_use_case(
        self,
        auth_service: AuthService,
        code_verifier_service: CodeVerifierService,
        unit_of_work: UnitOfWork,
    ) -> InitiateAuthorizationUseCase:
        """Provide initiate authorization use case."""
        return InitiateAuthorizationUseCase(
            auth_service=auth_service,
            code_verifier_service=code_verifier_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_complete_authorization_use_case(
        self,
        auth_service: AuthService,
        code_verifier_service: CodeVerifierService,
        access_token_service: AccessTokenService,
        unit_of_work: UnitOfWork,
        shop_settings: ShopSettings,
    ) -> CompleteAuthorizationUseCase:
        """Provide complete authorization use case."""
        return CompleteAuthorizationUseCase(
            auth_service=auth_service,
            code_verifier_service=code_verifier_service,
            access_token_service=access_token_service,
            unit_of_work=unit_of_work,
            shop_settings=shop_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_order_list_use_case(
        self,
        auth_service: AuthService,
        access_token_service: AccessTokenService,
    ) -> GetOrderListUseCase:
        """Provide get order list use case."""
        return GetOrderListUseCase(
            auth_service=auth_service,
            access_token_service=access_token_service,
        )
