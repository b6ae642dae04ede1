"""Complete customer authorization use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from customer_account.application.usecase.auth.callback_url import build_callback_url
from customer_account.application.usecase.base import BaseUseCase
from customer_account.config import ShopSettings
from customer_account.domain.error import (
    AuthorizationDeniedError,
    MissingParameterError,
)
from customer_account.domain.repository import UnitOfWork
from customer_account.domain.service import (
    AccessTokenService,
    AuthService,
    CodeVerifierService,
)
from customer_account.domain.value import AccessTokenId


class CompleteAuthorizationRequest(BaseModel):
    """Parameters of the identity provider's redirect back to us."""

    host: str
    code: str | None = None
    state: str | None = None
    error: str | None = None  # Set instead of code when the customer declined
    error_description: str | None = None


class CompleteAuthorizationResponse(BaseModel):
    """Complete authorization response."""

    token_id: AccessTokenId
    expires_at: datetime | None = None


class CompleteAuthorizationUseCase(BaseUseCase):
    """Use case that redeems the callback for a stored access token."""

    def __init__(
        self,
        auth_service: AuthService,
        code_verifier_service: CodeVerifierService,
        access_token_service: AccessTokenService,
        unit_of_work: UnitOfWork,
        shop_settings: ShopSettings,
    ) -> None:
        """Initialize use case.

        Args:
            auth_service: Authentication domain service
            code_verifier_service: Pending authorization domain service
            access_token_service: Access token domain service
            unit_of_work: Commits the consumed verifier and the new token
            shop_settings: Storefront the tokens belong to
        """
        self.auth_service = auth_service
        self.code_verifier_service = code_verifier_service
        self.access_token_service = access_token_service
        self.unit_of_work = unit_of_work
        self.shop_settings = shop_settings

    async def execute(
        self, request: CompleteAuthorizationRequest
    ) -> CompleteAuthorizationResponse:
        """Complete an authorization attempt.

        Each step short-circuits on failure:
        1. Reject provider errors and missing code/state (no storage access)
        2. Consume the verifier for state
        3. Exchange code + verifier at the discovered token endpoint
        4. Store the access token with its computed expiry and commit, so the
           token exists before the session cookie pointing at it is sent

        The verifier is gone after step 2 even if step 3 fails; the customer
        has to restart from initiation.

        Raises:
            AuthorizationDeniedError: If the provider returned an error
            MissingParameterError: If code or state is missing
            InvalidStateError: If state matches no pending authorization
            DiscoveryError: If the token endpoint cannot be discovered
            TokenExchangeError: If the provider rejects the exchange
        """
        if request.error:
            raise AuthorizationDeniedError(request.error, request.error_description)

        if not request.code or not request.state:
            raise MissingParameterError()

        with logfire.span("complete_authorization", host=request.host):
            pending = await self.code_verifier_service.consume(request.state)

            grant = await self.auth_service.exchange_code(
                code=request.code,
                code_verifier=pending.verifier,
                redirect_uri=build_callback_url(request.host),
            )

            token = await self.access_token_service.create(
                shop=self.shop_settings.storefront_domain, grant=grant
            )
            await self.unit_of_work.commit()

            logfire.info("Customer authorization completed", token_id=str(token.id))

            return CompleteAuthorizationResponse(
                token_id=token.id, expires_at=token.expires_at
            )
