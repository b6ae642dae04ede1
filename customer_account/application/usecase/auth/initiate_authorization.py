"""Initiate customer authorization use case."""

import logfire
from pydantic import BaseModel

from customer_account.application.usecase.auth.callback_url import build_callback_url
from customer_account.application.usecase.base import BaseUseCase
from customer_account.domain.repository import UnitOfWork
from customer_account.domain.service import AuthService, CodeVerifierService
from customer_account.util.logging import mask_secret


class InitiateAuthorizationRequest(BaseModel):
    """Initiate authorization request."""

    host: str  # Host of the incoming request, used for the callback URL


class InitiateAuthorizationResponse(BaseModel):
    """Initiate authorization response."""

    authorization_url: str
    state: str


class InitiateAuthorizationUseCase(BaseUseCase):
    """Use case that starts the PKCE authorization code flow."""

    def __init__(
        self,
        auth_service: AuthService,
        code_verifier_service: CodeVerifierService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case.

        Args:
            auth_service: Authentication domain service
            code_verifier_service: Pending authorization domain service
            unit_of_work: Commits the stored verifier
        """
        self.auth_service = auth_service
        self.code_verifier_service = code_verifier_service
        self.unit_of_work = unit_of_work

    async def execute(
        self, request: InitiateAuthorizationRequest
    ) -> InitiateAuthorizationResponse:
        """Start an authorization attempt.

        Steps:
        1. Discover the authorization endpoint
        2. Generate verifier, challenge and state
        3. Store state -> verifier and commit before the redirect goes out
        4. Build the authorization URL

        Discovery runs first, so a discovery failure stores nothing.

        Raises:
            DiscoveryError: If the OpenID configuration cannot be fetched
            DuplicateStateError: If the generated state collides
        """
        with logfire.span("initiate_authorization", host=request.host):
            configuration = await self.auth_service.get_openid_configuration()

            material = self.auth_service.generate_pkce()
            await self.code_verifier_service.store(material)
            await self.unit_of_work.commit()

            authorization_url = self.auth_service.build_authorization_url(
                configuration,
                material,
                redirect_uri=build_callback_url(request.host),
            )

            logfire.info(
                "Customer authorization initiated",
                state=mask_secret(material.state),
            )

            return InitiateAuthorizationResponse(
                authorization_url=authorization_url,
                state=material.state,
            )
