"""Get order list use case."""

import logfire
from pydantic import BaseModel

from customer_account.adapter.error import ApiQueryError
from customer_account.application.usecase.base import BaseUseCase
from customer_account.domain.error import MissingAuthenticationError
from customer_account.domain.model.customer import Customer
from customer_account.domain.service import AccessTokenService, AuthService
from customer_account.domain.value import AccessTokenId


class GetOrderListRequest(BaseModel):
    """Get order list request."""

    token_id: AccessTokenId | None = None  # From the session cookie


class GetOrderListResponse(BaseModel):
    """Order list page data.

    Exactly one of customer and api_error is set.
    """

    customer: Customer | None = None
    api_error: str | None = None


class GetOrderListUseCase(BaseUseCase):
    """Use case that loads the authenticated customer and their orders."""

    def __init__(
        self, auth_service: AuthService, access_token_service: AccessTokenService
    ) -> None:
        self.auth_service = auth_service
        self.access_token_service = access_token_service

    async def execute(self, request: GetOrderListRequest) -> GetOrderListResponse:
        """Load the customer behind the session.

        Query failures are returned in api_error so the page can show them
        separately; session and token problems are raised.

        Raises:
            MissingAuthenticationError: If there is no session
            TokenNotFoundError: If the session's token does not exist
            TokenExpiredError: If the token has expired
            DiscoveryError: If the GraphQL endpoint cannot be discovered
        """
        if request.token_id is None:
            raise MissingAuthenticationError()

        with logfire.span("get_order_list", token_id=str(request.token_id)):
            token = await self.access_token_service.get_valid(request.token_id)

            try:
                customer = await self.auth_service.fetch_customer(token.access_token)
            except ApiQueryError as e:
                logfire.warn(
                    "Customer Account API query failed", kind=e.kind, error=str(e)
                )
                return GetOrderListResponse(api_error=str(e))

            logfire.info("Customer orders loaded", order_count=len(customer.orders))
            return GetOrderListResponse(customer=customer)
