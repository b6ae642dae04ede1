"""Customer account authentication routes.

Every failure is caught at the top of its handler, logged, and rendered as
a local page with a link to restart the flow. Clients sending
Accept: application/json get {"success": false, "error": ...} instead.
"""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response

from customer_account.application.usecase.auth import (
    CompleteAuthorizationUseCase,
    GetOrderListUseCase,
    InitiateAuthorizationUseCase,
)
from customer_account.application.usecase.auth.complete_authorization import (
    CompleteAuthorizationRequest,
)
from customer_account.application.usecase.auth.get_order_list import (
    GetOrderListRequest,
)
from customer_account.application.usecase.auth.initiate_authorization import (
    InitiateAuthorizationRequest,
)
from customer_account.interface.api.pages import (
    error_page,
    html_page,
    link,
    order_list_page,
)
from customer_account.util.logging import mask_secret
from customer_account.util.session import CustomerSessionStorage

logger = logging.getLogger(__name__)

PREFIX = "/customer-account-api"
AUTH_PATH = f"{PREFIX}/auth"
ORDER_LIST_PATH = f"{PREFIX}/order-list"
LOGOUT_PATH = f"{PREFIX}/logout"

router = APIRouter(prefix=PREFIX, tags=["customer-account"], route_class=DishkaRoute)


def _request_host(request: Request) -> str:
    return request.headers.get("host") or request.url.netloc


def _wants_json(request: Request) -> bool:
    return "application/json" in (request.headers.get("accept") or "").lower()


def _failure(
    request: Request,
    error: Exception,
    title: str,
    retry_label: str = "Try again",
) -> Response:
    if _wants_json(request):
        return JSONResponse({"success": False, "error": str(error)})
    return error_page(title, str(error), AUTH_PATH, retry_label)


@router.get("/auth")
async def authorize(
    request: Request,
    use_case: FromDishka[InitiateAuthorizationUseCase],
) -> Response:
    """Start customer authentication.

    Redirects (302) to the storefront's authorization endpoint.
    """
    try:
        response = await use_case.execute(
            InitiateAuthorizationRequest(host=_request_host(request))
        )
    except Exception as e:
        logger.error(f"Customer authorization initiation failed: {e}", exc_info=True)
        return _failure(request, e, "Authentication Error")

    return RedirectResponse(response.authorization_url, status_code=302)


@router.get("/callback")
async def callback(
    request: Request,
    use_case: FromDishka[CompleteAuthorizationUseCase],
    session_storage: FromDishka[CustomerSessionStorage],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
    error_description: str | None = None,
) -> Response:
    """Complete customer authentication.

    On success, binds the new access token to the session cookie and
    redirects (302) to the order list.
    """
    try:
        result = await use_case.execute(
            CompleteAuthorizationRequest(
                host=_request_host(request),
                code=code,
                state=state,
                error=error,
                error_description=error_description,
            )
        )
    except Exception as e:
        logger.error(
            f"Customer authorization callback failed for state={mask_secret(state)}: {e}",
            exc_info=True,
        )
        return _failure(request, e, "Authentication Error")

    response = RedirectResponse(url=ORDER_LIST_PATH, status_code=302)
    session_storage.commit(response, result.token_id)
    return response


@router.get("/order-list")
async def order_list(
    request: Request,
    use_case: FromDishka[GetOrderListUseCase],
    session_storage: FromDishka[CustomerSessionStorage],
) -> Response:
    """Show the authenticated customer's details and recent orders."""
    token_id = session_storage.get_customer_token_id(
        request.cookies.get(session_storage.cookie_name)
    )

    try:
        result = await use_case.execute(GetOrderListRequest(token_id=token_id))
    except Exception as e:
        logger.error(f"Loading customer orders failed: {e}", exc_info=True)
        return _failure(request, e, "Customer Orders", retry_label="Authenticate")

    if _wants_json(request):
        if result.api_error is not None:
            return JSONResponse({"success": False, "error": result.api_error})
        return JSONResponse(
            {"success": True, "customer": result.customer.model_dump(mode="json")}
        )

    return order_list_page(result.customer, result.api_error, LOGOUT_PATH)


@router.get("/logout")
async def logout(
    request: Request,
    session_storage: FromDishka[CustomerSessionStorage],
) -> Response:
    """Forget the customer's session.

    The stored access token is left in place; only the cookie is removed.
    """
    if _wants_json(request):
        response: Response = JSONResponse({"success": True})
    else:
        response = html_page(
            "Signed out",
            "<p>You have been signed out.</p>" + link(AUTH_PATH, "Authenticate"),
        )
    session_storage.destroy(response)
    logger.info("Customer session destroyed")
    return response
