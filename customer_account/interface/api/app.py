"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from customer_account.interface.api.routes import customer_account, health
from customer_account.util.di.container import create_container, setup_di
from customer_account.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    does this in production and tests/conftest.py in tests.

    Args:
        container: DI container to use (defaults to the production container)
    """
    instrument_httpx()

    app_instance = FastAPI(
        title="Customer Account API",
        description="Storefront customer sign-in via OAuth 2.0 with PKCE",
        version=health.VERSION,
    )

    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(customer_account.router)

    return app_instance


# Create app instance for uvicorn
app = create_app()
