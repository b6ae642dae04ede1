"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Access token stored", token_id=str(token.id), shop=token.shop)

    with logfire.span("code_verifier_service.consume"):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from customer_account.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the running environment.

    Telemetry is only sent to Logfire cloud when explicitly enabled or when a
    token is configured (OBSERVABILITY__LOGFIRE_TOKEN); otherwise output stays
    on the console.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs = {
        "service_name": "customer-account-api",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


SECRET_PARAMETERS = frozenset({"code", "state"})


def _redact_callback_parameters(request, attributes):
    """Keep authorization codes and state values out of request spans."""
    values = attributes.get("values")
    if not isinstance(values, dict):
        return attributes
    redacted = {
        name: "[redacted]" if name in SECRET_PARAMETERS else value
        for name, value in values.items()
    }
    return {**attributes, "values": redacted}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the application.

    Headers are not captured because they carry the session cookie, and the
    callback's code and state parameters are redacted.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_redact_callback_parameters,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound calls to the discovery, token and GraphQL endpoints."""
    logfire.instrument_httpx()
