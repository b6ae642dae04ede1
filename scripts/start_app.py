#!/usr/bin/env python3
"""Serve the customer account API with uvicorn.

Configuration is validated before the server starts so a production
deployment with placeholder credentials never accepts a request.
"""

import sys

import logfire
import uvicorn

from customer_account.config import Settings, validate_settings
from customer_account.util.logging import setup_logging
from customer_account.util.observability import configure_logfire

APP = "customer_account.interface.api.app:app"


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        validate_settings(settings)

        logfire.info(
            "Starting customer account API",
            environment=settings.environment,
            storefront=settings.shop.storefront_domain,
        )

        # Callback URLs are built from the Host header, which a TLS-terminating
        # proxy must forward unchanged.
        uvicorn.run(
            APP,
            host="0.0.0.0",
            port=8000,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
            forwarded_allow_ips="*",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Customer account API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
