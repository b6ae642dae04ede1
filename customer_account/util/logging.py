"""Logging configuration for the application."""

import logging
import sys

from customer_account.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # httpx logs full request URLs, which include authorization codes
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger("customer_account").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )


def mask_secret(value: str | None, keep: int = 6) -> str:
    """Shorten a secret-ish value for log output.

    Args:
        value: Value to mask (state, code, token id)
        keep: Number of leading characters to keep

    Returns:
        Masked representation safe to log
    """
    if not value:
        return "<none>"
    if len(value) <= keep:
        return "***"
    return f"{value[:keep]}***"
