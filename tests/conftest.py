"""Test configuration and fixtures."""

import logfire
import pytest

# Keep telemetry local; spans and logs are still created so instrumented
# code paths run exactly as in production.
logfire.configure(send_to_logfire=False, console=False)


def pytest_addoption(parser):
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run tests that need a running PostgreSQL database",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--integration"):
        return
    skip_integration = pytest.mark.skip(reason="needs --integration and PostgreSQL")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
