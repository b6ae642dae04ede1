"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from customer_account.util.di import build_providers


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are read from the environment when first requested, so building
    the container neither validates configuration nor opens connections.
    """
    return make_async_container(*build_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so routes can use FromDishka."""
    setup_dishka(container, app)
