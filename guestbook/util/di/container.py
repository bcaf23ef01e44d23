"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from guestbook.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container: PostgreSQL persistence, session identity.

    Settings are read from the environment when first requested, so building
    the container has no side effects.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the current Request to request-scoped factories
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so DishkaRoute handlers can resolve
    FromDishka parameters per request."""
    setup_dishka(container, app)
