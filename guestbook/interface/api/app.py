"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from guestbook.interface.api.routes import auth, guestbook, health
from guestbook.util.di.container import create_container, setup_di
from guestbook.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    The route table belongs to the returned app; nothing is registered at
    import time. uvicorn builds it through factory mode (see
    scripts/start_app.py).

    Note: Logfire should be configured before calling this function.

    Args:
        container: DI container to use; the production container by default
    """
    app_instance = FastAPI(
        title="Guestbook",
        description="Guestbook where visitors read recent messages, sign and vote",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(guestbook.router)

    return app_instance
