"""FastAPI application."""

from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cfh.config import Settings
from cfh.interface.api.errors import register_error_handlers
from cfh.interface.api.routes import (
    auth,
    comments,
    game,
    health,
    memes,
    newsletter,
    realtime,
    resources,
)
from cfh.util.di.container import create_container, setup_di
from cfh.util.observability import instrument_fastapi


def create_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.

    Args:
        container: DI container to use; the production container is built
            when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Client From Hell API",
        description="Backend API for Client From Hell - a community for freelance designers sharing memes, resources and war stories",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup CORS middleware
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(memes.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(resources.router)
    app_instance.include_router(game.router)
    app_instance.include_router(newsletter.router)
    app_instance.include_router(realtime.router)  # /ws (no /api prefix)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
