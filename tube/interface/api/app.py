"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tube.config import Settings
from tube.interface.api.errors import register_error_handlers
from tube.interface.api.routes import comments, health, replies
from tube.util.di.container import create_container, setup_di
from tube.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is built
            when omitted

    Returns:
        Configured FastAPI application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Tube Comments API",
        description="Threaded comments and replies on videos",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(replies.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
