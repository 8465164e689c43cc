"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lyra.config import Settings
from lyra.interface.api.routes import feedback, health, invitations, reader
from lyra.util.di.container import create_container, setup_di
from lyra.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    handles it in production.

    Args:
        container: DI container to use; the production container when None

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Lyra Beta Readers API",
        description="Beta reader invitations, reading sessions and manuscript feedback",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Reader links open on the frontend, which calls this API with credentials
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
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

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(invitations.router)
    app_instance.include_router(feedback.router)
    app_instance.include_router(reader.router)

    return app_instance
