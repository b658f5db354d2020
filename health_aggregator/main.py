"""
Health Check Aggregator Application

This module bootstraps the FastAPI application with Clean Architecture.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from health_aggregator.container import Container, create_container
from health_aggregator.domain import SerializationError
from health_aggregator.presentation import router, set_container
from health_aggregator.presentation.api.routes import checks


logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with all dependencies
    properly wired using the Clean Architecture pattern. The check routes
    are mounted under ``settings.mount_prefix``.
    """
    # Create the DI container
    container = container or create_container()
    settings = container.settings

    logging.basicConfig(level=settings.log_level.upper())

    # Set the container for dependency injection
    set_container(container)

    # Create FastAPI app
    app = FastAPI(
        title="Health Check Aggregator",
        description="Runs registered health checks and reports their aggregated status",
        version=settings.app_version,
    )

    @app.exception_handler(SerializationError)
    def serialization_error_handler(request: Request, exc: SerializationError) -> PlainTextResponse:
        logger.error(f"Could not serialize response for {request.url.path}: {exc}")
        return PlainTextResponse("internal server error", status_code=500)

    # Include the API router
    prefix = settings.mount_prefix.strip("/")
    app.include_router(router, prefix=f"/{prefix}" if prefix else "")
    if prefix:
        # The bare mount point serves the default report too
        app.add_api_route(f"/{prefix}", checks, methods=["GET"], include_in_schema=False)

    return app


# Create the app instance for uvicorn
app = create_app()
