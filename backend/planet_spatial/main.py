"""FastAPI application entrypoint and configuration.

This module provides the application factory that configures logging,
sets up CORS middleware, includes the coordinate and tile routers, maps
spatial errors to HTTP 422 responses, and exposes a health check endpoint.

Example:
    The application can be run with uvicorn:
        $ uvicorn planet_spatial.main:app --reload
"""

import fastapi
from fastapi import responses
from fastapi.middleware import cors

from planet_spatial.api import coordinates, tiles
from planet_spatial.core import config, errors, log


async def _spatial_error_handler(
    request: fastapi.Request,
    exc: Exception,
) -> responses.JSONResponse:
    """Render a SpatialError as a 422 response naming the error type."""
    return responses.JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def create_app() -> fastapi.FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance ready for ASGI server.
    """
    settings = config.get_settings()
    log.configure_logging(settings.log_level)
    app = fastapi.FastAPI(title="Planet Spatial", version="0.1.0")

    app.include_router(coordinates.router)
    app.include_router(tiles.router)
    app.add_exception_handler(errors.SpatialError, _spatial_error_handler)

    app.add_middleware(
        cors.CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.allow_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> dict[str, str]:  # type: ignore[misc]
        """Health check endpoint for monitoring and load balancers."""
        return {"status": "ok"}

    return app


app = create_app()
