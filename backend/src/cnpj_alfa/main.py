"""
FastAPI application entry point.

Exposes the CNPJ validation library over HTTP:
- Health check
- Validation, formatting and check-digit routes
- Error handling and logging
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cnpj_alfa import __version__
from cnpj_alfa.api.routes import cnpj, health
from cnpj_alfa.api.schemas import ErrorResponse
from cnpj_alfa.config import get_settings
from cnpj_alfa.domain import CnpjError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the HTTP service."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance ready to serve requests.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="CNPJ Alfa API",
        description=(
            "Validation and formatting of Brazilian CNPJ identifiers, "
            "alphanumeric and legacy numeric."
        ),
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health.router)
    app.include_router(cnpj.router, prefix="/api/v1")

    @app.exception_handler(CnpjError)
    async def cnpj_error_handler(request: Request, exc: CnpjError):
        """Domain errors raised by a route are client errors."""
        logger.info(f"CNPJ error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error=type(exc).__name__,
                detail=str(exc),
            ).model_dump(),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch-all exception handler for unhandled errors."""
        logger.exception(f"Unhandled error: {exc}")

        # Don't expose internal errors in production
        if settings.debug:
            detail = str(exc)
        else:
            detail = "An internal error occurred"

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": detail,
            },
        )

    logger.info(f"CNPJ Alfa API v{__version__} ready (debug={settings.debug})")
    return app


# Create the application instance
app = create_app()


# Development server entry point
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cnpj_alfa.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
