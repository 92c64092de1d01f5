"""
FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from parametrization.core.config import settings
from parametrization.core.container import container
from parametrization.core.exceptions import ConstraintViolation, StoreUnavailable
from parametrization.core.logging import configure_logging
from parametrization.api.routes import router as api_router
from parametrization.api.middleware import RequestContextMiddleware

logger = structlog.get_logger()


async def seed_store() -> None:
    """Load the default toggles into an empty store."""
    from parametrization.models.database import async_session_factory
    from parametrization.repositories.parametrization import ParametrizationRepository
    from parametrization.services.seed import load_parametrization_data

    async with async_session_factory() as session:
        await load_parametrization_data(ParametrizationRepository(session))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    from parametrization.implementations.register import register_backends
    from parametrization.models.database import init_db, close_db

    # Startup
    configure_logging(settings)
    register_backends()

    container.configure(settings.get_backends_config())
    await container.initialize()

    await init_db()
    if settings.seed.enabled:
        await seed_store()

    logger.info(
        "app.started",
        version=settings.app_version,
        environment=settings.environment,
        cache_backend=container.cache_type,
    )

    yield

    # Shutdown
    await container.shutdown()
    await close_db()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # Middleware
    app.add_middleware(RequestContextMiddleware)

    # Routes
    app.include_router(api_router, prefix="/api")

    # Exception handlers
    @app.exception_handler(ConstraintViolation)
    async def constraint_violation_handler(request: Request, exc: ConstraintViolation):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc), "key": exc.key},
        )

    @app.exception_handler(StoreUnavailable)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
        logger.error("backend.unavailable", component=exc.component, error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": f"{exc.component} unavailable"},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.exception("request.failed", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "internal_server_error",
                "message": str(exc) if settings.debug else "An error occurred",
            },
        )

    @app.get("/health")
    async def health_check():
        """Quick health check endpoint (for load balancers)."""
        return {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.environment,
            "cache_backend": container.cache_type,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "parametrization.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=settings.workers,
    )
