"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from src.api.middleware.error_handler import error_handler_middleware
from src.api.routes import health, orders
from src.core.config import Settings, get_settings
from src.core.container import ServiceContainer, build_container
from src.services.demo_seed import seed_demo_data

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Seeds demo data when enabled and runs the analytics cache cleanup task.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control back to the application.
    """
    settings: Settings = app.state.settings
    container: ServiceContainer = app.state.container
    logger.info("Starting %s in %s mode", settings.app_name, settings.app_env)

    if settings.seed_demo_data and container.order_store.count() == 0:
        await seed_demo_data(container.order_store, container.profile_service)

    await container.analytics_cache.start_cleanup_task()

    yield

    await container.analytics_cache.stop_cleanup_task()
    container.analytics_cache.clear()
    logger.info("Shutting down %s", settings.app_name)


def create_app(
    settings: Settings | None = None,
    container: ServiceContainer | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings; defaults to the cached environment settings.
        container: Optional pre-built services, e.g. isolated per test.

    Returns:
        FastAPI: Configured application instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Orders API",
        description="Order lifecycle, promotions and analytics",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.container = container or build_container(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Outermost, so it sees errors from every route
    app.add_middleware(BaseHTTPMiddleware, dispatch=error_handler_middleware)

    app.include_router(health.router)

    api_v1_router = APIRouter(prefix="/api/v1")
    api_v1_router.include_router(orders.router)
    app.include_router(api_v1_router)

    return app


configure_logging(get_settings())

# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
