from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.budget.api.middlewares import setup_middlewares
from src.budget.api.v1.router import api_router
from src.budget.core.config import get_settings
from src.budget.core.db import dispose_engine
from src.budget.core.exceptions import setup_exception_handlers
from src.budget.core.health import setup_health_endpoint
from src.budget.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", env=settings.app_env)

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "users", "description": "Signup, signin and the current user"},
    {"name": "projects", "description": "Budgeted projects owned by the caller"},
    {"name": "expenses", "description": "Expenses recorded against a project"},
    {"name": "health", "description": "Liveness and database reachability"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Per-user project budgets and expense tracking",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(api_router)
    setup_health_endpoint(app)

    return app


app = create_app()
