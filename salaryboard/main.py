"""FastAPI application instance and startup hooks."""
from __future__ import annotations

from fastapi import FastAPI

from salaryboard.core import get_logger, get_settings
from salaryboard.core.logger import init_logging
from salaryboard.routers import salaries_router

LOGGER = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    init_logging(settings.log, app_name=settings.app.app_name)

    app = FastAPI(title="Salary Insights", version="0.1.0")
    app.include_router(salaries_router)

    @app.get("/health", include_in_schema=False)
    def health() -> dict[str, str]:
        return {"status": "ok"}

    LOGGER.info("FastAPI application initialised")
    return app


app = create_app()
