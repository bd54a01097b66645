"""FastAPI routers for the salary insights application."""

from .salaries import router as salaries_router

__all__ = ["salaries_router"]
