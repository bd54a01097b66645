"""Service layer entrypoints for domain logic."""

from .salaries_service import SalariesService

__all__ = ["SalariesService"]
