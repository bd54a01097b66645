"""Data source collaborators feeding the engine."""

from .mock import generate_mock_salaries
from .store import InMemorySalaryStore, SalaryDataSource

__all__ = ["InMemorySalaryStore", "SalaryDataSource", "generate_mock_salaries"]
