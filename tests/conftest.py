"""Shared fixtures for the salary engine tests."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from itertools import count
from typing import Callable

import pytest

from salaryboard.core.config import get_settings
from salaryboard.core.security import get_security_provider
from salaryboard.models import SalaryEntry

_BASE_TIME = datetime(2025, 6, 1, tzinfo=timezone.utc)


@pytest.fixture()
def make_entry() -> Callable[..., SalaryEntry]:
    """Return a factory building entries with sensible defaults."""

    ids = count(1)

    def _factory(**overrides: object) -> SalaryEntry:
        index = next(ids)
        values: dict[str, object] = {
            "id": f"e{index}",
            "role": "Software Engineer",
            "company": "Acme",
            "country": "United States",
            "city": "Austin",
            "experience_level": "Mid",
            "years_of_experience": 3,
            "base_salary": 100_000,
            "bonuses": 0,
            "stock_options": 0,
            "currency": "USD",
            "remote_policy": "Remote",
            "employment_type": "Full-time",
            "tech_stack": ("Python",),
            "submitted_at": _BASE_TIME + timedelta(days=index),
        }
        values.update(overrides)
        return SalaryEntry.create(**values)  # type: ignore[arg-type]

    return _factory


@pytest.fixture(autouse=True)
def _reset_cached_settings():
    """Drop cached settings so ``monkeypatch``-ed environments take effect."""

    get_settings.cache_clear()
    get_security_provider.cache_clear()
    yield
    get_settings.cache_clear()
    get_security_provider.cache_clear()
