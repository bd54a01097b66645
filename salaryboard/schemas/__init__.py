"""Pydantic schemas exposed by the API."""

from .salaries import (
    CountryGroupView,
    LevelGroupView,
    PolicyGroupView,
    RoleGroupView,
    SalaryEntryView,
    SalaryPage,
    StatsDashboard,
    StatsSummary,
    VoteRequest,
    VoteResult,
)

__all__ = [
    "CountryGroupView",
    "LevelGroupView",
    "PolicyGroupView",
    "RoleGroupView",
    "SalaryEntryView",
    "SalaryPage",
    "StatsDashboard",
    "StatsSummary",
    "VoteRequest",
    "VoteResult",
]
