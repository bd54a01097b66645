"""Domain models for salary entries and their reference tables."""
from __future__ import annotations

from .entries import SalaryEntry, VoteCounters, VoteDirection, VoteState
from .reference import (
    DEFAULT_CURRENCIES,
    DEFAULT_REFERENCE_DATA,
    EXPERIENCE_LEVELS,
    Currency,
    EmploymentType,
    ExperienceLevel,
    ReferenceData,
    RemotePolicy,
)

__all__ = [
    "SalaryEntry",
    "VoteCounters",
    "VoteDirection",
    "VoteState",
    "Currency",
    "DEFAULT_CURRENCIES",
    "DEFAULT_REFERENCE_DATA",
    "EXPERIENCE_LEVELS",
    "EmploymentType",
    "ExperienceLevel",
    "ReferenceData",
    "RemotePolicy",
]
