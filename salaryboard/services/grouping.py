"""Dimensional breakdowns of salary entries."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence

from salaryboard.core.formatting import round_half_up
from salaryboard.core.logger import get_logger, timeit
from salaryboard.models import EXPERIENCE_LEVELS, ExperienceLevel, SalaryEntry

from .statistics import average

LOGGER = get_logger(__name__)

DEFAULT_ROLE_LIMIT = 8


@dataclass(frozen=True, slots=True)
class LevelGroup:
    level: ExperienceLevel
    count: int
    avg_total_comp: int


@dataclass(frozen=True, slots=True)
class CountryGroup:
    country: str
    count: int
    avg_total_comp: int


@dataclass(frozen=True, slots=True)
class RoleGroup:
    role: str
    count: int
    avg_total_comp: int


@dataclass(frozen=True, slots=True)
class PolicyGroup:
    policy: str
    count: int


@dataclass(frozen=True)
class Breakdown:
    """All dimensional groupings for one filtered selection."""

    by_experience: list[LevelGroup] = field(default_factory=list)
    by_country: list[CountryGroup] = field(default_factory=list)
    by_role: list[RoleGroup] = field(default_factory=list)
    by_remote_policy: list[PolicyGroup] = field(default_factory=list)


def _partition(
    entries: Sequence[SalaryEntry], key: Callable[[SalaryEntry], str]
) -> dict[str, list[SalaryEntry]]:
    grouped: dict[str, list[SalaryEntry]] = {}
    for entry in entries:
        grouped.setdefault(key(entry), []).append(entry)
    return grouped


def _avg_total(entries: Sequence[SalaryEntry]) -> int:
    return round_half_up(average([entry.total_compensation for entry in entries]))


def group_by_experience_level(entries: Sequence[SalaryEntry]) -> list[LevelGroup]:
    """Per-level count and average, in the fixed level order, skipping empty levels."""

    grouped = _partition(entries, lambda entry: entry.experience_level)
    return [
        LevelGroup(level=level, count=len(grouped[level]), avg_total_comp=_avg_total(grouped[level]))
        for level in EXPERIENCE_LEVELS
        if grouped.get(level)
    ]


def group_by_country(entries: Sequence[SalaryEntry]) -> list[CountryGroup]:
    groups = [
        CountryGroup(country=country, count=len(members), avg_total_comp=_avg_total(members))
        for country, members in _partition(entries, lambda entry: entry.country).items()
    ]
    return sorted(groups, key=lambda group: group.count, reverse=True)


def group_by_role(entries: Sequence[SalaryEntry], limit: int = DEFAULT_ROLE_LIMIT) -> list[RoleGroup]:
    """Best-paid roles first, truncated to ``limit`` groups."""

    # Rank on the unrounded mean so near-equal roles keep a precise order.
    ranked = sorted(
        _partition(entries, lambda entry: entry.role).items(),
        key=lambda item: average([entry.total_compensation for entry in item[1]]),
        reverse=True,
    )
    return [
        RoleGroup(role=role, count=len(members), avg_total_comp=_avg_total(members))
        for role, members in ranked[:limit]
    ]


def group_by_remote_policy(entries: Sequence[SalaryEntry]) -> list[PolicyGroup]:
    return [
        PolicyGroup(policy=str(policy), count=len(members))
        for policy, members in _partition(entries, lambda entry: entry.remote_policy).items()
    ]


def build_breakdown(entries: Sequence[SalaryEntry], *, role_limit: int = DEFAULT_ROLE_LIMIT) -> Breakdown:
    with timeit("Salary breakdown", logger=LOGGER, total=len(entries)):
        return Breakdown(
            by_experience=group_by_experience_level(entries),
            by_country=group_by_country(entries),
            by_role=group_by_role(entries, limit=role_limit),
            by_remote_policy=group_by_remote_policy(entries),
        )


__all__ = [
    "Breakdown",
    "CountryGroup",
    "DEFAULT_ROLE_LIMIT",
    "LevelGroup",
    "PolicyGroup",
    "RoleGroup",
    "build_breakdown",
    "group_by_country",
    "group_by_experience_level",
    "group_by_remote_policy",
    "group_by_role",
]
