"""Descriptive statistics over salary entries."""
from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from salaryboard.core.errors import InvalidArgumentError
from salaryboard.core.formatting import round_half_up
from salaryboard.core.logger import get_logger, timeit
from salaryboard.models import SalaryEntry

LOGGER = get_logger(__name__)

DEFAULT_CURRENCY = "USD"


def average(values: Sequence[float]) -> float:
    """Arithmetic mean; ``0.0`` for an empty sequence."""

    if not values:
        return 0.0
    return sum(values) / len(values)


def percentile(values: Sequence[float], p: float) -> float:
    """Percentile with linear interpolation between adjacent order statistics.

    ``rank = p / 100 * (n - 1)``; a fractional rank interpolates between the
    values at ``floor(rank)`` and ``ceil(rank)``.
    """

    if not 0 <= p <= 100:
        raise InvalidArgumentError(f"Percentile must be within [0, 100], got {p}")
    if not values:
        return 0.0

    ordered = sorted(values)
    rank = (p / 100) * (len(ordered) - 1)
    lower = math.floor(rank)
    upper = math.ceil(rank)
    if lower == upper:
        return ordered[lower]
    return ordered[lower] + (ordered[upper] - ordered[lower]) * (rank - lower)


def median(values: Sequence[float]) -> float:
    return percentile(values, 50)


def dominant_currency(entries: Sequence[SalaryEntry], default: str = DEFAULT_CURRENCY) -> str:
    """Most frequent currency code; ties go to the code seen first."""

    if not entries:
        return default
    # Counter keeps first-insertion order and max() returns the first maximum.
    counts = Counter(entry.currency for entry in entries)
    return max(counts, key=counts.__getitem__)


@dataclass(frozen=True, slots=True)
class StatsReport:
    """Aggregate statistics for a set of salary entries, at full precision."""

    count: int
    avg_base: float
    median_base: float
    avg_total: float
    median_total: float
    p25: float
    p75: float
    p90: float
    dominant_currency: str

    def rounded(self) -> dict[str, int | str]:
        """Display values rounded to the nearest integer."""

        return {
            "count": self.count,
            "avg_base": round_half_up(self.avg_base),
            "median_base": round_half_up(self.median_base),
            "avg_total": round_half_up(self.avg_total),
            "median_total": round_half_up(self.median_total),
            "p25": round_half_up(self.p25),
            "p75": round_half_up(self.p75),
            "p90": round_half_up(self.p90),
            "dominant_currency": self.dominant_currency,
        }


def compute_statistics(
    entries: Sequence[SalaryEntry],
    *,
    default_currency: str = DEFAULT_CURRENCY,
) -> StatsReport:
    """Return count, mean, median and percentiles for ``entries``.

    An empty input yields a zero-valued report labelled with ``default_currency``.
    """

    if not entries:
        LOGGER.debug("Computing statistics over an empty selection")
        return StatsReport(
            count=0,
            avg_base=0.0,
            median_base=0.0,
            avg_total=0.0,
            median_total=0.0,
            p25=0.0,
            p75=0.0,
            p90=0.0,
            dominant_currency=default_currency,
        )

    with timeit("Salary statistics", logger=LOGGER, total=len(entries)):
        bases = [entry.base_salary for entry in entries]
        totals = [entry.total_compensation for entry in entries]
        return StatsReport(
            count=len(entries),
            avg_base=average(bases),
            median_base=median(bases),
            avg_total=average(totals),
            median_total=median(totals),
            p25=percentile(totals, 25),
            p75=percentile(totals, 75),
            p90=percentile(totals, 90),
            dominant_currency=dominant_currency(entries, default_currency),
        )


__all__ = [
    "DEFAULT_CURRENCY",
    "StatsReport",
    "average",
    "compute_statistics",
    "dominant_currency",
    "median",
    "percentile",
]
