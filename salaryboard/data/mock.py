"""Deterministic synthetic salary entries for demos and tests."""
from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

from salaryboard.core.logger import get_logger, timeit
from salaryboard.models import (
    DEFAULT_REFERENCE_DATA,
    EmploymentType,
    ExperienceLevel,
    ReferenceData,
    RemotePolicy,
    SalaryEntry,
)

LOGGER = get_logger(__name__)

# (min years, max years, base salary in USD) per level.
LEVEL_BANDS: dict[ExperienceLevel, tuple[int, int, int]] = {
    ExperienceLevel.JUNIOR: (0, 2, 60_000),
    ExperienceLevel.MID: (2, 5, 95_000),
    ExperienceLevel.SENIOR: (5, 9, 140_000),
    ExperienceLevel.LEAD: (7, 12, 170_000),
    ExperienceLevel.PRINCIPAL: (10, 18, 210_000),
    ExperienceLevel.STAFF: (9, 16, 230_000),
}

# Country -> (currency, cost-of-market multiplier applied to the USD band, cities).
COUNTRY_MARKETS: dict[str, tuple[str, float, tuple[str, ...]]] = {
    "United States": ("USD", 1.0, ("San Francisco", "New York", "Seattle", "Austin")),
    "United Kingdom": ("GBP", 0.55, ("London", "Manchester", "Edinburgh")),
    "Germany": ("EUR", 0.6, ("Berlin", "Munich", "Hamburg")),
    "Netherlands": ("EUR", 0.6, ("Amsterdam", "Rotterdam", "Utrecht")),
    "India": ("INR", 25.0, ("Bengaluru", "Hyderabad", "Pune")),
    "Sri Lanka": ("LKR", 45.0, ("Colombo", "Kandy", "Galle")),
    "Canada": ("CAD", 0.95, ("Toronto", "Vancouver", "Montreal")),
    "Australia": ("AUD", 1.1, ("Sydney", "Melbourne", "Brisbane")),
    "Singapore": ("SGD", 1.0, ("Singapore",)),
    "Japan": ("JPY", 100.0, ("Tokyo", "Osaka")),
    "Switzerland": ("CHF", 1.05, ("Zurich", "Geneva", "Basel")),
}

_EPOCH = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _round_to(value: float, step: int) -> int:
    return int(round(value / step) * step)


def generate_mock_salaries(
    count: int = 60,
    *,
    seed: int = 42,
    reference: ReferenceData = DEFAULT_REFERENCE_DATA,
) -> list[SalaryEntry]:
    """Generate ``count`` plausible entries drawn from ``reference``.

    The same ``seed`` always produces the same entries. Countries missing from
    the built-in market table fall back to USD at the US scale.
    """

    rng = random.Random(seed)
    entries: list[SalaryEntry] = []

    with timeit("Mock salary generation", logger=LOGGER, total=count):
        for index in range(count):
            level = rng.choice(reference.experience_levels)
            min_years, max_years, band = LEVEL_BANDS[level]
            country = rng.choice(reference.countries)
            currency, multiplier, cities = COUNTRY_MARKETS.get(country, ("USD", 1.0, ()))
            if currency not in reference.currency_codes:
                currency, multiplier = "USD", 1.0

            base_salary = _round_to(band * multiplier * rng.uniform(0.8, 1.25), 100)
            bonuses = _round_to(base_salary * rng.choice((0, 0, 0.05, 0.1, 0.15)), 100)
            stock_options = (
                _round_to(base_salary * rng.uniform(0.1, 0.5), 100) if rng.random() < 0.35 else 0
            )

            tech_count = rng.randint(2, 5) if reference.tech_options else 0
            tech_stack = rng.sample(list(reference.tech_options), k=min(tech_count, len(reference.tech_options)))

            entries.append(
                SalaryEntry.create(
                    id=f"sal-{index + 1:04d}",
                    role=rng.choice(reference.roles),
                    company=rng.choice(reference.companies) if rng.random() < 0.85 else None,
                    country=country,
                    city=rng.choice(cities) if cities else None,
                    experience_level=level,
                    years_of_experience=rng.randint(min_years, max_years),
                    base_salary=base_salary,
                    bonuses=bonuses,
                    stock_options=stock_options,
                    currency=currency,
                    remote_policy=rng.choice(tuple(RemotePolicy)),
                    employment_type=rng.choices(
                        tuple(EmploymentType), weights=(85, 3, 9, 3), k=1
                    )[0],
                    tech_stack=tech_stack,
                    upvotes=rng.randint(0, 40),
                    downvotes=rng.randint(0, 8),
                    submitted_at=_EPOCH + timedelta(hours=rng.randint(0, 24 * 365)),
                )
            )

    LOGGER.debug("Generated %d mock salary entries (seed=%d)", len(entries), seed)
    return entries


__all__ = ["COUNTRY_MARKETS", "LEVEL_BANDS", "generate_mock_salaries"]
