"""Reference tables describing the closed vocabularies of salary entries.

The engine never reads module level lists directly; callers pass a
:class:`ReferenceData` instance so tests can swap in small, isolated tables.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from salaryboard.core.errors import InvalidArgumentError


class _ChoiceEnum(str, Enum):
    """String enum whose members are looked up by their display value."""

    @classmethod
    def parse(cls, value: "str | _ChoiceEnum"):
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        allowed = ", ".join(member.value for member in cls)
        raise InvalidArgumentError(f"Invalid {cls.__name__} {value!r}; expected one of: {allowed}")

    def __str__(self) -> str:
        return self.value


class ExperienceLevel(_ChoiceEnum):
    JUNIOR = "Junior"
    MID = "Mid"
    SENIOR = "Senior"
    LEAD = "Lead"
    PRINCIPAL = "Principal"
    STAFF = "Staff"


# Display order used by the experience level breakdown.
EXPERIENCE_LEVELS: tuple[ExperienceLevel, ...] = tuple(ExperienceLevel)


class RemotePolicy(_ChoiceEnum):
    REMOTE = "Remote"
    HYBRID = "Hybrid"
    ON_SITE = "On-site"


class EmploymentType(_ChoiceEnum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    FREELANCE = "Freelance"


@dataclass(frozen=True, slots=True)
class Currency:
    """A currency code and the symbol used when rendering amounts."""

    code: str
    symbol: str


@dataclass(frozen=True)
class ReferenceData:
    """Closed vocabularies used to generate, filter and label salary entries."""

    countries: tuple[str, ...]
    roles: tuple[str, ...]
    companies: tuple[str, ...]
    currencies: tuple[Currency, ...]
    tech_options: tuple[str, ...] = ()
    experience_levels: tuple[ExperienceLevel, ...] = EXPERIENCE_LEVELS
    _symbols: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        symbols = MappingProxyType({currency.code: currency.symbol for currency in self.currencies})
        object.__setattr__(self, "_symbols", symbols)

    @property
    def currency_symbols(self) -> Mapping[str, str]:
        """Read-only ``code -> symbol`` lookup."""

        return self._symbols

    @property
    def currency_codes(self) -> tuple[str, ...]:
        return tuple(currency.code for currency in self.currencies)


DEFAULT_CURRENCIES: tuple[Currency, ...] = (
    Currency("USD", "$"),
    Currency("EUR", "€"),
    Currency("GBP", "£"),
    Currency("INR", "₹"),
    Currency("LKR", "Rs"),
    Currency("CAD", "C$"),
    Currency("AUD", "A$"),
    Currency("SGD", "S$"),
    Currency("JPY", "¥"),
    Currency("CHF", "CHF"),
)

DEFAULT_REFERENCE_DATA = ReferenceData(
    countries=(
        "United States",
        "United Kingdom",
        "Germany",
        "Netherlands",
        "India",
        "Sri Lanka",
        "Canada",
        "Australia",
        "Singapore",
        "Japan",
        "Switzerland",
    ),
    roles=(
        "Software Engineer",
        "Frontend Engineer",
        "Backend Engineer",
        "Full Stack Engineer",
        "DevOps Engineer",
        "Data Scientist",
        "Data Engineer",
        "Machine Learning Engineer",
        "Mobile Developer",
        "QA Engineer",
        "Engineering Manager",
        "Product Manager",
    ),
    companies=(
        "Google",
        "Microsoft",
        "Amazon",
        "Meta",
        "Apple",
        "Netflix",
        "Stripe",
        "Shopify",
        "Atlassian",
        "WSO2",
        "Virtusa",
        "IFS",
        "Booking.com",
        "Adyen",
    ),
    currencies=DEFAULT_CURRENCIES,
    tech_options=(
        "JavaScript", "TypeScript", "Python", "Java", "Go", "Rust", "C++", "C#",
        "Ruby", "PHP", "Swift", "Kotlin", "Scala", "React", "Vue", "Angular",
        "Node.js", "Django", "Spring Boot", "AWS", "Azure", "GCP", "Docker",
        "Kubernetes", "PostgreSQL", "MongoDB", "Redis", "GraphQL",
    ),
)
