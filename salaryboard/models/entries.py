"""Domain objects for community-submitted compensation records."""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Iterable

from salaryboard.core.errors import InvalidArgumentError, VoteIntegrityError

from .reference import EmploymentType, ExperienceLevel, RemotePolicy


class VoteState(str, Enum):
    """Vote a single viewer currently holds on a single entry."""

    NONE = "none"
    UP = "up"
    DOWN = "down"


class VoteDirection(str, Enum):
    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, value: "str | VoteDirection") -> "VoteDirection":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Invalid vote direction {value!r}; expected 'up' or 'down'"
            ) from exc

    @property
    def state(self) -> VoteState:
        return VoteState(self.value)


@dataclass(frozen=True, slots=True)
class VoteCounters:
    """Upvote and downvote tallies for an entry."""

    upvotes: int = 0
    downvotes: int = 0

    def __post_init__(self) -> None:
        if self.upvotes < 0 or self.downvotes < 0:
            raise VoteIntegrityError(
                f"Vote counters must not be negative (upvotes={self.upvotes}, downvotes={self.downvotes})"
            )

    @property
    def net_score(self) -> int:
        return self.upvotes - self.downvotes


@dataclass(frozen=True, slots=True)
class SalaryEntry:
    """A single compensation record.

    Entries are immutable. The only supported change is a new vote tally,
    produced through :meth:`with_votes` by the vote scoring service.
    """

    id: str
    role: str
    country: str
    experience_level: ExperienceLevel
    years_of_experience: int
    base_salary: float
    bonuses: float
    stock_options: float
    total_compensation: float
    currency: str
    remote_policy: RemotePolicy
    employment_type: EmploymentType
    submitted_at: datetime
    company: str | None = None
    city: str | None = None
    tech_stack: tuple[str, ...] = ()
    upvotes: int = 0
    downvotes: int = 0

    @classmethod
    def create(
        cls,
        *,
        id: str,
        role: str,
        country: str,
        experience_level: ExperienceLevel | str,
        years_of_experience: int,
        base_salary: float,
        currency: str,
        remote_policy: RemotePolicy | str,
        employment_type: EmploymentType | str,
        submitted_at: datetime,
        bonuses: float = 0,
        stock_options: float = 0,
        company: str | None = None,
        city: str | None = None,
        tech_stack: Iterable[str] = (),
        upvotes: int = 0,
        downvotes: int = 0,
    ) -> "SalaryEntry":
        """Build an entry whose total compensation is derived from its parts."""

        return cls(
            id=id,
            role=role,
            country=country,
            experience_level=ExperienceLevel.parse(experience_level),
            years_of_experience=years_of_experience,
            base_salary=base_salary,
            bonuses=bonuses,
            stock_options=stock_options,
            total_compensation=base_salary + bonuses + stock_options,
            currency=currency,
            remote_policy=RemotePolicy.parse(remote_policy),
            employment_type=EmploymentType.parse(employment_type),
            submitted_at=submitted_at,
            company=company,
            city=city,
            tech_stack=tuple(tech_stack),
            upvotes=upvotes,
            downvotes=downvotes,
        )

    @property
    def counters(self) -> VoteCounters:
        return VoteCounters(upvotes=self.upvotes, downvotes=self.downvotes)

    @property
    def net_score(self) -> int:
        return self.upvotes - self.downvotes

    def with_votes(self, counters: VoteCounters) -> "SalaryEntry":
        return replace(self, upvotes=counters.upvotes, downvotes=counters.downvotes)
