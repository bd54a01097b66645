"""Response models for the salary listing, statistics and voting endpoints."""
from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_serializer


class SalaryEntryView(BaseModel):
    """A salary entry as shown in the listing, with display strings."""

    id: str
    role: str
    company: str | None = None
    country: str
    city: str | None = None
    experience_level: str
    years_of_experience: int
    base_salary: float
    bonuses: float
    stock_options: float
    total_compensation: float
    currency: str
    remote_policy: str
    employment_type: str
    tech_stack: list[str]
    upvotes: int
    downvotes: int
    net_score: int
    approved: bool
    viewer_vote: Literal["none", "up", "down"] = "none"
    submitted_at: datetime
    display_total: str
    display_base: str

    @field_serializer("submitted_at")
    def _serialize_submitted_at(self, value: datetime) -> str:
        return value.isoformat()


class SalaryPage(BaseModel):
    """Filtered and sorted listing."""

    items: list[SalaryEntryView]
    total: int
    available: int
    active_filters: int = 0
    sort: str


class StatsSummary(BaseModel):
    """Headline statistics rounded for display."""

    count: int = 0
    avg_base: int = 0
    median_base: int = 0
    avg_total: int = 0
    median_total: int = 0
    p25: int = 0
    p75: int = 0
    p90: int = 0
    dominant_currency: str
    display: dict[str, str] = Field(default_factory=dict)


class LevelGroupView(BaseModel):
    level: str
    count: int
    avg_total_comp: int


class CountryGroupView(BaseModel):
    country: str
    count: int
    avg_total_comp: int


class RoleGroupView(BaseModel):
    role: str
    count: int
    avg_total_comp: int
    label: str


class PolicyGroupView(BaseModel):
    policy: str
    count: int


class StatsDashboard(BaseModel):
    """Payload for the statistics page."""

    summary: StatsSummary
    by_experience: list[LevelGroupView]
    by_country: list[CountryGroupView]
    by_role: list[RoleGroupView]
    by_remote_policy: list[PolicyGroupView]


class VoteRequest(BaseModel):
    direction: str


class VoteResult(BaseModel):
    """Counters after a vote, plus the viewer's resulting vote state."""

    id: str
    upvotes: int
    downvotes: int
    net_score: int
    approved: bool
    state: Literal["none", "up", "down"]
