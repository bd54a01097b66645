"""Service that assembles listing, statistics and voting payloads."""
from __future__ import annotations

from threading import RLock
from typing import Sequence

from salaryboard.core.config import AppSettings
from salaryboard.core.formatting import format_currency
from salaryboard.core.logger import get_logger, log_context
from salaryboard.data.store import SalaryDataSource
from salaryboard.models import DEFAULT_REFERENCE_DATA, ReferenceData, SalaryEntry, VoteState
from salaryboard.schemas.salaries import (
    CountryGroupView,
    LevelGroupView,
    PolicyGroupView,
    RoleGroupView,
    SalaryEntryView,
    SalaryPage,
    StatsDashboard,
    StatsSummary,
    VoteResult,
)

from .filtering import FilterCriteria, SortKey, filter_entries, sort_entries
from .grouping import build_breakdown
from .statistics import compute_statistics
from .voting import VoteLedger, cast_vote, is_approved

LOGGER = get_logger(__name__)


class SalariesService:
    """Glue between the data source, the pure engine functions and the API schemas."""

    def __init__(
        self,
        source: SalaryDataSource,
        *,
        settings: AppSettings | None = None,
        reference: ReferenceData = DEFAULT_REFERENCE_DATA,
        ledger: VoteLedger | None = None,
    ) -> None:
        self._source = source
        self._settings = settings or AppSettings()
        self._reference = reference
        self._ledger = ledger or VoteLedger()
        self._vote_lock = RLock()

    @property
    def approval_threshold(self) -> int:
        return self._settings.approval_threshold

    def _format(self, amount: float, code: str, *, compact: bool = False) -> str:
        return format_currency(amount, code, self._reference.currency_symbols, compact=compact)

    def _entry_view(self, entry: SalaryEntry, viewer_vote: VoteState) -> SalaryEntryView:
        return SalaryEntryView(
            id=entry.id,
            role=entry.role,
            company=entry.company,
            country=entry.country,
            city=entry.city,
            experience_level=entry.experience_level.value,
            years_of_experience=entry.years_of_experience,
            base_salary=entry.base_salary,
            bonuses=entry.bonuses,
            stock_options=entry.stock_options,
            total_compensation=entry.total_compensation,
            currency=entry.currency,
            remote_policy=entry.remote_policy.value,
            employment_type=entry.employment_type.value,
            tech_stack=list(entry.tech_stack),
            upvotes=entry.upvotes,
            downvotes=entry.downvotes,
            net_score=entry.net_score,
            approved=is_approved(entry.counters, self.approval_threshold),
            viewer_vote=viewer_vote.value,
            submitted_at=entry.submitted_at,
            display_total=self._format(entry.total_compensation, entry.currency),
            display_base=self._format(entry.base_salary, entry.currency),
        )

    def list_salaries(
        self,
        criteria: FilterCriteria,
        sort: SortKey | str = SortKey.NEWEST,
        *,
        viewer: str | None = None,
    ) -> SalaryPage:
        """Return the filtered, sorted listing annotated with the viewer's votes."""

        sort_key = SortKey.parse(sort)
        entries = self._source.list_entries()
        matched = sort_entries(filter_entries(entries, criteria), sort_key)
        LOGGER.debug(
            "Listing %d of %d salary entries sorted by %s",
            len(matched),
            len(entries),
            sort_key.value,
        )

        votes = self._ledger.states_for_viewer(viewer) if viewer else {}
        return SalaryPage(
            items=[self._entry_view(entry, votes.get(entry.id, VoteState.NONE)) for entry in matched],
            total=len(matched),
            available=len(entries),
            active_filters=criteria.active_filter_count,
            sort=sort_key.value,
        )

    def _summary(self, entries: Sequence[SalaryEntry]) -> StatsSummary:
        report = compute_statistics(entries, default_currency=self._settings.default_currency)
        rounded = report.rounded()
        currency = report.dominant_currency
        display = {
            key: self._format(value, currency)
            for key, value in rounded.items()
            if key not in {"count", "dominant_currency"}
        }
        return StatsSummary(**rounded, display=display)

    def get_stats_dashboard(self, criteria: FilterCriteria) -> StatsDashboard:
        """Return headline statistics and breakdowns for the filtered selection."""

        entries = filter_entries(self._source.list_entries(), criteria)
        summary = self._summary(entries)
        breakdown = build_breakdown(entries, role_limit=self._settings.role_group_limit)

        return StatsDashboard(
            summary=summary,
            by_experience=[
                LevelGroupView(level=group.level.value, count=group.count, avg_total_comp=group.avg_total_comp)
                for group in breakdown.by_experience
            ],
            by_country=[
                CountryGroupView(country=group.country, count=group.count, avg_total_comp=group.avg_total_comp)
                for group in breakdown.by_country
            ],
            by_role=[
                RoleGroupView(
                    role=group.role,
                    count=group.count,
                    avg_total_comp=group.avg_total_comp,
                    label=self._format(group.avg_total_comp, summary.dominant_currency, compact=True),
                )
                for group in breakdown.by_role
            ],
            by_remote_policy=[
                PolicyGroupView(policy=group.policy, count=group.count)
                for group in breakdown.by_remote_policy
            ],
        )

    def vote(self, entry_id: str, direction: str, *, viewer: str | None) -> VoteResult:
        """Cast ``direction`` on ``entry_id`` for ``viewer`` (``None`` when anonymous)."""

        with self._vote_lock, log_context.scoped(entry_id=entry_id, viewer=viewer):
            entry = self._source.get_entry(entry_id)
            current = self._ledger.state_for(viewer, entry_id) if viewer else VoteState.NONE
            outcome = cast_vote(
                entry_id,
                direction,
                current,
                entry.counters,
                is_authenticated=viewer is not None,
            )
            if viewer is not None:
                entry = self._source.apply_votes(entry_id, outcome.counters)
                self._ledger.record(viewer, entry_id, outcome.state)
                LOGGER.info("Recorded %s vote", outcome.state.value)

        return VoteResult(
            id=entry.id,
            upvotes=entry.upvotes,
            downvotes=entry.downvotes,
            net_score=entry.net_score,
            approved=is_approved(entry.counters, self.approval_threshold),
            state=outcome.state.value,
        )


__all__ = ["SalariesService"]
