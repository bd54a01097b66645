"""Tests for the salaries orchestration service."""
from __future__ import annotations

import pytest

from salaryboard.core.config import AppSettings
from salaryboard.core.errors import EntryNotFoundError, InvalidArgumentError
from salaryboard.data import InMemorySalaryStore
from salaryboard.services import SalariesService
from salaryboard.services.filtering import FilterCriteria, SortKey


@pytest.fixture()
def store(make_entry) -> InMemorySalaryStore:
    return InMemorySalaryStore(
        [
            make_entry(id="a", country="Sri Lanka", currency="LKR", base_salary=3_600_000, upvotes=5, downvotes=2),
            make_entry(id="b", country="Sri Lanka", currency="LKR", base_salary=4_800_000, role="Data Engineer"),
            make_entry(id="c", country="United States", base_salary=180_000, upvotes=12),
        ]
    )


@pytest.fixture()
def service(store) -> SalariesService:
    return SalariesService(store, settings=AppSettings(approval_threshold=10))


def test_list_salaries_filters_sorts_and_formats(service) -> None:
    page = service.list_salaries(FilterCriteria(country="Sri Lanka"), SortKey.HIGHEST)

    assert page.total == 2
    assert page.available == 3
    assert page.active_filters == 1
    assert page.sort == "highest"
    assert [item.id for item in page.items] == ["b", "a"]
    assert page.items[0].display_total == "Rs 4,800,000"


def test_list_salaries_flags_approved_entries(service) -> None:
    page = service.list_salaries(FilterCriteria(), "most-voted")

    assert page.items[0].id == "c"
    assert page.items[0].approved is True
    assert all(not item.approved for item in page.items[1:])


def test_list_salaries_rejects_unknown_sort(service) -> None:
    with pytest.raises(InvalidArgumentError):
        service.list_salaries(FilterCriteria(), "cheapest")


def test_vote_updates_store_and_viewer_state(service, store) -> None:
    first = service.vote("a", "up", viewer="alice")
    assert (first.upvotes, first.downvotes, first.state) == (6, 2, "up")
    assert store.get_entry("a").upvotes == 6

    switched = service.vote("a", "down", viewer="alice")
    assert (switched.upvotes, switched.downvotes, switched.state) == (5, 3, "down")

    page = service.list_salaries(FilterCriteria(), viewer="alice")
    votes = {item.id: item.viewer_vote for item in page.items}
    assert votes == {"a": "down", "b": "none", "c": "none"}


def test_votes_from_different_viewers_accumulate(service) -> None:
    service.vote("b", "up", viewer="alice")
    result = service.vote("b", "up", viewer="bob")

    assert result.upvotes == 2
    assert result.state == "up"


def test_anonymous_vote_leaves_counters_untouched(service, store) -> None:
    result = service.vote("a", "up", viewer=None)

    assert (result.upvotes, result.downvotes, result.state) == (5, 2, "none")
    assert store.get_entry("a").upvotes == 5


def test_vote_on_unknown_entry_raises(service) -> None:
    with pytest.raises(EntryNotFoundError):
        service.vote("missing", "up", viewer="alice")


def test_stats_dashboard_summary_and_breakdown(service) -> None:
    dashboard = service.get_stats_dashboard(FilterCriteria(country="Sri Lanka"))

    assert dashboard.summary.count == 2
    assert dashboard.summary.avg_total == 4_200_000
    assert dashboard.summary.dominant_currency == "LKR"
    assert dashboard.summary.display["avg_total"] == "Rs 4,200,000"
    assert [group.country for group in dashboard.by_country] == ["Sri Lanka"]
    assert [group.role for group in dashboard.by_role] == ["Data Engineer", "Software Engineer"]
    assert dashboard.by_role[0].label == "Rs 4.8M"


def test_stats_dashboard_for_empty_selection(service) -> None:
    dashboard = service.get_stats_dashboard(FilterCriteria(country="Atlantis"))

    assert dashboard.summary.count == 0
    assert dashboard.summary.avg_total == 0
    assert dashboard.summary.dominant_currency == "USD"
    assert dashboard.by_experience == []
