"""Tests for the filter and sort pipeline."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from salaryboard.core.errors import InvalidArgumentError
from salaryboard.services.filtering import FilterCriteria, SortKey, filter_entries, sort_entries


def test_empty_criteria_keeps_every_entry_in_order(make_entry) -> None:
    entries = [make_entry(), make_entry(), make_entry()]

    assert filter_entries(entries, FilterCriteria()) == entries


def test_country_filter_is_exact_and_never_grows(make_entry) -> None:
    entries = [
        make_entry(country="Sri Lanka"),
        make_entry(country="India"),
        make_entry(country="Sri Lanka"),
        make_entry(country="sri lanka"),
    ]

    result = filter_entries(entries, FilterCriteria(country="Sri Lanka"))

    assert len(result) <= len(entries)
    assert [entry.country for entry in result] == ["Sri Lanka", "Sri Lanka"]
    assert result == [entries[0], entries[2]]


def test_search_is_case_insensitive_across_fields(make_entry) -> None:
    by_role = make_entry(role="Data Scientist", tech_stack=())
    by_company = make_entry(company="Stripe")
    by_city = make_entry(city="Colombo")
    by_tech = make_entry(tech_stack=("Go", "Kubernetes"))
    unrelated = make_entry(role="QA Engineer", company=None, city=None, tech_stack=("Java",))
    entries = [by_role, by_company, by_city, by_tech, unrelated]

    assert filter_entries(entries, FilterCriteria(search_text="SCIENT")) == [by_role]
    assert filter_entries(entries, FilterCriteria(search_text="stri")) == [by_company]
    assert filter_entries(entries, FilterCriteria(search_text="colombo")) == [by_city]
    assert filter_entries(entries, FilterCriteria(search_text="kube")) == [by_tech]


def test_search_tolerates_missing_company_and_city(make_entry) -> None:
    entry = make_entry(company=None, city=None, country="Germany")

    assert filter_entries([entry], FilterCriteria(search_text="germ")) == [entry]
    assert filter_entries([entry], FilterCriteria(search_text="acme")) == []


def test_dimension_filters_combine_with_and(make_entry) -> None:
    match = make_entry(role="Backend Engineer", company="WSO2", experience_level="Senior")
    wrong_level = make_entry(role="Backend Engineer", company="WSO2", experience_level="Lead")
    wrong_company = make_entry(role="Backend Engineer", company="IFS", experience_level="Senior")

    criteria = FilterCriteria(role="Backend Engineer", company="WSO2", experience_level="Senior")

    assert filter_entries([match, wrong_level, wrong_company], criteria) == [match]


def test_search_and_dimension_filters_combine(make_entry) -> None:
    python_us = make_entry(tech_stack=("Python",), country="United States")
    python_de = make_entry(tech_stack=("Python",), country="Germany")

    criteria = FilterCriteria(search_text="python", country="Germany")

    assert filter_entries([python_us, python_de], criteria) == [python_de]


def test_filter_does_not_mutate_input(make_entry) -> None:
    entries = [make_entry(country="India"), make_entry(country="Japan")]
    snapshot = list(entries)

    filter_entries(entries, FilterCriteria(country="Japan"))

    assert entries == snapshot


def test_criteria_from_params_treats_blank_as_unrestricted() -> None:
    criteria = FilterCriteria.from_params(
        {"search": "  react ", "country": "", "role": "  ", "company": "Meta", "experience_level": None}
    )

    assert criteria == FilterCriteria(search_text="react", company="Meta")
    assert criteria.active_filter_count == 1


def test_sort_highest_puts_maximum_first_and_is_stable(make_entry) -> None:
    first_tie = make_entry(base_salary=120_000)
    top = make_entry(base_salary=150_000, bonuses=10_000)
    second_tie = make_entry(base_salary=100_000, bonuses=20_000)
    low = make_entry(base_salary=50_000)
    entries = [first_tie, top, second_tie, low]

    result = sort_entries(entries, SortKey.HIGHEST)

    assert result[0].total_compensation == max(entry.total_compensation for entry in entries)
    assert result == [top, first_tie, second_tie, low]
    assert entries == [first_tie, top, second_tie, low]


def test_sort_newest_orders_by_submission_time(make_entry) -> None:
    old = make_entry(submitted_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    new = make_entry(submitted_at=datetime(2025, 1, 1, tzinfo=timezone.utc))
    middle = make_entry(submitted_at=datetime(2024, 6, 1, tzinfo=timezone.utc))

    assert sort_entries([old, new, middle], "newest") == [new, middle, old]


def test_sort_most_voted_uses_net_score(make_entry) -> None:
    popular = make_entry(upvotes=10, downvotes=1)
    many_votes_low_net = make_entry(upvotes=30, downvotes=28)
    tie_a = make_entry(upvotes=3, downvotes=0)
    tie_b = make_entry(upvotes=5, downvotes=2)

    result = sort_entries([many_votes_low_net, tie_a, popular, tie_b], SortKey.MOST_VOTED)

    assert result == [popular, tie_a, tie_b, many_votes_low_net]


@pytest.mark.parametrize("value", ["oldest", "", "Highest", None])
def test_invalid_sort_key_fails_fast(make_entry, value) -> None:
    with pytest.raises(InvalidArgumentError):
        sort_entries([make_entry()], value)
