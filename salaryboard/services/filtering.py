"""Filter and sort pipeline over salary entries."""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterable, Mapping, Sequence

from salaryboard.core.errors import InvalidArgumentError
from salaryboard.models import SalaryEntry

_DIMENSIONS = ("country", "role", "company", "experience_level")


@dataclass(frozen=True)
class FilterCriteria:
    """Free-text search plus exact-match dimension filters.

    ``None`` on a dimension means "no restriction".
    """

    search_text: str = ""
    country: str | None = None
    role: str | None = None
    company: str | None = None
    experience_level: str | None = None

    @classmethod
    def from_params(cls, params: Mapping[str, str | None]) -> "FilterCriteria":
        """Build criteria from query parameters; blank values mean no restriction."""

        def _clean(key: str) -> str | None:
            value = params.get(key)
            if value is None:
                return None
            stripped = value.strip()
            return stripped or None

        search = params.get("search") or ""
        return cls(
            search_text=search.strip(),
            **{name: _clean(name) for name in _DIMENSIONS},
        )

    @property
    def active_filter_count(self) -> int:
        """Number of dimension filters currently restricting results."""

        return sum(1 for name in _DIMENSIONS if getattr(self, name) is not None)

    def as_dict(self) -> dict[str, str | None]:
        return {field.name: getattr(self, field.name) for field in fields(self)}


def _matches_search(entry: SalaryEntry, needle: str) -> bool:
    haystack: list[str | None] = [entry.role, entry.company, entry.country, entry.city]
    haystack.extend(entry.tech_stack)
    return any(value is not None and needle in value.lower() for value in haystack)


def _matches_dimensions(entry: SalaryEntry, criteria: FilterCriteria) -> bool:
    for name in _DIMENSIONS:
        expected = getattr(criteria, name)
        if expected is None:
            continue
        actual = getattr(entry, name)
        # Enum members compare by their display value.
        if isinstance(actual, Enum):
            actual = actual.value
        if actual != expected:
            return False
    return True


def filter_entries(entries: Iterable[SalaryEntry], criteria: FilterCriteria) -> list[SalaryEntry]:
    """Return the entries that satisfy every constraint in ``criteria``, in input order."""

    needle = criteria.search_text.lower()
    return [
        entry
        for entry in entries
        if (not needle or _matches_search(entry, needle)) and _matches_dimensions(entry, criteria)
    ]


class SortKey(str, Enum):
    NEWEST = "newest"
    HIGHEST = "highest"
    MOST_VOTED = "most-voted"

    @classmethod
    def parse(cls, value: "str | SortKey") -> "SortKey":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            raise InvalidArgumentError(
                f"Invalid sort key {value!r}; expected one of: {allowed}"
            ) from exc


_SORT_FIELDS = {
    SortKey.NEWEST: lambda entry: entry.submitted_at,
    SortKey.HIGHEST: lambda entry: entry.total_compensation,
    SortKey.MOST_VOTED: lambda entry: entry.net_score,
}


def sort_entries(entries: Sequence[SalaryEntry], key: SortKey | str) -> list[SalaryEntry]:
    """Return a new list ordered descending by ``key``.

    ``sorted`` is stable and ``reverse=True`` keeps equal keys in input order.
    """

    sort_key = SortKey.parse(key)
    return sorted(entries, key=_SORT_FIELDS[sort_key], reverse=True)


__all__ = ["FilterCriteria", "SortKey", "filter_entries", "sort_entries"]
