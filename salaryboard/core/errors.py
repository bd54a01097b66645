"""Exception hierarchy shared by the engine and the API layer."""
from __future__ import annotations


class SalaryboardError(Exception):
    """Base class for errors raised by the salary insights engine."""


class InvalidArgumentError(SalaryboardError, ValueError):
    """Raised when a caller passes a value outside a closed set (sort key, vote direction)."""


class EntryNotFoundError(SalaryboardError, LookupError):
    """Raised when a salary entry id is unknown to the data source."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"Salary entry {entry_id} not found")
        self.entry_id = entry_id


class VoteIntegrityError(SalaryboardError):
    """Raised when applying a vote delta would drive a counter negative."""


__all__ = [
    "SalaryboardError",
    "InvalidArgumentError",
    "EntryNotFoundError",
    "VoteIntegrityError",
]
