"""Read-only salary data source with serialised vote counter updates."""
from __future__ import annotations

from threading import RLock
from typing import Iterable, Protocol

from salaryboard.core.errors import EntryNotFoundError
from salaryboard.core.logger import get_logger
from salaryboard.models import SalaryEntry, VoteCounters

LOGGER = get_logger(__name__)


class SalaryDataSource(Protocol):
    """Collaborator that supplies salary entries to the engine."""

    def list_entries(self) -> list[SalaryEntry]:
        ...

    def get_entry(self, entry_id: str) -> SalaryEntry:
        ...

    def apply_votes(self, entry_id: str, counters: VoteCounters) -> SalaryEntry:
        ...


class InMemorySalaryStore:
    """Keep entries in insertion order; counter updates are serialised by a lock."""

    def __init__(self, entries: Iterable[SalaryEntry] = ()) -> None:
        self._lock = RLock()
        self._entries: dict[str, SalaryEntry] = {}
        for entry in entries:
            if entry.id in self._entries:
                raise ValueError(f"Duplicate salary entry id {entry.id!r}")
            self._entries[entry.id] = entry

    def __len__(self) -> int:
        return len(self._entries)

    def list_entries(self) -> list[SalaryEntry]:
        with self._lock:
            return list(self._entries.values())

    def get_entry(self, entry_id: str) -> SalaryEntry:
        with self._lock:
            try:
                return self._entries[entry_id]
            except KeyError:
                raise EntryNotFoundError(entry_id) from None

    def apply_votes(self, entry_id: str, counters: VoteCounters) -> SalaryEntry:
        with self._lock:
            updated = self.get_entry(entry_id).with_votes(counters)
            self._entries[entry_id] = updated
        LOGGER.debug(
            "Stored vote counters for entry %s (%d/%d)",
            entry_id,
            counters.upvotes,
            counters.downvotes,
        )
        return updated


__all__ = ["InMemorySalaryStore", "SalaryDataSource"]
