"""Per-viewer vote state machine and the trust signal derived from it.

Each (viewer, entry) pair is in one of three states: ``none``, ``up`` or
``down``. Casting a vote in direction ``d``:

* ``none -> d`` adds one vote on ``d``;
* ``d -> none`` withdraws the vote on ``d``;
* ``other -> d`` moves the vote from ``other`` to ``d`` in one step.

Counters are only decremented from the state that incremented them, so no
valid sequence of casts can drive a counter below zero.
"""
from __future__ import annotations

from dataclasses import dataclass
from threading import RLock

from salaryboard.core.errors import VoteIntegrityError
from salaryboard.core.logger import get_logger
from salaryboard.models import VoteCounters, VoteDirection, VoteState

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class VoteDelta:
    """Change to apply to an entry's counters."""

    upvotes: int = 0
    downvotes: int = 0

    def apply(self, counters: VoteCounters) -> VoteCounters:
        upvotes = counters.upvotes + self.upvotes
        downvotes = counters.downvotes + self.downvotes
        if upvotes < 0 or downvotes < 0:
            raise VoteIntegrityError(
                f"Applying {self} to {counters} would produce a negative counter"
            )
        return VoteCounters(upvotes=upvotes, downvotes=downvotes)


def _unit(direction: VoteDirection, amount: int) -> VoteDelta:
    if direction is VoteDirection.UP:
        return VoteDelta(upvotes=amount)
    return VoteDelta(downvotes=amount)


def transition(state: VoteState, direction: VoteDirection | str) -> tuple[VoteState, VoteDelta]:
    """Pure transition function ``(state, direction) -> (state, counter delta)``."""

    state = VoteState(state)
    direction = VoteDirection.parse(direction)
    target = direction.state

    if state is VoteState.NONE:
        return target, _unit(direction, 1)
    if state is target:
        return VoteState.NONE, _unit(direction, -1)

    withdrawn = _unit(VoteDirection(state.value), -1)
    added = _unit(direction, 1)
    return target, VoteDelta(
        upvotes=withdrawn.upvotes + added.upvotes,
        downvotes=withdrawn.downvotes + added.downvotes,
    )


@dataclass(frozen=True, slots=True)
class VoteOutcome:
    entry_id: str
    state: VoteState
    counters: VoteCounters

    @property
    def net_score(self) -> int:
        return self.counters.net_score


def cast_vote(
    entry_id: str,
    direction: VoteDirection | str,
    current_state: VoteState,
    counters: VoteCounters,
    is_authenticated: bool,
) -> VoteOutcome:
    """Apply one vote action and return the new state and counters.

    Anonymous viewers cannot vote: the state and counters come back unchanged.
    An invalid ``direction`` raises even for anonymous viewers.
    """

    direction = VoteDirection.parse(direction)
    if not is_authenticated:
        LOGGER.debug("Ignoring %s vote on entry %s from anonymous viewer", direction.value, entry_id)
        return VoteOutcome(entry_id=entry_id, state=current_state, counters=counters)

    new_state, delta = transition(current_state, direction)
    updated = delta.apply(counters)
    LOGGER.debug(
        "Vote on entry %s: %s -> %s (%d/%d)",
        entry_id,
        current_state.value,
        new_state.value,
        updated.upvotes,
        updated.downvotes,
    )
    return VoteOutcome(entry_id=entry_id, state=new_state, counters=updated)


def net_score(counters: VoteCounters) -> int:
    return counters.upvotes - counters.downvotes


def is_approved(counters: VoteCounters, threshold: int) -> bool:
    """``True`` once the community net score reaches ``threshold``."""

    return net_score(counters) >= threshold


class VoteLedger:
    """In-memory record of the vote each viewer holds on each entry."""

    def __init__(self) -> None:
        self._states: dict[tuple[str, str], VoteState] = {}
        self._lock = RLock()

    def state_for(self, viewer: str, entry_id: str) -> VoteState:
        with self._lock:
            return self._states.get((viewer, entry_id), VoteState.NONE)

    def record(self, viewer: str, entry_id: str, state: VoteState) -> None:
        with self._lock:
            if state is VoteState.NONE:
                self._states.pop((viewer, entry_id), None)
            else:
                self._states[(viewer, entry_id)] = state

    def states_for_viewer(self, viewer: str) -> dict[str, VoteState]:
        with self._lock:
            return {
                entry_id: state
                for (owner, entry_id), state in self._states.items()
                if owner == viewer
            }


__all__ = [
    "VoteDelta",
    "VoteLedger",
    "VoteOutcome",
    "cast_vote",
    "is_approved",
    "net_score",
    "transition",
]
