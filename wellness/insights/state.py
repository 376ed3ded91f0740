# -*- coding: utf-8 -*-
"""Dashboard state and the pure functions that move it forward.

``AppState`` is never mutated. Each helper returns a new snapshot with the
filtered subset recomputed, so derived views can be tested without a UI.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional, Sequence, Tuple

from ..entries.models import Entry, Mood
from .advice import ChoiceSource, advise
from .filtering import DateRange, filter_entries
from .summary import Summary, mood_counts, summarize


@dataclass(frozen=True)
class AppState:
    entries: Tuple[Entry, ...] = ()
    filtered_entries: Tuple[Entry, ...] = ()
    date_range: Optional[DateRange] = None
    editing_id: Optional[str] = None
    last_error: Optional[str] = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def find(self, entry_id: str) -> Optional[Entry]:
        return next((e for e in self.entries if e.id == entry_id), None)


@dataclass(frozen=True)
class DashboardView:
    summary: Summary
    mood_counts: Dict[Mood, int]
    advice: str


def initial_state(date_range: Optional[DateRange] = None) -> AppState:
    return AppState(date_range=date_range)


def with_entries(state: AppState, entries: Sequence[Entry]) -> AppState:
    """Replace the snapshot wholesale after a successful fetch."""
    snapshot = tuple(entries)
    return replace(
        state,
        entries=snapshot,
        filtered_entries=tuple(filter_entries(snapshot, state.date_range)),
        last_error=None,
    )


def with_filter(state: AppState, date_range: Optional[DateRange]) -> AppState:
    return replace(
        state,
        date_range=date_range,
        filtered_entries=tuple(filter_entries(state.entries, date_range)),
    )


def cleared_filter(state: AppState) -> AppState:
    return with_filter(state, None)


def begin_edit(state: AppState, entry_id: str) -> AppState:
    if state.find(entry_id) is None:
        return state
    return replace(state, editing_id=entry_id)


def end_edit(state: AppState) -> AppState:
    return replace(state, editing_id=None)


def with_error(state: AppState, message: str) -> AppState:
    return replace(state, last_error=message)


def signed_out(state: AppState) -> AppState:
    """Drop all user data but keep the chosen filter window."""
    return AppState(date_range=state.date_range)


def derive_view(state: AppState, rng: Optional[ChoiceSource] = None) -> DashboardView:
    entries = state.filtered_entries
    return DashboardView(
        summary=summarize(entries),
        mood_counts=mood_counts(entries),
        advice=advise(entries, rng),
    )
