# -*- coding: utf-8 -*-

from __future__ import annotations

import random
import unittest
from datetime import date

from wellness.client.session import AuthSession
from wellness.entries.models import Entry, Mood
from wellness.insights.advice import POSITIVE_TIPS
from wellness.insights.filtering import DateRange
from wellness.insights.state import (
    AppState,
    begin_edit,
    cleared_filter,
    derive_view,
    end_edit,
    initial_state,
    signed_out,
    with_entries,
    with_error,
    with_filter,
)


def _entry(entry_id: str, day: str, steps: int = 8000, sleep: float = 8.0, mood: str = "Happy") -> Entry:
    return Entry(
        id=entry_id,
        owner_id="user-1",
        date=day,
        steps=steps,
        sleep=sleep,
        mood=mood,
        created_at="2024-01-01T00:00:00Z",
    )


class TestAppState(unittest.TestCase):
    def setUp(self) -> None:
        self.entries = [
            _entry("a", "2024-01-09", steps=10000),
            _entry("b", "2024-01-05", steps=6000),
            _entry("c", "2023-12-20", steps=2000, sleep=4.0, mood="Tired"),
        ]

    def test_with_entries_applies_current_filter(self) -> None:
        state = initial_state(DateRange(date(2024, 1, 1), date(2024, 1, 10)))
        new_state = with_entries(state, self.entries)

        self.assertEqual(state.entries, ())
        self.assertEqual(len(new_state.entries), 3)
        self.assertEqual([e.id for e in new_state.filtered_entries], ["a", "b"])

    def test_with_entries_clears_error(self) -> None:
        state = with_error(AppState(), "Failed to load entries")
        self.assertIsNone(with_entries(state, self.entries).last_error)

    def test_filter_and_clear(self) -> None:
        state = with_entries(AppState(), self.entries)
        self.assertEqual(len(state.filtered_entries), 3)

        narrowed = with_filter(state, DateRange(end=date(2023, 12, 31)))
        self.assertEqual([e.id for e in narrowed.filtered_entries], ["c"])

        cleared = cleared_filter(narrowed)
        self.assertIsNone(cleared.date_range)
        self.assertEqual(cleared.filtered_entries, state.filtered_entries)

    def test_edit_cycle(self) -> None:
        state = with_entries(AppState(), self.entries)
        self.assertFalse(state.is_editing)

        editing = begin_edit(state, "b")
        self.assertTrue(editing.is_editing)
        self.assertEqual(editing.find("b").steps, 6000)

        self.assertIs(begin_edit(state, "missing"), state)
        self.assertFalse(end_edit(editing).is_editing)

    def test_signed_out_drops_data_keeps_window(self) -> None:
        window = DateRange(date(2024, 1, 1), None)
        state = begin_edit(with_entries(initial_state(window), self.entries), "a")
        out = signed_out(state)
        self.assertEqual(out.entries, ())
        self.assertEqual(out.filtered_entries, ())
        self.assertIsNone(out.editing_id)
        self.assertEqual(out.date_range, window)

    def test_derive_view(self) -> None:
        state = with_entries(initial_state(DateRange(start=date(2024, 1, 1))), self.entries)
        view = derive_view(state, random.Random(0))
        self.assertEqual(view.summary.total_steps, 16000)
        self.assertEqual(view.summary.most_common_mood, Mood.happy)
        self.assertEqual(view.mood_counts[Mood.happy], 2)
        self.assertIn(view.advice, POSITIVE_TIPS)

        empty = derive_view(AppState())
        self.assertEqual(empty.summary.entry_count, 0)
        self.assertIsNone(empty.summary.most_common_mood)


class TestAuthSession(unittest.TestCase):
    def test_notifies_on_sign_in_and_out(self) -> None:
        session = AuthSession()
        seen = []
        unsubscribe = session.subscribe(seen.append)

        session.sign_in("token-1", {"id": "u1", "email": "a@example.com"})
        self.assertTrue(session.is_authenticated)
        session.sign_out()
        session.sign_out()  # already signed out, no second event

        self.assertEqual(seen, [{"id": "u1", "email": "a@example.com"}, None])
        self.assertIsNone(session.token)

        unsubscribe()
        session.sign_in("token-2", {"id": "u1"})
        self.assertEqual(len(seen), 2)


if __name__ == "__main__":
    unittest.main()
