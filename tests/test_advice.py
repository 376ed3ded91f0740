# -*- coding: utf-8 -*-

from __future__ import annotations

import random
import unittest
from uuid import uuid4

from wellness.entries.models import Entry
from wellness.insights import advice
from wellness.insights.advice import POSITIVE_TIPS, advise


def _entry(steps: int = 8000, sleep: float = 7.5, mood: str = "Happy", day: str = "2024-01-01") -> Entry:
    return Entry(
        id=str(uuid4()),
        owner_id="user-1",
        date=day,
        steps=steps,
        sleep=sleep,
        mood=mood,
        created_at="2024-01-01T00:00:00Z",
    )


class _LastChoice:
    def __init__(self) -> None:
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        return seq[-1]


class TestAdvise(unittest.TestCase):
    def test_empty(self) -> None:
        self.assertEqual(advise([]), advice.EMPTY_MESSAGE)

    def test_low_sleep_takes_precedence(self) -> None:
        entries = [_entry(steps=3000, sleep=5, mood="Tired", day="2024-01-01")]
        self.assertEqual(advise(entries), advice.LOW_SLEEP_MESSAGE)

        stressed = [_entry(steps=100, sleep=5, mood="Stressed")]
        self.assertEqual(advise(stressed), advice.LOW_SLEEP_MESSAGE)

    def test_six_hours_is_not_low_sleep(self) -> None:
        self.assertEqual(advise([_entry(steps=4999, sleep=6.0)]), advice.LOW_ACTIVITY_MESSAGE)

    def test_low_activity_uses_average_steps(self) -> None:
        entries = [_entry(steps=9000), _entry(steps=0)]
        self.assertEqual(advise(entries), advice.LOW_ACTIVITY_MESSAGE)
        self.assertNotEqual(advise([_entry(steps=5000)], _LastChoice()), advice.LOW_ACTIVITY_MESSAGE)

    def test_stress(self) -> None:
        entries = [_entry(mood="Stressed"), _entry(mood="Stressed"), _entry(mood="Happy")]
        self.assertEqual(advise(entries), advice.STRESS_MESSAGE)

    def test_stress_tie_resolves_to_earlier_mood(self) -> None:
        rng = _LastChoice()
        entries = [_entry(mood="Stressed"), _entry(mood="Happy")]
        self.assertEqual(advise(entries, rng), POSITIVE_TIPS[-1])

    def test_positive_pool_with_seeded_rng(self) -> None:
        entries = [_entry(steps=10000, sleep=8, mood="Happy")]
        self.assertGreaterEqual(len(POSITIVE_TIPS), 5)
        for seed in range(10):
            self.assertIn(advise(entries, random.Random(seed)), POSITIVE_TIPS)
        self.assertEqual(advise(entries, random.Random(3)), advise(entries, random.Random(3)))

    def test_deterministic_rules_do_not_draw(self) -> None:
        rng = _LastChoice()
        advise([], rng)
        advise([_entry(sleep=4)], rng)
        advise([_entry(steps=10)], rng)
        advise([_entry(mood="Stressed")], rng)
        self.assertEqual(rng.calls, 0)


if __name__ == "__main__":
    unittest.main()
