# -*- coding: utf-8 -*-
"""Rule-based wellness tip.

Rules are checked in order and the first match wins:

1. no entries -> getting-started message
2. average sleep below 6 hours -> sleep advisory
3. average steps below 5000 -> activity advisory
4. Stressed is the most common mood -> stress advisory
5. otherwise a positive message picked from ``POSITIVE_TIPS``

Only rule 5 is random, and the random source can be injected.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence, TypeVar

from ..entries.models import Entry, Mood
from .summary import average_sleep, average_steps, most_common_mood

T = TypeVar("T")

MIN_SLEEP_HOURS = 6.0
MIN_DAILY_STEPS = 5000

EMPTY_MESSAGE = "Get started by adding your first entry!"
LOW_SLEEP_MESSAGE = "You seem to be sleeping less. Aim for at least 7-8 hours for better recovery."
LOW_ACTIVITY_MESSAGE = "Your step count is a bit low. Try short walks to reach 5,000+ steps daily."
STRESS_MESSAGE = "Stress is showing up often. Consider meditation or light exercise to relax."

POSITIVE_TIPS = (
    "Great job staying consistent with your wellness tracking!",
    "Keep up the healthy balance of sleep, activity, and mood.",
    "You're doing well. Stay hydrated and active!",
    "Consistency pays off. Keep going strong!",
    "Awesome progress! Remember to celebrate small wins.",
)


class ChoiceSource(Protocol):
    def choice(self, seq: Sequence[T]) -> T: ...


def advise(entries: Sequence[Entry], rng: Optional[ChoiceSource] = None) -> str:
    if not entries:
        return EMPTY_MESSAGE
    if average_sleep(entries) < MIN_SLEEP_HOURS:
        return LOW_SLEEP_MESSAGE
    if average_steps(entries) < MIN_DAILY_STEPS:
        return LOW_ACTIVITY_MESSAGE
    if most_common_mood(entries) == Mood.stressed:
        return STRESS_MESSAGE
    return (rng or random).choice(POSITIVE_TIPS)
