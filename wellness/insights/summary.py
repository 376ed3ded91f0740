# -*- coding: utf-8 -*-
"""Summary statistics over a set of entries."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from ..entries.models import MOODS, Entry, Mood


@dataclass(frozen=True)
class Summary:
    total_steps: int = 0
    average_sleep_hours: float = 0.0
    most_common_mood: Optional[Mood] = None
    entry_count: int = 0

    @property
    def average_sleep_display(self) -> str:
        return f"{self.average_sleep_hours:.1f}"

    @property
    def total_steps_display(self) -> str:
        return f"{self.total_steps:,}"

    @property
    def mood_display(self) -> str:
        return self.most_common_mood.value if self.most_common_mood else "-"


def mood_counts(entries: Sequence[Entry]) -> Dict[Mood, int]:
    """Occurrences of every mood, in declaration order, zeros included."""
    counter = Counter(e.mood for e in entries)
    return {mood: counter.get(mood, 0) for mood in MOODS}


def most_common_mood(entries: Sequence[Entry]) -> Optional[Mood]:
    # Ties go to the mood declared first in Mood.
    if not entries:
        return None
    counts = mood_counts(entries)
    return max(MOODS, key=lambda mood: counts[mood])


def average_steps(entries: Sequence[Entry]) -> float:
    if not entries:
        return 0.0
    return sum(e.steps for e in entries) / len(entries)


def average_sleep(entries: Sequence[Entry]) -> float:
    if not entries:
        return 0.0
    return sum(e.sleep for e in entries) / len(entries)


def summarize(entries: Sequence[Entry]) -> Summary:
    if not entries:
        return Summary()
    return Summary(
        total_steps=sum(e.steps for e in entries),
        average_sleep_hours=average_sleep(entries),
        most_common_mood=most_common_mood(entries),
        entry_count=len(entries),
    )
