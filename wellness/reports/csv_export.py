# -*- coding: utf-8 -*-
"""CSV export of wellness entries."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from ..entries.models import Entry
from ..errors import ValidationError

CSV_HEADER = ["Date", "Steps", "Sleep (hours)", "Mood", "Notes"]
CSV_FILENAME = "wellness_entries.csv"


def entries_to_frame(entries: Sequence[Entry]) -> pd.DataFrame:
    rows = [
        [e.date.isoformat(), e.steps, e.sleep, e.mood.value, e.notes or ""]
        for e in entries
    ]
    return pd.DataFrame(rows, columns=CSV_HEADER)


def export_csv(entries: Sequence[Entry]) -> str:
    """One row per entry, in the order given."""
    if not entries:
        raise ValidationError("No entries to export")
    return entries_to_frame(entries).to_csv(index=False, lineterminator="\n")
