# -*- coding: utf-8 -*-
"""Date-range filtering over an in-memory list of entries."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence, Union

from ..entries.models import Entry
from ..errors import ValidationError

DateLike = Union[date, str, None]

_ISO_DAY = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_date_bound(value: DateLike, *, name: str = "date") -> Optional[date]:
    """``None`` or a blank string means "no bound"; anything else must be YYYY-MM-DD."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    if _ISO_DAY.fullmatch(text):
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
    raise ValidationError(f"{name}: expected YYYY-MM-DD, got {text!r}")


@dataclass(frozen=True)
class DateRange:
    start: Optional[date] = None
    end: Optional[date] = None

    @classmethod
    def parse(cls, start: DateLike = None, end: DateLike = None) -> "DateRange":
        return cls(parse_date_bound(start, name="start"), parse_date_bound(end, name="end"))

    @property
    def is_open(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, day: date) -> bool:
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True


def default_range(today: date, days: int = 7) -> DateRange:
    """The dashboard's initial window: the last week up to today."""
    return DateRange(start=today - timedelta(days=days), end=today)


def _calendar_day(value: Union[date, datetime]) -> date:
    return value.date() if isinstance(value, datetime) else value


def filter_entries(entries: Sequence[Entry], date_range: Optional[DateRange] = None) -> List[Entry]:
    if date_range is None or date_range.is_open:
        return list(entries)
    return [e for e in entries if date_range.contains(_calendar_day(e.date))]
