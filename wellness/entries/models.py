# -*- coding: utf-8 -*-
"""Wellness entries — Pydantic models."""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class Mood(str, Enum):
    happy = "Happy"
    neutral = "Neutral"
    tired = "Tired"
    stressed = "Stressed"


MOODS: List[Mood] = list(Mood)

# Largest value an SQLite INTEGER column holds.
MAX_STEPS = 2**63 - 1


class EntryCreateRequest(BaseModel):
    steps: int = Field(..., ge=0, le=MAX_STEPS)
    sleep: float = Field(..., ge=0, allow_inf_nan=False, description="Hours slept")
    mood: Mood
    notes: str = Field("", max_length=2000)
    date: Optional[dt.date] = Field(None, description="YYYY-MM-DD, defaults to today (UTC)")

    @field_validator("notes", mode="before")
    @classmethod
    def _coerce_notes(cls, value: object) -> object:
        return "" if value is None else value


class EntryUpdateRequest(BaseModel):
    """Partial update; only the fields present in the body are merged."""

    steps: Optional[int] = Field(None, ge=0, le=MAX_STEPS)
    sleep: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    mood: Optional[Mood] = None
    notes: Optional[str] = Field(None, max_length=2000)
    date: Optional[dt.date] = None

    def changes(self) -> Dict[str, object]:
        provided = self.model_dump(exclude_unset=True)
        return {key: value for key, value in provided.items() if value is not None}


class Entry(BaseModel):
    id: str
    owner_id: str
    date: dt.date
    steps: int = Field(..., ge=0, le=MAX_STEPS)
    sleep: float = Field(..., ge=0, allow_inf_nan=False)
    mood: Mood
    notes: str = ""
    created_at: str
    updated_at: Optional[str] = None

    @field_validator("notes", mode="before")
    @classmethod
    def _coerce_notes(cls, value: object) -> object:
        return "" if value is None else value


class EntryCreateResponse(BaseModel):
    success: bool = True
    id: str


class EntryListResponse(BaseModel):
    success: bool = True
    entries: List[Entry]


class EntryResponse(BaseModel):
    success: bool = True
    entry: Entry


class DeleteResponse(BaseModel):
    success: bool = True
    message: str = "Entry deleted successfully"


class SummaryOut(BaseModel):
    total_steps: int = Field(0, ge=0)
    average_sleep_hours: float = Field(0.0, ge=0)
    average_sleep_display: str = "0.0"
    most_common_mood: Optional[Mood] = None
    entry_count: int = Field(0, ge=0)


class InsightsResponse(BaseModel):
    success: bool = True
    start: Optional[dt.date] = None
    end: Optional[dt.date] = None
    summary: SummaryOut
    mood_counts: Dict[str, int]
    advice: str
