# -*- coding: utf-8 -*-
"""Wellness entries — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response

from ..auth.security import get_current_user
from ..insights.filtering import DateRange, filter_entries
from ..insights.state import AppState, derive_view
from ..reports.csv_export import CSV_FILENAME, export_csv
from ..reports.pdf_generator import PDF_FILENAME, export_pdf
from .models import (
    DeleteResponse,
    EntryCreateRequest,
    EntryCreateResponse,
    EntryListResponse,
    EntryResponse,
    EntryUpdateRequest,
    InsightsResponse,
    SummaryOut,
)
from .storage import create_entry, delete_entry, get_entry, list_entries, update_entry

router = APIRouter(prefix="/api/wellness", tags=["Wellness"])


def _filtered(user_id: str, start: str | None, end: str | None):
    date_range = DateRange.parse(start, end)
    return date_range, filter_entries(list_entries(user_id), date_range)


def _attachment(filename: str) -> dict:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.post("", status_code=201, response_model=EntryCreateResponse, summary="Create a wellness entry")
def create(request: EntryCreateRequest, user: dict = Depends(get_current_user)):
    entry = create_entry(user["id"], request)
    return EntryCreateResponse(id=entry.id)


@router.get("", response_model=EntryListResponse, summary="List the caller's entries, newest first")
def list_all(user: dict = Depends(get_current_user)):
    return EntryListResponse(entries=list_entries(user["id"]))


@router.get("/summary", response_model=InsightsResponse, summary="Summary and tip for a date range")
def summary(
    start: str | None = Query(default=None, description="YYYY-MM-DD"),
    end: str | None = Query(default=None, description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
):
    date_range, entries = _filtered(user["id"], start, end)
    view = derive_view(AppState(filtered_entries=tuple(entries)))
    return InsightsResponse(
        start=date_range.start,
        end=date_range.end,
        summary=SummaryOut(
            total_steps=view.summary.total_steps,
            average_sleep_hours=view.summary.average_sleep_hours,
            average_sleep_display=view.summary.average_sleep_display,
            most_common_mood=view.summary.most_common_mood,
            entry_count=view.summary.entry_count,
        ),
        mood_counts={mood.value: count for mood, count in view.mood_counts.items()},
        advice=view.advice,
    )


@router.get("/export.csv", summary="Export entries as CSV")
def export_entries_csv(
    start: str | None = Query(default=None, description="YYYY-MM-DD"),
    end: str | None = Query(default=None, description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
):
    _, entries = _filtered(user["id"], start, end)
    return Response(
        content=export_csv(entries),
        media_type="text/csv; charset=utf-8",
        headers=_attachment(CSV_FILENAME),
    )


@router.get("/export.pdf", summary="Export entries as PDF")
def export_entries_pdf(
    start: str | None = Query(default=None, description="YYYY-MM-DD"),
    end: str | None = Query(default=None, description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
):
    date_range, entries = _filtered(user["id"], start, end)
    return Response(
        content=export_pdf(entries, start=date_range.start, end=date_range.end),
        media_type="application/pdf",
        headers=_attachment(PDF_FILENAME),
    )


@router.get("/{entry_id}", response_model=EntryResponse, summary="Get one entry")
def get_one(entry_id: str, user: dict = Depends(get_current_user)):
    return EntryResponse(entry=get_entry(user["id"], entry_id))


@router.put("/{entry_id}", response_model=EntryResponse, summary="Update provided fields of an entry")
def update(entry_id: str, request: EntryUpdateRequest, user: dict = Depends(get_current_user)):
    return EntryResponse(entry=update_entry(user["id"], entry_id, request))


@router.delete("/{entry_id}", response_model=DeleteResponse, summary="Delete an entry")
def delete(entry_id: str, user: dict = Depends(get_current_user)):
    delete_entry(user["id"], entry_id)
    return DeleteResponse()
