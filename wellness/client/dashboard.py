# -*- coding: utf-8 -*-
"""Dashboard controller.

Drives the loop: user action -> API call -> new ``AppState`` snapshot ->
derived summary/advice. Failed calls become notices; a failed load never
signs the user out.
"""

from __future__ import annotations

import logging
from collections import deque
from datetime import date
from typing import Any, Deque, Dict, Mapping, Optional, Tuple

from ..entries.models import Entry
from ..errors import WellnessError
from ..insights.advice import ChoiceSource
from ..insights.filtering import DateLike, DateRange, default_range
from ..insights.state import (
    AppState,
    DashboardView,
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
from ..reports.csv_export import export_csv
from ..reports.pdf_generator import export_pdf
from .http import WellnessClient

logger = logging.getLogger(__name__)

Notice = Tuple[str, str]


class Dashboard:
    def __init__(
        self,
        client: WellnessClient,
        *,
        today: Optional[date] = None,
        rng: Optional[ChoiceSource] = None,
        max_notices: int = 20,
    ) -> None:
        self.client = client
        self.rng = rng
        self.state: AppState = initial_state(default_range(today or date.today()))
        self.notices: Deque[Notice] = deque(maxlen=max_notices)
        self._unsubscribe = client.session.subscribe(self._on_auth_change)

    def close(self) -> None:
        self._unsubscribe()

    def _notify(self, level: str, message: str) -> None:
        self.notices.append((level, message))

    def _on_auth_change(self, user: Optional[Dict[str, Any]]) -> None:
        if user:
            self._notify("success", "Logged in successfully!")
            self.reload()
        else:
            self.state = signed_out(self.state)

    def reload(self) -> bool:
        try:
            entries = self.client.list_entries()
        except WellnessError as exc:
            logger.warning("Load entries failed: %s", exc.message)
            self.state = with_error(self.state, exc.message)
            self._notify("error", f"Failed to load entries: {exc.message}")
            return False
        self.state = with_entries(self.state, entries)
        return True

    def apply_filter(self, start: DateLike = None, end: DateLike = None) -> bool:
        try:
            date_range = DateRange.parse(start, end)
        except WellnessError as exc:
            self._notify("error", exc.message)
            return False
        self.state = with_filter(self.state, date_range)
        return True

    def clear_filter(self) -> None:
        self.state = cleared_filter(self.state)

    def start_edit(self, entry_id: str) -> Optional[Entry]:
        self.state = begin_edit(self.state, entry_id)
        return self.state.find(entry_id) if self.state.is_editing else None

    def cancel_edit(self) -> None:
        self.state = end_edit(self.state)

    def submit(self, payload: Mapping[str, Any]) -> bool:
        """Create a new entry, or update the one being edited."""
        editing_id = self.state.editing_id
        try:
            if editing_id:
                self.client.update_entry(editing_id, payload)
            else:
                self.client.create_entry(payload)
        except WellnessError as exc:
            verb = "update" if editing_id else "add"
            self._notify("error", f"Failed to {verb} entry: {exc.message}")
            return False
        self._notify("success", "Entry updated successfully!" if editing_id else "Entry added successfully!")
        self.state = end_edit(self.state)
        self.reload()
        return True

    def delete(self, entry_id: str) -> bool:
        try:
            self.client.delete_entry(entry_id)
        except WellnessError as exc:
            self._notify("error", f"Failed to delete entry: {exc.message}")
            return False
        self._notify("success", "Entry deleted successfully!")
        if self.state.editing_id == entry_id:
            self.state = end_edit(self.state)
        self.reload()
        return True

    def view(self) -> DashboardView:
        return derive_view(self.state, self.rng)

    def export_csv(self) -> Optional[str]:
        try:
            return export_csv(self.state.filtered_entries)
        except WellnessError as exc:
            self._notify("error", exc.message)
            return None

    def export_pdf(self) -> Optional[bytes]:
        date_range = self.state.date_range or DateRange()
        try:
            return export_pdf(self.state.filtered_entries, start=date_range.start, end=date_range.end)
        except WellnessError as exc:
            self._notify("error", exc.message)
            return None
