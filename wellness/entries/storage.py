# -*- coding: utf-8 -*-
"""Wellness entries — SQLite storage scoped by owner."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Mapping, Type, TypeVar, Union
from uuid import uuid4

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..app_db import db_conn
from ..config import settings
from ..errors import InternalError, NotFoundError, ValidationError, describe_validation_errors
from .models import Entry, EntryCreateRequest, EntryUpdateRequest

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)

_UPDATABLE_COLUMNS = ("date", "steps", "sleep", "mood", "notes")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _iso(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


def _validated(model: Type[_M], payload: Union[_M, Mapping[str, Any]]) -> _M:
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(describe_validation_errors(exc.errors())) from exc


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as exc:
        logger.error("%s failed: %s", action, exc)
        raise InternalError(f"Failed to {action}") from exc


def _row_to_entry(row: sqlite3.Row) -> Entry:
    data = dict(row)
    data["owner_id"] = data.pop("user_id")
    return Entry.model_validate(data)


def _fetch(conn: sqlite3.Connection, user_id: str, entry_id: str) -> Entry:
    row = conn.execute(
        "SELECT * FROM wellness_entries WHERE id = ? AND user_id = ?",
        (entry_id, user_id),
    ).fetchone()
    if not row:
        raise NotFoundError()
    return _row_to_entry(row)


def create_entry(user_id: str, payload: Union[EntryCreateRequest, Mapping[str, Any]]) -> Entry:
    request = _validated(EntryCreateRequest, payload)
    now = _utc_now()
    entry = Entry(
        id=str(uuid4()),
        owner_id=user_id,
        date=request.date or now.date(),
        steps=request.steps,
        sleep=request.sleep,
        mood=request.mood,
        notes=request.notes,
        created_at=_iso(now),
    )
    with _storage_errors("create entry"), db_conn(settings.db_path) as conn:
        conn.execute(
            """
            INSERT INTO wellness_entries (id, user_id, date, steps, sleep, mood, notes, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, NULL)
            """,
            (
                entry.id,
                user_id,
                entry.date.isoformat(),
                entry.steps,
                entry.sleep,
                entry.mood.value,
                entry.notes,
                entry.created_at,
            ),
        )
    logger.info("Created entry %s for user %s", entry.id, user_id)
    return entry


def list_entries(user_id: str) -> List[Entry]:
    """All entries of one owner, newest date first."""
    with _storage_errors("fetch entries"), db_conn(settings.db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM wellness_entries WHERE user_id = ? ORDER BY date DESC, created_at DESC",
            (user_id,),
        ).fetchall()
    return [_row_to_entry(row) for row in rows]


def get_entry(user_id: str, entry_id: str) -> Entry:
    with _storage_errors("fetch entry"), db_conn(settings.db_path) as conn:
        return _fetch(conn, user_id, entry_id)


def update_entry(
    user_id: str,
    entry_id: str,
    changes: Union[EntryUpdateRequest, Mapping[str, Any]],
) -> Entry:
    """Merge the provided fields into the entry and refresh ``updated_at``."""
    fields: Dict[str, Any] = _validated(EntryUpdateRequest, changes).changes()
    if "mood" in fields:
        fields["mood"] = fields["mood"].value
    if "date" in fields:
        fields["date"] = fields["date"].isoformat()
    fields["updated_at"] = _iso(_utc_now())

    columns = [col for col in _UPDATABLE_COLUMNS + ("updated_at",) if col in fields]
    assignments = ", ".join(f"{col} = ?" for col in columns)
    values = [fields[col] for col in columns]

    with _storage_errors("update entry"), db_conn(settings.db_path) as conn:
        cur = conn.execute(
            f"UPDATE wellness_entries SET {assignments} WHERE id = ? AND user_id = ?",
            (*values, entry_id, user_id),
        )
        if cur.rowcount == 0:
            raise NotFoundError()
        return _fetch(conn, user_id, entry_id)


def delete_entry(user_id: str, entry_id: str) -> None:
    with _storage_errors("delete entry"), db_conn(settings.db_path) as conn:
        cur = conn.execute(
            "DELETE FROM wellness_entries WHERE id = ? AND user_id = ?",
            (entry_id, user_id),
        )
        if cur.rowcount == 0:
            raise NotFoundError()
    logger.info("Deleted entry %s for user %s", entry_id, user_id)
