# -*- coding: utf-8 -*-
"""HTTP client for the wellness API.

Every entry call needs a signed-in ``AuthSession``; without one the call
fails before any request is sent. Error responses are turned back into the
exceptions of ``wellness.errors``; transport timeouts raise
``RequestTimeoutError``.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..config import settings
from ..entries.models import Entry, EntryCreateRequest, EntryUpdateRequest
from ..errors import AuthError, InternalError, RequestTimeoutError, error_from_response
from .session import AuthSession

logger = logging.getLogger(__name__)

Payload = Union[BaseModel, Mapping[str, Any]]
DateParam = Union[dt.date, str, None]


def _body(payload: Payload) -> Dict[str, Any]:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", exclude_unset=True)
    return dict(payload)


def _range_params(start: DateParam, end: DateParam) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for key, value in (("start", start), ("end", end)):
        if value is None or value == "":
            continue
        params[key] = value.isoformat() if isinstance(value, dt.date) else str(value)
    return params


def _entry(item: Any) -> Entry:
    try:
        return Entry.model_validate(item)
    except PydanticValidationError as exc:
        logger.warning("Malformed entry in response: %s", exc)
        raise InternalError("Malformed entry in response") from exc


def _json_or_none(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return None


class WellnessClient:
    def __init__(
        self,
        session: Optional[AuthSession] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http: Optional[httpx.Client] = None,
    ) -> None:
        self.session = session or AuthSession()
        self._owns_http = http is None
        self._http = http or httpx.Client(
            base_url=base_url or settings.api_base_url,
            timeout=settings.client_timeout if timeout is None else timeout,
            follow_redirects=True,
        )

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "WellnessClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, *, auth: bool = True, **kwargs: Any) -> httpx.Response:
        headers: Dict[str, str] = {}
        if auth:
            token = self.session.token
            if not token:
                raise AuthError("No user authenticated")
            headers["Authorization"] = f"Bearer {token}"
        try:
            resp = self._http.request(method, path, headers=headers, **kwargs)
        except httpx.TimeoutException as exc:
            logger.warning("%s %s timed out: %s", method, path, exc)
            raise RequestTimeoutError() from exc
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise InternalError(f"Request failed: {exc}") from exc
        if resp.status_code >= 400:
            raise error_from_response(resp.status_code, _json_or_none(resp))
        return resp

    # Identity

    def signup(self, email: str, password: str) -> Dict[str, Any]:
        data = self._request("POST", "/auth/signup", auth=False, json={"email": email, "password": password}).json()
        self.session.sign_in(data["token"], data["user"])
        return data["user"]

    def login(self, email: str, password: str) -> Dict[str, Any]:
        data = self._request("POST", "/auth/login", auth=False, json={"email": email, "password": password}).json()
        self.session.sign_in(data["token"], data["user"])
        return data["user"]

    def logout(self) -> None:
        self.session.sign_out()

    def verify(self, token: Optional[str] = None) -> Dict[str, Any]:
        token = token or self.session.token
        if not token:
            raise AuthError("No user authenticated")
        return self._request("POST", "/auth/verify", auth=False, json={"token": token}).json()["user"]

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health", auth=False).json()

    # Entries

    def create_entry(self, payload: Union[EntryCreateRequest, Mapping[str, Any]]) -> str:
        return self._request("POST", "/wellness", json=_body(payload)).json()["id"]

    def list_entries(self) -> List[Entry]:
        data = self._request("GET", "/wellness").json()
        return [_entry(item) for item in data.get("entries") or []]

    def get_entry(self, entry_id: str) -> Entry:
        return _entry(self._request("GET", f"/wellness/{entry_id}").json()["entry"])

    def update_entry(self, entry_id: str, changes: Union[EntryUpdateRequest, Mapping[str, Any]]) -> Entry:
        data = self._request("PUT", f"/wellness/{entry_id}", json=_body(changes)).json()
        return _entry(data["entry"])

    def delete_entry(self, entry_id: str) -> None:
        self._request("DELETE", f"/wellness/{entry_id}")

    # Insights and exports

    def summary(self, start: DateParam = None, end: DateParam = None) -> Dict[str, Any]:
        return self._request("GET", "/wellness/summary", params=_range_params(start, end)).json()

    def export_csv(self, start: DateParam = None, end: DateParam = None) -> str:
        return self._request("GET", "/wellness/export.csv", params=_range_params(start, end)).text

    def export_pdf(self, start: DateParam = None, end: DateParam = None) -> bytes:
        return self._request("GET", "/wellness/export.pdf", params=_range_params(start, end)).content
