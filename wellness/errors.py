# -*- coding: utf-8 -*-
"""Error taxonomy shared by the API, the storage layer and the HTTP client."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Type


class WellnessError(Exception):
    """Base class; subclasses fix the HTTP status and the wire ``code``."""

    status_code: int = 500
    code: str = "internal_error"
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        return {"success": False, "error": self.message, "code": self.code}


class ValidationError(WellnessError):
    status_code = 400
    code = "validation_error"
    default_message = "Invalid request"


class AuthError(WellnessError):
    status_code = 401
    code = "auth_error"
    default_message = "Not authenticated"


class NotFoundError(WellnessError):
    status_code = 404
    code = "not_found"
    default_message = "Entry not found"


class ConflictError(WellnessError):
    # Duplicate signup is reported as a plain bad request on the wire.
    status_code = 400
    code = "conflict"
    default_message = "Email already registered"


class InternalError(WellnessError):
    pass


class RequestTimeoutError(WellnessError):
    """Raised by the client when the transport gives up waiting."""

    status_code = 504
    code = "timeout"
    default_message = "Request timed out"


_BY_CODE: Dict[str, Type[WellnessError]] = {
    cls.code: cls
    for cls in (ValidationError, AuthError, NotFoundError, ConflictError, InternalError, RequestTimeoutError)
}

_BY_STATUS: Dict[int, Type[WellnessError]] = {
    400: ValidationError,
    401: AuthError,
    404: NotFoundError,
}


def error_from_response(status_code: int, body: Any) -> WellnessError:
    """Rebuild the exception kind from an error response."""
    message = None
    code = None
    if isinstance(body, dict):
        message = body.get("error") or body.get("detail")
        code = body.get("code")
    cls = _BY_CODE.get(str(code)) if code else None
    if cls is None:
        cls = _BY_STATUS.get(status_code, InternalError)
    return cls(str(message) if message else None)


def describe_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Flatten pydantic error dicts into one readable line."""
    parts: List[str] = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        msg = str(err.get("msg") or "invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or ValidationError.default_message
