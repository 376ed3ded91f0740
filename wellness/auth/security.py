# -*- coding: utf-8 -*-
"""Auth — password hashing + JWT + FastAPI helpers."""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import logging
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, Request

from ..config import settings
from ..errors import AuthError
from .storage import get_user_by_id

logger = logging.getLogger(__name__)

# Stored as "pbkdf2_<alg>$<iterations>$<salt>$<digest>", salt and digest base64url.
_PBKDF2_ALG = "sha256"
_PBKDF2_ITERATIONS = 200_000
_SCHEME_PREFIX = "pbkdf2_"

_JWT_HEADER = {"alg": "HS256", "typ": "JWT"}


def _b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64url_decode(data: str) -> bytes:
    return base64.urlsafe_b64decode(data + "=" * (-len(data) % 4))


def _derive(password: str, salt: bytes, alg: str = _PBKDF2_ALG, iterations: int = _PBKDF2_ITERATIONS) -> bytes:
    return hashlib.pbkdf2_hmac(alg, password.encode("utf-8"), salt, iterations)


def hash_password(password: str) -> str:
    salt = os.urandom(16)
    parts = (
        _SCHEME_PREFIX + _PBKDF2_ALG,
        str(_PBKDF2_ITERATIONS),
        _b64url_encode(salt),
        _b64url_encode(_derive(password, salt)),
    )
    return "$".join(parts)


def verify_password(password: str, password_hash: str) -> bool:
    """False for a wrong password and for any hash we cannot read."""
    try:
        scheme, iterations, salt, digest = password_hash.split("$", 3)
        if not scheme.startswith(_SCHEME_PREFIX):
            return False
        actual = _derive(password, _b64url_decode(salt), scheme[len(_SCHEME_PREFIX):], int(iterations))
        return hmac.compare_digest(actual, _b64url_decode(digest))
    except (ValueError, TypeError):
        return False


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(*, user_id: str, email: str) -> str:
    issued = _utc_now()
    expires = issued + timedelta(days=int(settings.token_ttl_days))
    claims = {
        "sub": user_id,
        "email": email,
        "iat": int(issued.timestamp()),
        "exp": int(expires.timestamp()),
    }
    return _jwt_encode(claims, settings.jwt_secret)


def decode_token(token: str) -> Dict[str, Any]:
    """Check signature and expiry; raises AuthError on any failure."""
    try:
        claims = _jwt_decode(token, settings.jwt_secret)
    except (ValueError, UnicodeError) as exc:
        logger.info("Token verification failed: %s", exc)
        raise AuthError("Invalid token") from exc
    exp = int(claims.get("exp") or 0)
    if exp and exp < int(_utc_now().timestamp()):
        raise AuthError("Token expired")
    return claims


def _json_segment(obj: Dict[str, Any]) -> str:
    return _b64url_encode(json.dumps(obj, separators=(",", ":"), ensure_ascii=False).encode("utf-8"))


def _signature(signing_input: str, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), signing_input.encode("ascii"), hashlib.sha256).digest()


def _jwt_encode(claims: Dict[str, Any], secret: str) -> str:
    signing_input = f"{_json_segment(_JWT_HEADER)}.{_json_segment(claims)}"
    return f"{signing_input}.{_b64url_encode(_signature(signing_input, secret))}"


def _jwt_decode(token: str, secret: str) -> Dict[str, Any]:
    """Return the claims of an HS256 token signed with ``secret``.

    Raises ValueError for a malformed token, a different algorithm or a
    signature mismatch.
    """
    try:
        header_seg, claims_seg, sig_seg = token.split(".")
    except ValueError:
        raise ValueError("expected three token segments") from None
    header = json.loads(_b64url_decode(header_seg))
    if not isinstance(header, dict) or header.get("alg") != _JWT_HEADER["alg"]:
        raise ValueError("unsupported token algorithm")
    if not hmac.compare_digest(_signature(f"{header_seg}.{claims_seg}", secret), _b64url_decode(sig_seg)):
        raise ValueError("signature mismatch")
    claims = json.loads(_b64url_decode(claims_seg))
    if not isinstance(claims, dict):
        raise ValueError("token claims are not an object")
    return claims


def get_token_from_request(request: Request) -> Optional[str]:
    auth = request.headers.get("authorization") or ""
    if auth.lower().startswith("bearer "):
        token = auth.split(" ", 1)[1].strip()
        return token or None
    return None


def get_current_user_from_request(request: Request) -> Dict[str, Any]:
    user = getattr(request.state, "user", None)
    if user:
        return user

    token = get_token_from_request(request)
    if not token:
        raise AuthError("No token provided")

    payload = decode_token(token)
    user_id = str(payload.get("sub") or "")
    if not user_id:
        raise AuthError("Invalid token")

    user_row = get_user_by_id(user_id)
    if not user_row:
        raise AuthError("User not found")

    # Cache on request for downstream handlers.
    request.state.user = user_row
    return user_row


def get_current_user(user: Dict[str, Any] = Depends(get_current_user_from_request)) -> Dict[str, Any]:
    return user
