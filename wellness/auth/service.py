# -*- coding: utf-8 -*-
"""Identity operations used by the auth endpoints and the CLI."""

from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

from ..errors import AuthError, ConflictError
from .security import create_access_token, decode_token, hash_password, verify_password
from .storage import create_user, get_user_by_email, get_user_by_id

logger = logging.getLogger(__name__)

_LOGIN_FAILED = "Invalid email or password"


def signup(email: str, password: str) -> Tuple[Dict[str, Any], str]:
    if get_user_by_email(email):
        raise ConflictError()
    user = create_user(email=email, password_hash=hash_password(password))
    logger.info("Created user %s", user["id"])
    return user, create_access_token(user_id=user["id"], email=user["email"])


def login(email: str, password: str) -> Tuple[Dict[str, Any], str]:
    """Resolve the user by email and check the password.

    Unknown email and wrong password share one message so the endpoint
    does not reveal which addresses are registered.
    """
    user = get_user_by_email(email)
    if not user or not verify_password(password, user["password_hash"]):
        raise AuthError(_LOGIN_FAILED)
    return user, create_access_token(user_id=user["id"], email=user["email"])


def verify_token(token: str) -> Dict[str, Any]:
    claims = decode_token(token)
    user_id = str(claims.get("sub") or "")
    if not user_id or not get_user_by_id(user_id):
        raise AuthError("Invalid token")
    return claims
