# -*- coding: utf-8 -*-
"""Signed-in identity held by the client, with change notifications."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

User = Dict[str, Any]
Listener = Callable[[Optional[User]], None]


class AuthSession:
    """Holds the bearer token and tells subscribers when it changes.

    Listeners receive the user dict on sign-in and ``None`` on sign-out.
    """

    def __init__(self) -> None:
        self._token: Optional[str] = None
        self._user: Optional[User] = None
        self._listeners: List[Listener] = []

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def sign_in(self, token: str, user: User) -> None:
        self._token = token
        self._user = dict(user)
        logger.info("Signed in as %s", user.get("email"))
        self._notify(self._user)

    def sign_out(self) -> None:
        if self._token is None:
            return
        self._token = None
        self._user = None
        logger.info("Signed out")
        self._notify(None)

    def _notify(self, user: Optional[User]) -> None:
        for listener in list(self._listeners):
            listener(user)
