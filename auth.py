"""Signed-in user tracking for the session."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass

from errors import AuthError, ValidationError

logger = logging.getLogger(__name__)

AuthListener = Callable[["User | None"], None]


@dataclass(frozen=True)
class User:
    uid: str
    email: str


def uid_for_email(email: str) -> str:
    """Stable owner id for an e-mail address."""
    return uuid.uuid5(uuid.NAMESPACE_URL, f"mailto:{email.strip().lower()}").hex


class AuthSession:
    """Holds the current user and tells listeners when it changes."""

    def __init__(self):
        self._user: User | None = None
        self._listeners: list[AuthListener] = []

    @property
    def current_user(self) -> User | None:
        return self._user

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """Register a listener; it is called immediately with the current user."""
        self._listeners.append(listener)
        listener(self._user)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def sign_in(self, email: str) -> User:
        email = email.strip()
        if not email:
            raise ValidationError("Email is required")
        user = User(uid=uid_for_email(email), email=email)
        if user != self._user:
            self._user = user
            logger.info("Signed in as %s", email)
            self._emit()
        return user

    def sign_out(self) -> None:
        if self._user is None:
            return
        logger.info("Signed out %s", self._user.email)
        self._user = None
        self._emit()

    def require_user(self) -> User:
        if self._user is None:
            raise AuthError("Not signed in")
        return self._user

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener(self._user)
