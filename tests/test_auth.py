"""Tests for auth.py - session user tracking."""

import pytest

from auth import AuthSession, uid_for_email
from errors import AuthError, ValidationError


class TestAuthSession:
    def test_listener_called_immediately(self):
        session = AuthSession()
        seen = []
        session.subscribe(seen.append)
        assert seen == [None]

    def test_sign_in_notifies(self):
        session = AuthSession()
        seen = []
        session.subscribe(seen.append)

        user = session.sign_in("intern@example.com")

        assert seen == [None, user]
        assert session.current_user == user
        assert user.uid == uid_for_email("intern@example.com")

    def test_same_user_does_not_renotify(self):
        session = AuthSession()
        session.sign_in("intern@example.com")
        seen = []
        session.subscribe(seen.append)
        session.sign_in("intern@example.com")
        assert len(seen) == 1

    def test_sign_out(self):
        session = AuthSession()
        session.sign_in("intern@example.com")
        seen = []
        session.subscribe(seen.append)

        session.sign_out()
        session.sign_out()

        assert seen[-1] is None
        assert len(seen) == 2
        assert session.current_user is None

    def test_unsubscribe(self):
        session = AuthSession()
        seen = []
        unsubscribe = session.subscribe(seen.append)
        unsubscribe()
        session.sign_in("intern@example.com")
        assert seen == [None]

    def test_blank_email_rejected(self):
        with pytest.raises(ValidationError):
            AuthSession().sign_in("   ")

    def test_require_user(self):
        session = AuthSession()
        with pytest.raises(AuthError):
            session.require_user()
        session.sign_in("intern@example.com")
        assert session.require_user().email == "intern@example.com"


def test_uid_is_case_insensitive():
    assert uid_for_email("Intern@Example.com ") == uid_for_email("intern@example.com")
    assert uid_for_email("a@example.com") != uid_for_email("b@example.com")
