"""Exception types raised by the internship log application."""

from __future__ import annotations


class InternLogError(Exception):
    """Base class for application errors."""


class AuthError(InternLogError):
    """No user is signed in."""


class QueryError(InternLogError):
    """The store rejected a read or live query."""


class WriteError(InternLogError):
    """A create, update or delete could not be applied."""


class ValidationError(InternLogError):
    """User input failed a required-field check."""


class ModalStateError(InternLogError):
    """A modal transition was requested from a state that does not allow it."""
