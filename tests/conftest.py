"""Shared fixtures for tests."""

from __future__ import annotations

import os
import tempfile
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Generator

import pytest

# Point the store and preferences at temp files before importing the app modules
_test_dir = tempfile.mkdtemp(prefix="internlog-tests-")
os.environ["INTERNLOG_DB"] = str(Path(_test_dir) / "test_internlog.db")
os.environ["INTERNLOG_PREFS"] = str(Path(_test_dir) / "prefs.json")
os.environ["INTERNLOG_HOLIDAYS"] = ""
os.environ.pop("INTERNLOG_USER", None)


@pytest.fixture(scope="session", autouse=True)
def setup_test_db() -> Generator[Path, None, None]:
    """Set up a test database for the entire test session."""
    import storage

    storage.DB_PATH = Path(os.environ["INTERNLOG_DB"])
    storage.init_db()

    yield storage.DB_PATH

    if storage.DB_PATH.exists():
        storage.DB_PATH.unlink()


@pytest.fixture
def make_entry():
    """Build LogEntry objects with sensible defaults."""
    from models import LogEntry

    counter = iter(range(1, 10_000))

    def _make(d: date, hours=None, description: str = "Worked on the API", work_link=None, user_id="user-1"):
        if hours is not None and not isinstance(hours, Decimal):
            hours = Decimal(str(hours))
        return LogEntry(
            id=f"entry-{next(counter)}",
            date=d,
            description=description,
            user_id=user_id,
            hours=hours,
            work_link=work_link,
        )

    return _make


@pytest.fixture
def sample_entries(make_entry):
    """The three-entry example: 8 hours, not recorded, and a day off."""
    return [
        make_entry(date(2024, 1, 12), hours=8, description="Built the login page"),
        make_entry(date(2024, 1, 11), hours=None, description="Code review"),
        make_entry(date(2024, 1, 10), hours=0, description="Public holiday"),
    ]


@pytest.fixture
def en():
    from i18n import Translator

    return Translator("EN")


@pytest.fixture
def th():
    from i18n import Translator

    return Translator("TH")
