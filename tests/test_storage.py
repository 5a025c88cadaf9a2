"""Tests for storage.py - database operations and live queries."""

from datetime import date
from decimal import Decimal

import pytest

from errors import QueryError, WriteError
from models import LogDraft


# We need to set INTERNLOG_DB before importing storage
@pytest.fixture(autouse=True)
def temp_database(tmp_path, monkeypatch):
    """Use a temporary database for all tests."""
    db_path = tmp_path / "test_internlog.db"
    monkeypatch.setenv("INTERNLOG_DB", str(db_path))

    # Re-import storage to pick up new DB_PATH
    import importlib
    import storage
    importlib.reload(storage)

    # Initialise the database
    storage.init_db()

    yield storage

    # Clean up
    if db_path.exists():
        db_path.unlink()


def _draft(d: date, description: str = "Worked", hours=None, work_link=None) -> LogDraft:
    return LogDraft(
        date=d,
        description=description,
        hours=Decimal(str(hours)) if hours is not None else None,
        work_link=work_link,
    )


class TestInitDb:
    """Tests for init_db function."""

    def test_creates_table_and_index(self, temp_database):
        storage = temp_database
        conn = storage.get_connection()

        table = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='logs'"
        ).fetchone()
        index = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='index' AND name='idx_logs_user_date'"
        ).fetchone()
        conn.close()

        assert table is not None
        assert index is not None

    def test_idempotent(self, temp_database):
        """Test that init_db can be called multiple times safely."""
        temp_database.init_db()
        temp_database.init_db()


class TestCreateAndGet:
    """Tests for create_entry, get_entry and get_entries."""

    def test_create_and_retrieve(self, temp_database):
        storage = temp_database
        entry_id = storage.create_entry(
            "u1", _draft(date(2024, 1, 10), "Pairing session", hours="6.5", work_link="https://x.test/pr/3")
        )

        entry = storage.get_entry("u1", entry_id)
        assert entry.id == entry_id
        assert entry.user_id == "u1"
        assert entry.date == date(2024, 1, 10)
        assert entry.hours == Decimal("6.5")
        assert entry.description == "Pairing session"
        assert entry.work_link == "https://x.test/pr/3"
        assert entry.created_at is not None

    def test_unrecorded_hours_stay_none(self, temp_database):
        """Hours that were never recorded are not written as 8."""
        storage = temp_database
        entry_id = storage.create_entry("u1", _draft(date(2024, 1, 10)))
        assert storage.get_entry("u1", entry_id).hours is None

    def test_zero_hours_round_trip(self, temp_database):
        storage = temp_database
        entry_id = storage.create_entry("u1", _draft(date(2024, 1, 10), hours=0))
        entry = storage.get_entry("u1", entry_id)
        assert entry.hours == 0
        assert entry.is_day_off

    def test_blank_link_stored_as_none(self, temp_database):
        storage = temp_database
        entry_id = storage.create_entry("u1", _draft(date(2024, 1, 10), work_link=""))
        assert storage.get_entry("u1", entry_id).work_link is None

    def test_entries_newest_first(self, temp_database):
        storage = temp_database
        for d in (date(2024, 1, 11), date(2024, 1, 13), date(2024, 1, 12)):
            storage.create_entry("u1", _draft(d))

        dates = [e.date for e in storage.get_entries("u1")]
        assert dates == [date(2024, 1, 13), date(2024, 1, 12), date(2024, 1, 11)]

    def test_entries_scoped_to_user(self, temp_database):
        storage = temp_database
        mine = storage.create_entry("u1", _draft(date(2024, 1, 10)))
        storage.create_entry("u2", _draft(date(2024, 1, 10)))

        assert [e.id for e in storage.get_entries("u1")] == [mine]
        assert storage.get_entry("u2", mine) is None


class TestUpdateEntry:
    def test_overwrites_all_fields(self, temp_database):
        storage = temp_database
        entry_id = storage.create_entry("u1", _draft(date(2024, 1, 10), "Old", hours=8, work_link="https://a"))

        storage.update_entry("u1", entry_id, _draft(date(2024, 1, 11), "New"))

        entry = storage.get_entry("u1", entry_id)
        assert entry.date == date(2024, 1, 11)
        assert entry.description == "New"
        assert entry.hours is None
        assert entry.work_link is None

    def test_missing_entry_raises(self, temp_database):
        with pytest.raises(WriteError):
            temp_database.update_entry("u1", "missing", _draft(date(2024, 1, 10)))

    def test_other_users_entry_raises(self, temp_database):
        storage = temp_database
        entry_id = storage.create_entry("u1", _draft(date(2024, 1, 10)))
        with pytest.raises(WriteError):
            storage.update_entry("u2", entry_id, _draft(date(2024, 1, 10), "Hijack"))
        assert storage.get_entry("u1", entry_id).description == "Worked"


class TestDeleteEntries:
    """Batch delete is all-or-nothing."""

    def test_deletes_batch(self, temp_database):
        storage = temp_database
        ids = [storage.create_entry("u1", _draft(date(2024, 1, d))) for d in (10, 11, 12)]

        storage.delete_entries("u1", ids[:2])

        assert [e.id for e in storage.get_entries("u1")] == [ids[2]]

    def test_missing_id_deletes_nothing(self, temp_database):
        storage = temp_database
        ids = [storage.create_entry("u1", _draft(date(2024, 1, d))) for d in (10, 11)]

        with pytest.raises(WriteError):
            storage.delete_entries("u1", [ids[0], "missing"])

        assert len(storage.get_entries("u1")) == 2

    def test_other_users_entry_deletes_nothing(self, temp_database):
        storage = temp_database
        mine = storage.create_entry("u1", _draft(date(2024, 1, 10)))
        theirs = storage.create_entry("u2", _draft(date(2024, 1, 10)))

        with pytest.raises(WriteError):
            storage.delete_entries("u1", [mine, theirs])

        assert len(storage.get_entries("u1")) == 1
        assert len(storage.get_entries("u2")) == 1

    def test_empty_batch_is_noop(self, temp_database):
        temp_database.delete_entries("u1", [])

    def test_duplicate_ids_collapse(self, temp_database):
        storage = temp_database
        entry_id = storage.create_entry("u1", _draft(date(2024, 1, 10)))
        storage.delete_entries("u1", [entry_id, entry_id])
        assert storage.get_entries("u1") == []


class TestSubscriptions:
    """Tests for live queries."""

    def test_initial_snapshot(self, temp_database):
        storage = temp_database
        storage.create_entry("u1", _draft(date(2024, 1, 10)))
        snapshots = []

        subscription = storage.subscribe("u1", snapshots.append)

        assert subscription.loaded
        assert len(snapshots) == 1
        assert len(snapshots[0]) == 1
        subscription.cancel()

    def test_empty_store_still_delivers(self, temp_database):
        snapshots = []
        subscription = temp_database.subscribe("u1", snapshots.append)
        assert snapshots == [[]]
        subscription.cancel()

    def test_delivers_after_each_write(self, temp_database):
        storage = temp_database
        snapshots = []
        subscription = storage.subscribe("u1", snapshots.append)

        entry_id = storage.create_entry("u1", _draft(date(2024, 1, 10), "First"))
        storage.update_entry("u1", entry_id, _draft(date(2024, 1, 10), "Edited"))
        storage.delete_entries("u1", [entry_id])

        assert len(snapshots) == 4
        assert snapshots[1][0].description == "First"
        assert snapshots[2][0].description == "Edited"
        assert snapshots[3] == []
        subscription.cancel()

    def test_only_own_user_notified(self, temp_database):
        storage = temp_database
        snapshots = []
        subscription = storage.subscribe("u1", snapshots.append)

        storage.create_entry("u2", _draft(date(2024, 1, 10)))

        assert len(snapshots) == 1
        subscription.cancel()

    def test_cancel_stops_delivery(self, temp_database):
        storage = temp_database
        snapshots = []
        subscription = storage.subscribe("u1", snapshots.append)
        subscription.cancel()
        subscription.cancel()

        storage.create_entry("u1", _draft(date(2024, 1, 10)))

        assert len(snapshots) == 1
        assert not subscription.active

    def test_failed_write_does_not_deliver(self, temp_database):
        storage = temp_database
        snapshots = []
        subscription = storage.subscribe("u1", snapshots.append)

        with pytest.raises(WriteError):
            storage.update_entry("u1", "missing", _draft(date(2024, 1, 10)))

        assert len(snapshots) == 1
        subscription.cancel()

    def test_refresh_delivers_only_changes(self, temp_database):
        """Rows written behind the store's back show up on refresh."""
        storage = temp_database
        snapshots = []
        subscription = storage.subscribe("u1", snapshots.append)

        storage.refresh()
        assert len(snapshots) == 1

        conn = storage.get_connection()
        conn.execute(
            "INSERT INTO logs (id, user_id, date, hours, description, work_link, created_at) "
            "VALUES ('ext', 'u1', '2024-01-10', '8', 'From elsewhere', NULL, '2024-01-10T00:00:00+00:00')"
        )
        conn.commit()
        conn.close()

        storage.refresh()
        assert len(snapshots) == 2
        assert snapshots[1][0].id == "ext"
        subscription.cancel()

    def test_query_error_reported_once(self, temp_database):
        storage = temp_database
        snapshots = []
        errors = []
        subscription = storage.subscribe("u1", snapshots.append, errors.append)

        conn = storage.get_connection()
        conn.execute("DROP TABLE logs")
        conn.commit()
        conn.close()

        storage.refresh()
        storage.refresh()

        assert len(errors) == 1
        assert isinstance(errors[0], QueryError)
        assert subscription.failed
        assert subscription.loaded
        assert subscription.entries == []
        assert len(snapshots) == 1

    def test_get_entries_raises_query_error(self, temp_database):
        storage = temp_database
        conn = storage.get_connection()
        conn.execute("DROP TABLE logs")
        conn.commit()
        conn.close()

        with pytest.raises(QueryError):
            storage.get_entries("u1")

    def test_corrupt_row_reported_as_query_error(self, temp_database):
        """A malformed stored row fails the live query once instead of escaping."""
        storage = temp_database
        conn = storage.get_connection()
        conn.execute(
            "INSERT INTO logs (id, user_id, date, hours, description, work_link, created_at) "
            "VALUES ('bad', 'u1', '2024-13-45', 'abc', 'Broken', NULL, '2024-01-10T00:00:00+00:00')"
        )
        conn.commit()
        conn.close()
        snapshots = []
        errors = []

        subscription = storage.subscribe("u1", snapshots.append, errors.append)
        storage.refresh()

        assert snapshots == []
        assert len(errors) == 1
        assert isinstance(errors[0], QueryError)
        assert subscription.failed
        assert subscription.loaded
        assert subscription.entries == []

        with pytest.raises(QueryError):
            storage.get_entry("u1", "bad")
