"""Tests for the reading repository and persistence gateway."""

import sqlite3
from pathlib import Path

import pytest

from station.models.storage import LoadStatus
from station.models.weather import Reading
from station.storage import reading_repo
from station.storage.database import connect, run_migrations
from station.storage.gateway import PersistenceGateway

READING = Reading(temperature_c=12.345678, humidity=77.5, pressure=1018.25)


@pytest.fixture
def db(tmp_path: Path) -> sqlite3.Connection:
    conn = connect(tmp_path / "test.db")
    run_migrations(conn)
    return conn


class TestReadingRepo:
    def test_save_and_get(self, db: sqlite3.Connection):
        row_id = reading_repo.save_reading(db, "2023-11-07 12:00:00", READING)
        assert row_id > 0
        assert reading_repo.get_reading(db, "2023-11-07 12:00:00") == READING

    def test_missing_time(self, db: sqlite3.Connection):
        assert reading_repo.get_reading(db, "1999-01-01 00:00:00") is None

    def test_duplicate_time_returns_first(self, db: sqlite3.Connection):
        second = Reading(temperature_c=-3.0, humidity=55.0, pressure=1014.0)
        reading_repo.save_reading(db, "t", READING)
        reading_repo.save_reading(db, "t", second)
        assert reading_repo.get_reading(db, "t") == READING

    def test_exact_match_only(self, db: sqlite3.Connection):
        reading_repo.save_reading(db, "2023-11-07 12:00:00", READING)
        assert reading_repo.get_reading(db, "2023-11-07 12:00") is None

    def test_list_times_newest_first(self, db: sqlite3.Connection):
        for t in ("a", "b", "c"):
            reading_repo.save_reading(db, t, READING)
        assert reading_repo.list_times(db) == ["c", "b", "a"]
        assert reading_repo.list_times(db, limit=1) == ["c"]


class TestPersistenceGateway:
    def test_save_then_load(self, gateway: PersistenceGateway):
        saved = gateway.save("2023-11-07 12:00:00", READING)
        assert saved.ok is True
        assert saved.error_message == ""

        loaded = gateway.load("2023-11-07 12:00:00")
        assert loaded.status == LoadStatus.FOUND
        assert loaded.found
        assert loaded.reading.temperature_c == pytest.approx(READING.temperature_c)
        assert loaded.reading.humidity == pytest.approx(READING.humidity)
        assert loaded.reading.pressure == pytest.approx(READING.pressure)

    def test_load_unused_key_not_found(self, gateway: PersistenceGateway):
        gateway.save("2023-11-07 12:00:00", READING)
        result = gateway.load("2023-11-08 12:00:00")
        assert result.status == LoadStatus.NOT_FOUND
        assert result.reading is None

    def test_load_from_fresh_database(self, gateway: PersistenceGateway):
        assert gateway.load("anything").status == LoadStatus.NOT_FOUND

    def test_unwritable_path_reports_error(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        gateway = PersistenceGateway(blocker / "station.db")

        saved = gateway.save("t", READING)
        assert saved.ok is False
        assert saved.error_message

        loaded = gateway.load("t")
        assert loaded.status == LoadStatus.ERROR
        assert loaded.error_message

        assert gateway.history() == []

    def test_query_failure_reports_error(self, db_path: Path):
        gateway = PersistenceGateway(db_path)
        gateway.save("t", READING)
        conn = sqlite3.connect(str(db_path))
        conn.execute("DROP TABLE weather_data")
        conn.commit()
        conn.close()

        assert gateway.save("t", READING).ok is False
        assert gateway.load("t").status == LoadStatus.ERROR

    def test_history(self, gateway: PersistenceGateway):
        gateway.save("first", READING)
        gateway.save("second", READING)
        assert gateway.history() == ["second", "first"]
