"""Persistence gateway: one short-lived connection per save or load.

Storage failures never escape as exceptions. They are logged and returned
as failed results so callers can carry on with the in-memory record.
"""

import logging
import sqlite3
from pathlib import Path

from station.models.storage import LoadResult, LoadStatus, SaveResult
from station.models.weather import Reading
from station.storage import reading_repo
from station.storage.database import connect, run_migrations

logger = logging.getLogger(__name__)


class PersistenceGateway:
    def __init__(self, db_path: str | Path):
        self.db_path = db_path

    def save(self, time: str, reading: Reading) -> SaveResult:
        try:
            conn = connect(self.db_path)
        except (sqlite3.Error, OSError) as e:
            logger.error("Could not open %s to save %s: %s", self.db_path, time, e)
            return SaveResult(time=time, ok=False, error_message=str(e))
        try:
            run_migrations(conn)
            reading_repo.save_reading(conn, time, reading)
        except sqlite3.Error as e:
            logger.exception("Failed to save reading at %s", time)
            return SaveResult(time=time, ok=False, error_message=str(e))
        finally:
            conn.close()

        logger.info("Saved reading at %s", time)
        return SaveResult(time=time, ok=True)

    def load(self, time: str) -> LoadResult:
        try:
            conn = connect(self.db_path)
        except (sqlite3.Error, OSError) as e:
            logger.error("Could not open %s to load %s: %s", self.db_path, time, e)
            return LoadResult(time=time, status=LoadStatus.ERROR, error_message=str(e))
        try:
            run_migrations(conn)
            reading = reading_repo.get_reading(conn, time)
        except sqlite3.Error as e:
            logger.exception("Failed to load reading at %s", time)
            return LoadResult(time=time, status=LoadStatus.ERROR, error_message=str(e))
        finally:
            conn.close()

        if reading is None:
            logger.info("No reading stored at %s", time)
            return LoadResult(time=time, status=LoadStatus.NOT_FOUND)
        return LoadResult(time=time, status=LoadStatus.FOUND, reading=reading)

    def history(self, limit: int = 20) -> list[str]:
        """Recent time keys. Returns an empty list if storage is unreachable."""
        try:
            conn = connect(self.db_path)
        except (sqlite3.Error, OSError) as e:
            logger.error("Could not open %s: %s", self.db_path, e)
            return []
        try:
            run_migrations(conn)
            return reading_repo.list_times(conn, limit)
        except sqlite3.Error:
            logger.exception("Failed to list stored readings")
            return []
        finally:
            conn.close()
