"""Repository for weather readings in the weather_data table."""

import sqlite3

from station.models.weather import Reading


def save_reading(conn: sqlite3.Connection, time: str, reading: Reading) -> int:
    """Persist a reading under a time key. Returns the row id."""
    cursor = conn.execute(
        "INSERT INTO weather_data (time, temperature, humidity, pressure) "
        "VALUES (?, ?, ?, ?)",
        (time, reading.temperature_c, reading.humidity, reading.pressure),
    )
    conn.commit()
    assert cursor.lastrowid is not None
    return cursor.lastrowid


def get_reading(conn: sqlite3.Connection, time: str) -> Reading | None:
    """Get the first reading stored under the exact time key."""
    row = conn.execute(
        "SELECT temperature, humidity, pressure FROM weather_data "
        "WHERE time = ? ORDER BY rowid LIMIT 1",
        (time,),
    ).fetchone()
    if row is None:
        return None
    return Reading(
        temperature_c=row["temperature"],
        humidity=row["humidity"],
        pressure=row["pressure"],
    )


def list_times(conn: sqlite3.Connection, limit: int = 20) -> list[str]:
    """Most recently inserted time keys, newest first."""
    rows = conn.execute(
        "SELECT time FROM weather_data ORDER BY rowid DESC LIMIT ?", (limit,)
    ).fetchall()
    return [r["time"] for r in rows]
