"""Initial schema: weather_data readings keyed by time string."""

import sqlite3

DDL = [
    # time is not unique; lookups return the first inserted match
    """
    CREATE TABLE IF NOT EXISTS weather_data (
        time TEXT NOT NULL,
        temperature REAL NOT NULL,
        humidity REAL NOT NULL,
        pressure REAL NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_weather_data_time ON weather_data(time)",
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
    conn.commit()
