"""Database schema definition and seeding."""

from __future__ import annotations

import logging
import sqlite3
from typing import Iterable

from school_locator.cancellation import CancellationToken
from school_locator.storage.seed import SeedSchool

logger = logging.getLogger(__name__)

_SCHEMA_SQL = """\
CREATE TABLE IF NOT EXISTS Schools (
    Id          INTEGER PRIMARY KEY AUTOINCREMENT,
    Name        TEXT NOT NULL,
    Latitude    REAL NOT NULL,
    Longitude   REAL NOT NULL,
    City        TEXT NULL,
    State       TEXT NULL
)
"""

_INSERT_SQL = (
    "INSERT INTO Schools (Name, Latitude, Longitude, City, State) "
    "VALUES (?, ?, ?, ?, ?)"
)


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the Schools table if it does not already exist."""
    conn.execute(_SCHEMA_SQL)


def count_schools(conn: sqlite3.Connection) -> int:
    return conn.execute("SELECT COUNT(1) FROM Schools").fetchone()[0]


def seed_if_empty(
    conn: sqlite3.Connection,
    schools: Iterable[SeedSchool],
    token: CancellationToken,
) -> int:
    """Insert ``schools`` when the table is empty. Returns the number inserted.

    BEGIN IMMEDIATE takes the write lock before the row count is read, so two
    first-run callers serialize here and only one of them seeds. The caller's
    connection context commits the transaction, or rolls it back on error.
    """
    conn.execute("BEGIN IMMEDIATE")
    existing = count_schools(conn)
    if existing > 0:
        logger.debug("Schools table already has %d rows, skipping seed", existing)
        return 0

    inserted = 0
    for school in schools:
        token.raise_if_cancelled()
        conn.execute(
            _INSERT_SQL,
            (school.name, school.latitude, school.longitude, school.city, school.state),
        )
        inserted += 1
    return inserted
