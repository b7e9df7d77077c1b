"""SQLite connection management."""

from __future__ import annotations

import sqlite3
import time
from contextlib import contextmanager
from typing import Generator

from school_locator.cancellation import CancellationToken
from school_locator.errors import OperationCancelled, SchemaError, StorageIOError

# VM opcodes executed between cancellation polls while a statement runs
_PROGRESS_INTERVAL = 1000

# SQLite's own busy wait per attempt; the token is checked between attempts
_LOCK_POLL_SECONDS = 0.05


def _is_locked(exc: sqlite3.OperationalError) -> bool:
    return "database is locked" in str(exc)


class _CancellableConnection(sqlite3.Connection):
    """Connection that waits out a locked database in short attempts.

    Each statement retries while the database is locked, checking the
    cancellation token between attempts, until ``busy_timeout`` seconds
    have passed for that statement.
    """

    token: CancellationToken
    busy_timeout: float

    def execute(self, sql, parameters=(), /):
        deadline = time.monotonic() + self.busy_timeout
        while True:
            try:
                return super().execute(sql, parameters)
            except sqlite3.OperationalError as exc:
                if not _is_locked(exc) or time.monotonic() >= deadline:
                    raise
                self.token.raise_if_cancelled()


def _open(database_path: str, token: CancellationToken, timeout: float) -> _CancellableConnection:
    try:
        conn = sqlite3.connect(
            database_path, timeout=_LOCK_POLL_SECONDS, factory=_CancellableConnection
        )
    except sqlite3.Error as exc:
        raise StorageIOError(f"Cannot open database at {database_path}: {exc}") from exc
    conn.token = token
    conn.busy_timeout = timeout
    try:
        conn.execute("PRAGMA journal_mode=WAL")
    except sqlite3.Error as exc:
        conn.close()
        raise StorageIOError(f"Cannot open database at {database_path}: {exc}") from exc
    except BaseException:
        conn.close()
        raise
    return conn


def _rollback(conn: sqlite3.Connection) -> None:
    # Detach the handler so a fired token cannot interrupt the rollback itself
    conn.set_progress_handler(None, 0)
    conn.rollback()


@contextmanager
def get_connection(
    database_path: str,
    cancellation: CancellationToken | None = None,
    *,
    timeout: float = 5.0,
) -> Generator[sqlite3.Connection, None, None]:
    """Open a SQLite connection with WAL mode enabled.

    Commits on clean exit, rolls back on exception, and always closes.
    ``sqlite3`` errors escaping the block are re-raised as SchemaError, or as
    OperationCancelled when the token fired. The token is polled both while
    a statement runs (through a progress handler) and while a statement
    waits for a lock held by another connection. ``timeout`` is the busy
    timeout in seconds.
    """
    token = cancellation if cancellation is not None else CancellationToken()
    token.raise_if_cancelled()

    conn = _open(database_path, token, timeout)
    conn.row_factory = sqlite3.Row
    conn.set_progress_handler(lambda: int(token.cancelled), _PROGRESS_INTERVAL)
    try:
        yield conn
        token.raise_if_cancelled()
        conn.commit()
    except sqlite3.Error as exc:
        _rollback(conn)
        if token.cancelled:
            raise OperationCancelled("Operation cancelled") from exc
        raise SchemaError(str(exc)) from exc
    except BaseException:
        _rollback(conn)
        raise
    finally:
        conn.close()
