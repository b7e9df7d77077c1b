"""Local store of school locations, seeded once on first initialization."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Sequence

from school_locator.cancellation import CancellationToken
from school_locator.config import StoreConfig
from school_locator.errors import StorageIOError
from school_locator.models import SchoolLocation
from school_locator.storage.connection import get_connection
from school_locator.storage.schema import count_schools, create_schema, seed_if_empty
from school_locator.storage.seed import SEED_SCHOOLS, SeedSchool

logger = logging.getLogger(__name__)

_SELECT_ALL_SQL = (
    "SELECT Id, Name, Latitude, Longitude, City, State FROM Schools ORDER BY Name"
)


class LocationStore:
    """Handle on a single SQLite file holding the Schools table.

    Every operation opens its own connection and releases it before
    returning, so one store may be shared across threads. Operations accept
    an optional CancellationToken; a fired token surfaces as
    OperationCancelled and leaves no partial writes behind.
    """

    def __init__(
        self,
        database_path: str | Path,
        *,
        seed: Sequence[SeedSchool] = SEED_SCHOOLS,
        busy_timeout_seconds: float = 5.0,
    ) -> None:
        self.database_path = str(database_path)
        self._seed = seed
        self._timeout = busy_timeout_seconds

    @classmethod
    def from_config(cls, config: StoreConfig) -> LocationStore:
        return cls(config.database_path, busy_timeout_seconds=config.busy_timeout_seconds)

    def _connect(
        self, cancellation: CancellationToken | None
    ) -> AbstractContextManager[sqlite3.Connection]:
        return get_connection(self.database_path, cancellation, timeout=self._timeout)

    def initialize(self, cancellation: CancellationToken | None = None) -> None:
        """Create the database and Schools table, seeding it if it is empty.

        Safe to call repeatedly: once the table holds any row the seed step
        is skipped. Raises StorageIOError, SchemaError or OperationCancelled.
        """
        token = cancellation if cancellation is not None else CancellationToken()
        token.raise_if_cancelled()

        directory = Path(self.database_path).parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageIOError(f"Cannot create data directory {directory}: {exc}") from exc

        with self._connect(token) as conn:
            create_schema(conn)
            inserted = seed_if_empty(conn, self._seed, token)

        logger.info("Database initialized at %s", self.database_path)
        if inserted:
            logger.info("Seeded %d school locations", inserted)

    def get_all(self, cancellation: CancellationToken | None = None) -> list[SchoolLocation]:
        """Return every stored school, ordered by name."""
        with self._connect(cancellation) as conn:
            rows = conn.execute(_SELECT_ALL_SQL).fetchall()
        return [SchoolLocation.from_row(row) for row in rows]

    def count(self, cancellation: CancellationToken | None = None) -> int:
        with self._connect(cancellation) as conn:
            return count_schools(conn)
