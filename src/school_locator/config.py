"""Configuration loading and validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_data_dir

APP_NAME = "school-locator"


@dataclass(frozen=True)
class StoreConfig:
    """Store configuration. All values sourced from environment variables."""

    # Required
    data_dir: str

    # Optional
    database_filename: str = "schools.db"
    busy_timeout_seconds: float = 5.0

    @property
    def database_path(self) -> str:
        return str(Path(self.data_dir) / self.database_filename)


def _parse_timeout(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(
            f"Invalid SCHOOL_LOCATOR_BUSY_TIMEOUT_SECONDS: {raw!r} is not a number"
        ) from None
    if value < 0:
        raise ValueError(
            f"Invalid SCHOOL_LOCATOR_BUSY_TIMEOUT_SECONDS: {raw!r} must not be negative"
        )
    return value


def load_config(env_path: str | Path | None = None) -> StoreConfig:
    """Load configuration from environment variables.

    Loads a .env file if present (for local development). The data directory
    falls back to the platform's per-user application data directory when
    SCHOOL_LOCATOR_DATA_DIR is unset. Raises ValueError for malformed values.
    """
    load_dotenv(dotenv_path=env_path)

    return StoreConfig(
        data_dir=os.environ.get("SCHOOL_LOCATOR_DATA_DIR") or user_data_dir(APP_NAME, appauthor=False),
        database_filename=os.environ.get("SCHOOL_LOCATOR_DB_FILENAME", "schools.db"),
        busy_timeout_seconds=_parse_timeout(
            os.environ.get("SCHOOL_LOCATOR_BUSY_TIMEOUT_SECONDS", "5.0")
        ),
    )
