"""Domain model for stored school locations."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass


@dataclass(frozen=True)
class SchoolLocation:
    """A named geographic point read from the Schools table."""

    id: int
    name: str
    latitude: float
    longitude: float
    city: str | None = None
    state: str | None = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> SchoolLocation:
        return cls(
            id=row["Id"],
            name=row["Name"],
            latitude=row["Latitude"],
            longitude=row["Longitude"],
            city=row["City"],
            state=row["State"],
        )
