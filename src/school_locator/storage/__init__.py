"""Storage layer — SQLite database access, schema, and seed data."""

from school_locator.storage.connection import get_connection
from school_locator.storage.schema import count_schools, create_schema, seed_if_empty
from school_locator.storage.seed import SEED_SCHOOLS, SeedSchool

__all__ = [
    "SEED_SCHOOLS",
    "SeedSchool",
    "count_schools",
    "create_schema",
    "get_connection",
    "seed_if_empty",
]
