"""School Locator — a local SQLite store of named school locations."""

from school_locator.cancellation import CancellationToken
from school_locator.config import StoreConfig, load_config
from school_locator.errors import (
    OperationCancelled,
    SchemaError,
    StorageError,
    StorageIOError,
)
from school_locator.models import SchoolLocation
from school_locator.store import LocationStore

__all__ = [
    "CancellationToken",
    "LocationStore",
    "OperationCancelled",
    "SchemaError",
    "SchoolLocation",
    "StorageError",
    "StorageIOError",
    "StoreConfig",
    "load_config",
]
