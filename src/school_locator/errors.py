"""Exceptions raised by the location store."""

from __future__ import annotations


class StorageError(Exception):
    """Base class for every failure surfaced by the location store."""


class StorageIOError(StorageError):
    """The data directory or database file cannot be created or opened."""


class SchemaError(StorageError):
    """A statement failed at the storage-engine level (DDL, insert, or query)."""


class OperationCancelled(StorageError):
    """The caller's cancellation token fired before the operation completed."""
