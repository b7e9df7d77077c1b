"""Cooperative cancellation for storage operations."""

from __future__ import annotations

import threading

from school_locator.errors import OperationCancelled


class CancellationToken:
    """Thread-safe cancellation signal shared between a caller and an operation.

    The caller keeps a reference and calls ``cancel()``; the operation polls
    ``cancelled`` (or ``raise_if_cancelled()``) at each I/O boundary.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OperationCancelled("Operation cancelled")
