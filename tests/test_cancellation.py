"""Tests for school_locator.cancellation."""

import threading

import pytest

from school_locator.cancellation import CancellationToken
from school_locator.errors import OperationCancelled, StorageError


def test_new_token_is_not_cancelled():
    token = CancellationToken()
    assert token.cancelled is False
    token.raise_if_cancelled()  # Should not raise


def test_cancel_sets_flag():
    token = CancellationToken()
    token.cancel()
    assert token.cancelled is True


def test_cancel_is_idempotent():
    token = CancellationToken()
    token.cancel()
    token.cancel()
    assert token.cancelled is True


def test_raise_if_cancelled():
    token = CancellationToken()
    token.cancel()
    with pytest.raises(OperationCancelled):
        token.raise_if_cancelled()


def test_cancelled_is_a_storage_error():
    assert issubclass(OperationCancelled, StorageError)


def test_cancel_from_another_thread():
    token = CancellationToken()
    thread = threading.Thread(target=token.cancel)
    thread.start()
    thread.join()
    assert token.cancelled is True
