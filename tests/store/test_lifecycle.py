"""Tests for the process-wide default store handle."""

import pytest

from gtfs_store.common.errors import AlreadyOpenError, NotOpenError
from gtfs_store.store.lifecycle import close_store, get_store, is_store_open, open_store


def test_open_get_close():
    store = open_store()
    assert get_store() is store
    assert is_store_open()

    close_store()
    assert not is_store_open()
    assert not store.is_open


def test_lifecycle_misuse():
    """Double open, and get/close without an open store, are errors."""
    with pytest.raises(NotOpenError):
        get_store()
    with pytest.raises(NotOpenError):
        close_store()

    open_store()
    with pytest.raises(AlreadyOpenError):
        open_store()
