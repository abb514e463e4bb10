"""Pytest configuration and shared fixtures for urgentcargus tests."""

import pytest

from urgentcargus.testing import RecordingHandler, create_mock_client


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear settings-related environment variables before each test.

    This prevents a developer's own URGENTCARGUS_* settings from leaking into tests.
    """
    import os

    test_prefixes = ("TEST_", "URGENTCARGUS_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def handler():
    """Recording MockTransport handler with an empty response queue."""
    return RecordingHandler()


@pytest.fixture
def client(handler):
    """Client wired to the recording handler."""
    with create_mock_client(handler) as client:
        yield client
