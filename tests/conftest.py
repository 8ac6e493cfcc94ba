"""Shared test fixtures."""

import datetime

import pytest
from fastapi.testclient import TestClient

from app.api import source
from app.main import app

FIXED_NOW = datetime.datetime(2026, 10, 19, 8, 30, 0, 123000, tzinfo=datetime.timezone.utc)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def fixed_ids():
    counter = iter(range(1, 1000))
    return lambda: f"ds-{next(counter)}"


@pytest.fixture
def test_client():
    return TestClient(app)


@pytest.fixture
def remote(monkeypatch):
    """Replace the outbound fetch; set .payload or .error before posting."""

    class FakeRemote:
        payload = None
        error = None
        calls = []

        def __call__(self, url, timeout=None):
            self.calls.append((url, timeout))
            if self.error is not None:
                raise self.error
            return self.payload

    fake = FakeRemote()
    fake.calls = []
    monkeypatch.setattr(source, "fetch_json", fake)
    return fake
