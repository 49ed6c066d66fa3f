# tests/conftest.py
import os
import sys
import logging
import pytest
from fastapi.testclient import TestClient

# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from analytics.main import create_app
from analytics.services.store import StorageError, UnavailableStore


class FakeStore:
    """In-memory LogStore that records every saved entry."""

    def __init__(self, fail_with: Exception | None = None):
        self.saved = []
        self.fail_with = fail_with
        self.closed = False

    @property
    def available(self) -> bool:
        return True

    def save(self, entry):
        if self.fail_with is not None:
            raise self.fail_with
        self.saved.append(entry.model_copy(deep=True))

    def close(self):
        self.closed = True


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def client(fake_store):
    """TestClient backed by a healthy in-memory store."""
    with TestClient(create_app(store=fake_store)) as c:
        yield c


@pytest.fixture
def failing_store():
    return FakeStore(fail_with=StorageError("deadline exceeded"))


@pytest.fixture
def degraded_client():
    """TestClient whose store could not be initialized."""
    logger.info("Creating TestClient in degraded mode.")
    with TestClient(create_app(store=UnavailableStore("no credentials"))) as c:
        yield c
