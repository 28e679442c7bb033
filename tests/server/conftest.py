"""Pytest fixtures for server module testing."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from server import broadcaster
from server.main import app


@pytest.fixture(autouse=True)
def reset_subscribers() -> Iterator[None]:
    yield
    broadcaster._subscriber_queues.clear()


@pytest.fixture
def client() -> Iterator[TestClient]:
    # One portal for the whole test so HTTP requests and WebSocket
    # handlers share the event loop the subscriber queues live on.
    with TestClient(app) as test_client:
        yield test_client
