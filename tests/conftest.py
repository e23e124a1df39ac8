"""Shared test fixtures."""

import base64
import json

import pytest
from fastapi.testclient import TestClient

from gke_notifier.app import app
from gke_notifier.config import get_settings


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings are cached per process; start every test from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def push_body():
    """Build a Pub/Sub push request body from a message dict with decoded data."""

    def _build(message: dict, subscription: str = "projects/test-project/subscriptions/gke") -> bytes:
        wire = dict(message)
        wire["data"] = base64.b64encode(message["data"].encode("utf-8")).decode("ascii")
        return json.dumps({"message": wire, "subscription": subscription}).encode("utf-8")

    return _build
