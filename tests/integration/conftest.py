"""Integration test fixtures.

Runs the FastAPI app in-process through TestClient; no external services.
"""

import pytest
from fastapi.testclient import TestClient

from thread_detection.api.dependencies import get_settings
from thread_detection.main import app


@pytest.fixture
def client(test_settings):
    """TestClient with test settings injected (MAX_INPUT_CHARS=5000)."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
