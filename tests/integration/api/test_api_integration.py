"""
Integration tests for the FastAPI application.

These tests use TestClient to exercise the full request path
(middleware, validation, error handlers, classifier).
"""

import inspect
import time
from concurrent.futures import ThreadPoolExecutor

from thread_detection.api.routes import detect_thread


def test_root_endpoint(client):
    """Test root endpoint returns service info."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["version"] == "0.1.0"
    assert data["detect"] == "/thread-detection"
    assert "docs" in data
    assert "health" in data


def test_health_endpoint(client):
    """Test health check endpoint."""
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data


def test_request_id_header(client):
    """Every response carries a request ID."""
    response = client.get("/health")

    assert len(response.headers["X-Request-ID"]) == 36


def test_detect_high_confidence_thread(client, from_and_subject_text):
    """High-confidence threads pre-enable the split toggle."""
    response = client.post("/thread-detection", json={"raw_text": from_and_subject_text})

    assert response.status_code == 200
    data = response.json()
    assert data["result"]["looks_like_thread"] is True
    assert data["result"]["confidence"] == "high"
    assert data["result"]["indicators"][-1] == (
        "high confidence: multiple thread patterns detected"
    )
    assert data["should_default_to_split"] is True
    assert data["input_length"] == len(from_and_subject_text)
    assert data["processing_duration_ms"] >= 0


def test_detect_medium_confidence_thread(client, two_from_text):
    """Medium detections are reported but do not pre-enable splitting."""
    response = client.post("/thread-detection", json={"raw_text": two_from_text})

    assert response.status_code == 200
    data = response.json()
    assert data["result"]["confidence"] == "medium"
    assert data["result"]["looks_like_thread"] is True
    assert data["should_default_to_split"] is False


def test_detect_single_email(client, single_email_text):
    response = client.post("/thread-detection", json={"raw_text": single_email_text})

    data = response.json()
    assert data["result"]["confidence"] == "low"
    assert data["result"]["looks_like_thread"] is False
    assert data["should_default_to_split"] is False


def test_detect_empty_text(client):
    """Empty text is a valid request."""
    response = client.post("/thread-detection", json={"raw_text": ""})

    assert response.status_code == 200
    assert response.json()["result"]["indicators"] == ["does not look like an email thread"]


def test_detect_input_too_large(client, test_settings):
    """Text over MAX_INPUT_CHARS is rejected before classification."""
    raw_text = "x" * (test_settings.MAX_INPUT_CHARS + 1)
    response = client.post("/thread-detection", json={"raw_text": raw_text})

    assert response.status_code == 413
    data = response.json()
    assert data["error"] == "input_too_large"
    assert data["details"]["input_length"] == test_settings.MAX_INPUT_CHARS + 1


def test_detect_at_limit_accepted(client, test_settings):
    raw_text = "x" * test_settings.MAX_INPUT_CHARS
    response = client.post("/thread-detection", json={"raw_text": raw_text})

    assert response.status_code == 200


def test_detect_invalid_request(client):
    """Missing raw_text fails request validation."""
    response = client.post("/thread-detection", json={"text": "hello"})

    assert response.status_code == 422


def test_detect_wrong_type(client):
    response = client.post("/thread-detection", json={"raw_text": 42})

    assert response.status_code == 422


def test_metrics_endpoint(client, two_from_text):
    """Detection counters are exposed for Prometheus."""
    client.post("/thread-detection", json={"raw_text": two_from_text})
    response = client.get("/metrics")

    assert response.status_code == 200
    assert 'thread_detections_total{confidence="medium",looks_like_thread="true"}' in response.text


def test_caller_request_id_is_echoed(client):
    """Callers can correlate a detection with their own request ID."""
    response = client.post(
        "/thread-detection",
        json={"raw_text": ""},
        headers={"X-Request-ID": "import-batch-42"},
    )

    assert response.headers["X-Request-ID"] == "import-batch-42"


def test_detection_route_runs_in_threadpool():
    """A plain def route is run off the event loop by FastAPI."""
    assert not inspect.iscoroutinefunction(detect_thread)


def test_health_responsive_during_detection(client, test_settings):
    """A large detection request does not stall other requests."""
    test_settings.MAX_INPUT_CHARS = 200_000
    raw_text = ("on the " * 28_572)[:200_000]

    with ThreadPoolExecutor(max_workers=1) as pool:
        detection = pool.submit(client.post, "/thread-detection", json={"raw_text": raw_text})
        time.sleep(0.05)
        start = time.perf_counter()
        health = client.get("/health")
        health_seconds = time.perf_counter() - start
        detection_response = detection.result(timeout=30)

    assert health.status_code == 200
    assert health_seconds < 1.0
    assert detection_response.status_code == 200
    assert detection_response.json()["result"]["confidence"] == "low"
