"""
Integration tests for thread detection.

Test components together:
- API endpoints (FastAPI TestClient: routing, size guard, error handlers, metrics)
"""
