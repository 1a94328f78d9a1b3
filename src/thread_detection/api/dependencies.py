"""
FastAPI dependency injection for the detection service.
"""

from functools import lru_cache

from thread_detection.config import Settings, settings


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Override in tests with app.dependency_overrides[get_settings].

    Returns:
        Settings instance
    """
    return settings
