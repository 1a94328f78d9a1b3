"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import pytest
from pathlib import Path

from thread_detection.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.MAX_INPUT_CHARS = 10
    """
    return Settings(
        APP_NAME="Thread Detection Service (Test)",
        APP_VERSION="0.1.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        MAX_INPUT_CHARS=5_000,
        PROMETHEUS_ENABLED=False,  # Disable metrics in tests unless explicitly needed
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_sample(fixtures_dir: Path):
    """Factory fixture to read a sample correspondence text.

    Usage:
        def test_something(load_sample):
            text = load_sample("outlook_thread.txt")
    """
    def _load(name: str) -> str:
        return (fixtures_dir / name).read_text(encoding="utf-8")

    return _load


@pytest.fixture
def single_email_text(load_sample) -> str:
    """One formatted email with From/To/Subject/Date headers."""
    return load_sample("single_email.txt")


@pytest.fixture
def outlook_thread_text(load_sample) -> str:
    """Outlook reply chain with two quoted messages."""
    return load_sample("outlook_thread.txt")


@pytest.fixture
def word_export_text(load_sample) -> str:
    """Two messages exported from a Word document."""
    return load_sample("word_export.txt")


@pytest.fixture
def two_from_text() -> str:
    """Two "From:" blocks and nothing else."""
    return (
        "From: alice@acme.com\n"
        "The shipment left the warehouse this morning.\n"
        "\n"
        "From: bob@widgets.com\n"
        "Great, we will be ready to unload it."
    )


@pytest.fixture
def from_and_subject_text() -> str:
    """Repeated "From:" and repeated "Subject:" blocks."""
    return (
        "From: Alice <alice@acme.com>\n"
        "Subject: Delivery schedule\n"
        "\n"
        "Can we move the delivery to Friday?\n"
        "\n"
        "From: Bob <bob@widgets.com>\n"
        "Subject: Re: Delivery schedule\n"
        "\n"
        "Friday works for us.\n"
    )
