"""
Configuration settings for the thread detection service.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.

Detection thresholds are NOT configurable: they live as constants in
detection/detector.py so results stay comparable across deployments.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Thread Detection Service"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # === Input Guard ===
    MAX_INPUT_CHARS: int = 200_000  # Rejected with 413 before the classifier runs

    # === Request Logging ===
    SLOW_REQUEST_MS: float = 1000.0  # Slower requests are logged at WARNING

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True

    # === HTTP ===
    CORS_ALLOW_ORIGINS: list[str] = ["*"]


# Global settings instance
settings = Settings()
