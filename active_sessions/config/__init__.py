"""Tracker configuration.

Settings are read from the environment by pydantic-settings, so a deployment
can point every tracker at its Redis with ``REDIS_URL`` alone.
"""

from pydantic_settings import BaseSettings


class BaseLoggingConfig(BaseSettings):
    """Common logging configuration."""

    app_log_level: str = "INFO"
    app_log_redaction_patterns: list[str] = [
        "password",
        "token",
        "secret",
        "key",
        "authorization",
        "cookie",
        "session",
    ]
    app_environment: str = "production"


class TrackerSettings(BaseLoggingConfig):
    # Redis
    redis_url: str = "redis://localhost:6379/0"
    redis_decode_responses: bool = True

    # Tracker behaviour
    tracker_propagate_exceptions: bool = False
    tracker_temp_key_prefix: str = "active_sessions_tmp_"

    otel_service_name: str = "session-tracker"


settings = TrackerSettings()


__all__ = ["BaseLoggingConfig", "TrackerSettings", "settings"]
