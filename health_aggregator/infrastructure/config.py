import os
from dataclasses import dataclass, field
from typing import Optional

from health_aggregator.domain.entities import UNKNOWN_ERROR


__version__ = "1.0.0"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _env_optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


@dataclass
class Settings:
    """Application configuration settings."""

    app_name: str = field(
        default_factory=lambda: os.getenv("HEALTHCHECK_APP_NAME", "health-aggregator")
    )
    app_version: str = field(
        default_factory=lambda: os.getenv("HEALTHCHECK_APP_VERSION", __version__)
    )
    environment: str = field(
        default_factory=lambda: os.getenv("HEALTHCHECK_ENVIRONMENT", "development")
    )
    # Dotted paths ("package.module:attribute") to the check registries
    registry_path: Optional[str] = field(
        default_factory=lambda: os.getenv("HEALTHCHECK_REGISTRY") or None
    )
    functional_registry_path: Optional[str] = field(
        default_factory=lambda: os.getenv("HEALTHCHECK_FUNCTIONAL_REGISTRY") or None
    )
    json_encoder: str = field(
        default_factory=lambda: os.getenv("HEALTHCHECK_JSON_ENCODER", "json")
    )
    concurrent: bool = field(
        default_factory=lambda: _env_flag("HEALTHCHECK_CONCURRENT")
    )
    max_workers: int = field(
        default_factory=lambda: int(os.getenv("HEALTHCHECK_MAX_WORKERS", "8"))
    )
    check_timeout_seconds: Optional[float] = field(
        default_factory=lambda: _env_optional_float("HEALTHCHECK_TIMEOUT_SECONDS")
    )
    unknown_error_message: str = field(
        default_factory=lambda: os.getenv("HEALTHCHECK_UNKNOWN_ERROR_MESSAGE", UNKNOWN_ERROR)
    )
    mount_prefix: str = field(
        default_factory=lambda: os.getenv("HEALTHCHECK_MOUNT_PREFIX", "/monitoring")
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("HEALTHCHECK_LOG_LEVEL", "INFO")
    )


def get_settings() -> Settings:
    """Factory function to create settings instance."""
    return Settings()
