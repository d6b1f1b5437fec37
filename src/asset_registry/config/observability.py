"""Observability configuration settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseObservabilityConfig(BaseSettings):
    """Logging and metrics settings."""

    model_config = SettingsConfigDict(
        str_strip_whitespace=True,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json or text)")

    metrics_enabled: bool = Field(default=False, description="Record Prometheus metrics for contract calls.")
    metrics_namespace: str = Field(default="asset_registry", description="Prefix for Prometheus metric names.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validates and uppercases the `log_level` field.

        Raises:
            ValueError: If the log level is not a standard level name.
        """
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = v.upper()
        if v not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = {"json", "text"}
        if v not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v
