"""Unified settings for applications using the asset registry client."""

from pydantic import Field

from asset_registry.observability.logging import LogFormat, setup_logging
from asset_registry.observability.metrics import PrometheusMetricsRegistry

from .base import BaseCoreSettings
from .contract import ContractSettings
from .observability import BaseObservabilityConfig


class RegistrySettings(BaseCoreSettings):
    """Application settings plus the contract and observability sections.

    Each section reads its own environment variables, so
    `ASSET_REGISTRY_CONTRACT_NAME` and `LOG_LEVEL` both apply when the
    sections are built from their defaults.
    """

    contract: ContractSettings = Field(default_factory=ContractSettings)
    observability: BaseObservabilityConfig = Field(default_factory=BaseObservabilityConfig)

    def configure_logging(self) -> None:
        """Sets up console logging according to the observability section."""
        console_format = LogFormat.JSON if self.observability.log_format == "json" else LogFormat.PRETTY
        setup_logging(
            level="DEBUG" if self.debug else self.observability.log_level,
            app_name=self.app_name,
            environment=self.environment,
            console_format=console_format,
        )

    def build_metrics(self) -> PrometheusMetricsRegistry | None:
        """Returns a metrics registry when metrics are enabled, otherwise `None`."""
        if not self.observability.metrics_enabled:
            return None
        return PrometheusMetricsRegistry(namespace=self.observability.metrics_namespace)
