"""Prometheus metrics registry and helpers.

`PrometheusMetricsRegistry` owns a private `CollectorRegistry`, so several
clients (or test cases) can create metrics with the same names without
colliding in the process-wide default registry.
"""

from typing import Any

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

CONTRACT_CALL_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)


class PrometheusMetricsRegistry:
    """Wrapper for a Prometheus collector registry with get-or-create helpers.

    Attributes:
        registry (CollectorRegistry): The underlying Prometheus collector registry.
        namespace (str | None): Optional prefix for every metric created here.
    """

    def __init__(self, namespace: str | None = None) -> None:
        self.registry = CollectorRegistry()
        self.namespace = namespace
        self._metrics: dict[str, Counter | Histogram] = {}

    def counter(
        self,
        name: str,
        description: str,
        labels: list[str] | None = None,
        **kwargs: Any,
    ) -> Counter:
        """Creates or retrieves a Counter.

        Args:
            name: The base name of the metric.
            description: A brief explanation of the metric.
            labels: Optional label names.
            **kwargs: Passed through to `prometheus_client.Counter`.
        """
        metric_name = self._format_name(name)
        if metric_name not in self._metrics:
            self._metrics[metric_name] = Counter(
                name=metric_name,
                documentation=description,
                labelnames=labels or [],
                namespace=self.namespace or "",
                registry=self.registry,
                **kwargs,
            )
        return self._metrics[metric_name]  # type: ignore

    def histogram(
        self,
        name: str,
        description: str,
        labels: list[str] | None = None,
        buckets: tuple[float, ...] | None = None,
        **kwargs: Any,
    ) -> Histogram:
        """Creates or retrieves a Histogram.

        Args:
            name: The base name of the metric.
            description: A brief explanation of the metric.
            labels: Optional label names.
            buckets: Optional bucket upper bounds; Prometheus defaults are used when `None`.
            **kwargs: Passed through to `prometheus_client.Histogram`.
        """
        metric_name = self._format_name(name)
        if metric_name not in self._metrics:
            kwargs_with_buckets = kwargs.copy()
            if buckets:
                kwargs_with_buckets["buckets"] = buckets

            self._metrics[metric_name] = Histogram(
                name=metric_name,
                documentation=description,
                labelnames=labels or [],
                namespace=self.namespace or "",
                registry=self.registry,
                **kwargs_with_buckets,
            )
        return self._metrics[metric_name]  # type: ignore

    def get_sample_value(self, name: str, labels: dict[str, str] | None = None) -> float | None:
        """Returns the current value of a sample, or `None` if it does not exist.

        `name` is the full sample name as exposed, without the namespace prefix
        (for example `contract_calls_total`).
        """
        full_name = f"{self.namespace}_{name}" if self.namespace else name
        return self.registry.get_sample_value(self._format_name(full_name), labels or {})

    def _format_name(self, name: str) -> str:
        return name.replace("-", "_").replace(".", "_")

    def generate_metrics(self) -> bytes:
        """Renders the registry in the Prometheus text exposition format."""
        return generate_latest(self.registry)
