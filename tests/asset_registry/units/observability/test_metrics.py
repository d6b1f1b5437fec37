"""Tests for the Prometheus metrics registry."""

import pytest
from prometheus_client import Counter, Histogram

from asset_registry.observability.metrics import PrometheusMetricsRegistry


@pytest.mark.unit
class TestPrometheusMetricsRegistry:
    """Test cases for PrometheusMetricsRegistry."""

    def test_counter_is_created_once(self) -> None:
        metrics = PrometheusMetricsRegistry()

        first = metrics.counter("calls", "Calls")
        second = metrics.counter("calls", "Calls")

        assert isinstance(first, Counter)
        assert first is second

    def test_names_are_sanitized(self) -> None:
        metrics = PrometheusMetricsRegistry()

        metrics.counter("register-asset.calls", "Calls").inc()

        assert metrics.get_sample_value("register_asset_calls_total") == 1

    def test_namespace_prefix(self) -> None:
        metrics = PrometheusMetricsRegistry(namespace="registry")

        metrics.counter("calls", "Calls", labels=["function"]).labels(function="get-asset").inc(2)

        assert metrics.get_sample_value("calls_total", {"function": "get-asset"}) == 2
        assert b"registry_calls_total" in metrics.generate_metrics()

    def test_histogram_buckets(self) -> None:
        metrics = PrometheusMetricsRegistry()

        histogram = metrics.histogram("latency_seconds", "Latency", buckets=(0.1, 1.0))
        histogram.observe(0.5)

        assert isinstance(histogram, Histogram)
        assert metrics.get_sample_value("latency_seconds_bucket", {"le": "0.1"}) == 0
        assert metrics.get_sample_value("latency_seconds_bucket", {"le": "1.0"}) == 1
        assert metrics.get_sample_value("latency_seconds_count") == 1

    def test_registries_are_independent(self) -> None:
        first = PrometheusMetricsRegistry()
        second = PrometheusMetricsRegistry()

        first.counter("calls", "Calls").inc()
        second.counter("calls", "Calls")

        assert first.get_sample_value("calls_total") == 1
        assert second.get_sample_value("calls_total") == 0

    def test_missing_sample(self) -> None:
        assert PrometheusMetricsRegistry().get_sample_value("unknown_total") is None
