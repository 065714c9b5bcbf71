"""OpenTelemetry adapter for ranking metrics.

Why: Request counts, candidate set sizes and best costs show whether ranking
keeps up with the index and whether queries find close matches.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import import_module
from typing import Any

from docrank.application.ports import TelemetryPort

logger = logging.getLogger(__name__)


@dataclass
class OtelConfig:
    """Configuration for OpenTelemetry."""

    service_name: str = "docrank"
    otlp_endpoint: str | None = None  # e.g., "http://localhost:4317"
    environment: str = "production"
    enable_console: bool = False


class OpenTelemetryAdapter(TelemetryPort):
    """OpenTelemetry adapter for ranking metrics.

    Metrics:
    - Counters: incr() for events (rank requests by status)
    - Histograms: observe() for distributions (candidates per query, best cost)

    Note: Without opentelemetry-sdk installed every call is a no-op, and metric
          errors never interrupt ranking.
    """

    def __init__(self, cfg: OtelConfig) -> None:
        self._cfg = cfg
        self._meter: Any | None = None
        self._counters: dict[str, Any] = {}
        self._histograms: dict[str, Any] = {}
        self._init_otel()

    @property
    def enabled(self) -> bool:
        return self._meter is not None

    def _init_otel(self) -> None:
        """Set up the meter provider (OTLP and/or console readers) with lazy imports."""
        try:
            otel_sdk = import_module("opentelemetry.sdk.metrics")
            otel_export = import_module("opentelemetry.sdk.metrics.export")
            otel_metrics = import_module("opentelemetry.metrics")
            otel_resources = import_module("opentelemetry.sdk.resources")

            resource = otel_resources.Resource.create(
                {
                    "service.name": self._cfg.service_name,
                    "deployment.environment": self._cfg.environment,
                }
            )

            readers = []
            if self._cfg.otlp_endpoint:
                otel_otlp = import_module("opentelemetry.exporter.otlp.proto.grpc.metric_exporter")
                otlp_exporter = otel_otlp.OTLPMetricExporter(endpoint=self._cfg.otlp_endpoint)
                readers.append(otel_export.PeriodicExportingMetricReader(otlp_exporter))
            if self._cfg.enable_console:
                console_exporter = otel_export.ConsoleMetricExporter()
                readers.append(otel_export.PeriodicExportingMetricReader(console_exporter))

            provider = otel_sdk.MeterProvider(resource=resource, metric_readers=readers)
            otel_metrics.set_meter_provider(provider)
            self._meter = otel_metrics.get_meter(__name__)

        except Exception as e:
            # Metrics become no-ops without opentelemetry-sdk
            logger.info("OpenTelemetry unavailable, metrics disabled: %s", e)
            self._meter = None

    def incr(self, name: str, tags: dict[str, Any] | None = None) -> None:
        """Increment a counter metric.

        Examples:
            - incr("docrank.rank.requests", {"status": "success"})
            - incr("docrank.rank.requests", {"status": "failure", "error_type": "ValidationError"})
        """
        if self._meter is None:
            return

        try:
            if name not in self._counters:
                self._counters[name] = self._meter.create_counter(
                    name=name,
                    description=f"Counter for {name}",
                )
            self._counters[name].add(1, attributes=tags)
        except Exception as e:
            logger.debug("counter %s not recorded: %s", name, e)

    def observe(self, name: str, value: float, tags: dict[str, Any] | None = None) -> None:
        """Observe a value for histogram metric.

        Examples:
            - observe("docrank.rank.candidates", 250)
            - observe("docrank.rank.best_cost", 15)
        """
        if self._meter is None:
            return

        try:
            if name not in self._histograms:
                self._histograms[name] = self._meter.create_histogram(
                    name=name,
                    description=f"Histogram for {name}",
                )
            self._histograms[name].record(value, attributes=tags)
        except Exception as e:
            logger.debug("histogram %s not recorded: %s", name, e)
