import logging
from typing import Optional, Dict

from opentelemetry import metrics
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter


class MetricsCollector:
    _instance = None

    @staticmethod
    def get_instance() -> "MetricsCollector":
        if MetricsCollector._instance is None:
            MetricsCollector._instance = MetricsCollector()
        return MetricsCollector._instance

    def __init__(self):
        self.meter = None
        self.meter_provider = None

        self.seed_runs_counter = None

        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def init_metrics(
        self,
        otel_collector_url: str,
        service_name: str = "personalwebsite_seeder",
        interval: int = 5000,
        service_version: str = "0.1.0",
        headers: Optional[Dict[str, str]] = None,
        timeout: int = 10,
    ) -> None:
        """
        Initializes OpenTelemetry metrics export via OTLP/HTTP.

        otel_collector_url MUST be an OTLP/HTTP metrics endpoint, usually:
        http://<collector-host>:4318/v1/metrics
        """
        if self._initialized:
            logging.getLogger(__name__).info("Metrics already initialized; skipping re-init.")
            return

        resource = Resource.create(
            {
                "service.name": service_name,
                "service.version": service_version,
            }
        )

        exporter = OTLPMetricExporter(
            endpoint=otel_collector_url,
            headers=headers,
            timeout=timeout,
        )

        reader = PeriodicExportingMetricReader(
            exporter,
            export_interval_millis=interval,
        )

        provider = MeterProvider(
            resource=resource,
            metric_readers=[reader],
        )

        self.meter_provider = provider
        metrics.set_meter_provider(provider)

        self.meter = metrics.get_meter(service_name)

        self.seed_runs_counter = self.meter.create_counter(
            "seed_runs", description="Counts seeder runs by outcome"
        )

        self._initialized = True
        logging.getLogger(__name__).info(
            "Metrics initialized for service=%s exporting_to=%s interval_ms=%s",
            service_name,
            otel_collector_url,
            interval,
        )

    def shutdown(self) -> None:
        # Flushes pending points; a one-shot script exits before the periodic reader fires
        if self.meter_provider is not None:
            self.meter_provider.shutdown()

    def _ensure_initialized(self) -> None:
        if not self._initialized or self.meter is None:
            raise RuntimeError(
                "MetricsCollector not initialized. Call init_metrics(...) once at startup."
            )

    def add_seed_outcome(self, outcome: str, db_name: str) -> None:
        self._ensure_initialized()

        self.seed_runs_counter.add(1, {"outcome": outcome, "database": db_name})
        logging.getLogger(__name__).info(
            "Pushed seed_runs metric for outcome=%s database=%s", outcome, db_name
        )
