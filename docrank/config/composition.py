from docrank.application.ports.telemetry_port import TelemetryPort
from docrank.application.ports.type_distance_port import TypeDistancePort
from docrank.application.use_cases.rank_entries import RankEntries
from docrank.config.settings import AppSettings
from docrank.infrastructure.telemetry.otel_adapter import OpenTelemetryAdapter, OtelConfig
from docrank.infrastructure.type_distance.rapidfuzz_adapter import RapidFuzzTypeDistance


def build_type_distance(settings: AppSettings) -> TypeDistancePort:
    return RapidFuzzTypeDistance(metric=settings.type_distance_metric)


def build_telemetry(settings: AppSettings) -> TelemetryPort | None:
    """Build telemetry adapter, or None when TELEMETRY_ENABLED is false.

    Note:
        Without opentelemetry-sdk the adapter is built but records nothing.
    """
    if not settings.telemetry_enabled:
        return None
    return OpenTelemetryAdapter(
        OtelConfig(
            service_name=settings.telemetry_service_name,
            otlp_endpoint=settings.otlp_endpoint or None,
            environment=settings.telemetry_environment,
        )
    )


def build_rank_use_case(settings: AppSettings | None = None) -> RankEntries:
    """Build RankEntries use case.

    Args:
        settings: Explicit settings; read from the environment when omitted.
    """
    settings = settings or AppSettings()
    return RankEntries(
        type_distance=build_type_distance(settings),
        telemetry=build_telemetry(settings),
        default_limit=settings.limit,
    )
