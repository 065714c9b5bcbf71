"""Application settings with environment-driven configuration.

Why: Single place that reads the environment; everything else receives
settings via dependency injection.
"""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AppSettings:
    """Application settings loaded from environment variables.

    This is the ONLY place where environment variables are read.
    All other layers receive settings via dependency injection.
    """

    # ===== Ranking Configuration =====
    type_distance_metric: str = field(
        default_factory=lambda: os.getenv("DOCRANK_TYPE_DISTANCE_METRIC", "levenshtein").lower()
    )
    # Supported: "levenshtein" | "indel"

    result_limit: int = field(
        default_factory=lambda: int(os.getenv("DOCRANK_RESULT_LIMIT", "50"))
    )
    # 0 = no limit

    # ===== Telemetry Configuration =====
    telemetry_enabled: bool = field(
        default_factory=lambda: os.getenv("TELEMETRY_ENABLED", "true").lower() == "true"
    )
    otlp_endpoint: str = field(default_factory=lambda: os.getenv("OTLP_ENDPOINT", ""))
    # Empty string = no OTLP export

    telemetry_environment: str = field(
        default_factory=lambda: os.getenv("TELEMETRY_ENVIRONMENT", "production")
    )
    telemetry_service_name: str = field(
        default_factory=lambda: os.getenv("TELEMETRY_SERVICE_NAME", "docrank")
    )

    @property
    def limit(self) -> int | None:
        return self.result_limit if self.result_limit > 0 else None
