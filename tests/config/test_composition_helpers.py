"""Tests for composition root (dependency injection/wiring).

The composition root is the ONLY place that:
1. Reads environment variables (via AppSettings)
2. Instantiates concrete infrastructure adapters
3. Wires dependencies into use cases
"""

from docrank.application.ports.type_distance_port import TypeDistancePort
from docrank.application.use_cases.rank_entries import RankEntries
from docrank.config.composition import (
    build_rank_use_case,
    build_telemetry,
    build_type_distance,
)
from docrank.config.settings import AppSettings
from docrank.infrastructure.telemetry.otel_adapter import OpenTelemetryAdapter
from docrank.infrastructure.type_distance.rapidfuzz_adapter import RapidFuzzTypeDistance


class TestCompositionRoot:
    def test_build_type_distance_returns_port_implementation(self, monkeypatch) -> None:
        monkeypatch.setenv("DOCRANK_TYPE_DISTANCE_METRIC", "Indel")
        adapter = build_type_distance(AppSettings())

        assert isinstance(adapter, TypeDistancePort)
        assert isinstance(adapter, RapidFuzzTypeDistance)
        assert adapter.metric == "indel"

    def test_build_telemetry_disabled(self, monkeypatch) -> None:
        monkeypatch.setenv("TELEMETRY_ENABLED", "false")
        assert build_telemetry(AppSettings()) is None

    def test_build_telemetry_enabled(self, monkeypatch) -> None:
        monkeypatch.setenv("TELEMETRY_ENABLED", "true")
        monkeypatch.delenv("OTLP_ENDPOINT", raising=False)
        assert isinstance(build_telemetry(AppSettings()), OpenTelemetryAdapter)

    def test_build_rank_use_case_wires_dependencies(self, monkeypatch) -> None:
        monkeypatch.setenv("TELEMETRY_ENABLED", "false")
        monkeypatch.setenv("DOCRANK_RESULT_LIMIT", "7")
        uc = build_rank_use_case()

        assert isinstance(uc, RankEntries)
        assert isinstance(uc.type_distance, RapidFuzzTypeDistance)
        assert uc.telemetry is None
        assert uc.default_limit == 7

    def test_zero_result_limit_means_unlimited(self, monkeypatch) -> None:
        monkeypatch.setenv("TELEMETRY_ENABLED", "false")
        monkeypatch.setenv("DOCRANK_RESULT_LIMIT", "0")
        assert build_rank_use_case().default_limit is None

    def test_explicit_settings_win(self) -> None:
        settings = AppSettings(result_limit=3, telemetry_enabled=False)
        assert build_rank_use_case(settings).default_limit == 3
