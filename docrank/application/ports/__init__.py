"""Application ports package.

Re-exports the ports from their individual modules.
"""

from docrank.application.ports.telemetry_port import TelemetryPort
from docrank.application.ports.type_distance_port import TypeDistancePort

__all__ = [
    "TelemetryPort",
    "TypeDistancePort",
]
