"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from whitehall.shared.telemetry.logging import setup_logging
from whitehall.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from whitehall.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
]
