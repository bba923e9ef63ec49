"""Shared telemetry: logging setup and tracing helpers."""

from admin_core.shared.telemetry.logging import setup_logging
from admin_core.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    traced,
)

__all__ = [
    "setup_logging",
    "traced",
    "add_span_attributes",
    "add_span_event",
]
