"""Telemetry package - OpenTelemetry metric instruments."""

from .metrics import validation_total, violation_total

__all__ = [
    "validation_total",
    "violation_total",
]
