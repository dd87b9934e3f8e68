# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for argguard."""

from __future__ import annotations

from .runtime import meter

validation_total = meter.create_counter(
    name="argguard.validation.total",
    description="Counts validate() calls, partitioned by whether the call completed or raised.",
    unit="1",
)

violation_total = meter.create_counter(
    name="argguard.violation.total",
    description="Counts value violations routed through the dispatcher, by error kind and effective mode.",
    unit="1",
)


__all__ = [
    "validation_total",
    "violation_total",
]
