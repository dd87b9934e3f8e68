# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry meter shared by the argguard instruments.

Only the metrics *API* is used; without an SDK installed every instrument is
a no-op.
"""

from __future__ import annotations

from opentelemetry import metrics

meter = metrics.get_meter("argguard")

__all__ = ["meter"]
