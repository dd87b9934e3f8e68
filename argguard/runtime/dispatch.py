# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Failure-policy dispatcher.

Every value violation found by the engine or a matcher ends up here. The
effective mode is the per-call override when one is given, otherwise the
mode of the active :class:`~argguard.config.GuardConfig`:

* ``raise``: the violation is raised as ``error_class(message)``.
* ``warn``: ``"<ErrorClass>: <message>"`` is passed to the configured
  logger's ``warning`` and the call continues with the invalid value.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Type

from ..config import MODE_VALUES, Mode, get_config, parse_mode
from ..exceptions import ArgGuardError, ConfigurationError
from ..telemetry.metrics import violation_total

logger = logging.getLogger(__name__)

UNKNOWN_MODE = "Unknown notification mode, expected one of %s but got %r"


def resolve_mode(mode_override: Any, default: Mode) -> Mode:
    """Return the effective mode for *mode_override*, failing hard on unknown values."""

    if mode_override is None:
        return default
    mode = parse_mode(mode_override)
    if mode is None:
        raise ConfigurationError(UNKNOWN_MODE % (list(MODE_VALUES), mode_override))
    return mode


def notify(
    mode_override: Optional[Any],
    error_class: Type[ArgGuardError],
    message: str,
) -> None:
    """Raise or log a single violation according to the effective mode."""

    configured_mode, sink = get_config().resolve()
    mode = resolve_mode(mode_override, configured_mode)

    violation_total.add(1, {"kind": error_class.__name__, "mode": mode.value})

    if mode is Mode.RAISE:
        logger.debug("Raising %s: %s", error_class.__name__, message)
        raise error_class(message)

    sink.warning(f"{error_class.__name__}: {message}")


__all__ = [
    "UNKNOWN_MODE",
    "notify",
    "resolve_mode",
]
