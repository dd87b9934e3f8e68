# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for argguard.

Two families share the :class:`ArgGuardError` base:

* Wiring errors (:class:`InvalidDeclaration`, :class:`ConfigurationError`)
  are always raised, whatever the failure mode.
* Value violations (:class:`IncorrectArgumentType`,
  :class:`UndeclaredArgument`) go through the notification dispatcher and
  are raised or logged depending on the active mode.
"""

from __future__ import annotations


class ArgGuardError(Exception):
    """Base class for every error raised by argguard."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidDeclaration(ArgGuardError, TypeError):
    """The declaration itself is malformed (not a mapping, unknown constraint shape)."""


class ConfigurationError(ArgGuardError, ValueError):
    """An invalid mode or logger was supplied to the configuration."""


class IncorrectArgumentType(ArgGuardError, TypeError):
    """An argument value does not satisfy its declared constraint."""


class UndeclaredArgument(ArgGuardError, TypeError):
    """Bound argument names and declared names do not line up."""


__all__ = [
    "ArgGuardError",
    "ConfigurationError",
    "IncorrectArgumentType",
    "InvalidDeclaration",
    "UndeclaredArgument",
]
