# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""argguard - declarative runtime argument validation.

Declare the expected type of each parameter and check it on every call::

    from argguard import accepts, sequence_of, validate

    @accepts({"name": str, "aliases": sequence_of(str)})
    def register(name, aliases): ...

    def lookup(key, default=None):
        validate({"key": str, "default": [int, None]}, locals())
        ...

A declared type is a class (``isinstance`` check), a list of classes (the
value's exact type must be one of them, ``None`` means ``NoneType``), a
``typing`` union, or a matcher: ``sequence_of``, ``mapping_with``,
``with_capabilities`` or any callable taking ``(argument_name,
argument_value, mode_override)`` positionally.

``locals()`` also holds ``__class__`` in methods that use ``super()`` and
free variables in closures. Those names are reported as undeclared, so
decorate such functions with :func:`accepts` instead.

Failure modes
-------------

``raise`` (default): the first violation raises
:class:`IncorrectArgumentType` or :class:`UndeclaredArgument`.

``warn``: each violation is passed to the configured logger's ``warning``
as ``"<ErrorClass>: <message>"`` and **the function keeps running with the
invalid values**.

Set the mode with :func:`set_mode`, :func:`configure`, the ``ARGGUARD_MODE``
environment variable, or per call (``mode_override`` / ``accepts(mode=...)``).
Malformed declarations and bad configuration always raise.
"""

from .config import (
    GuardConfig,
    Mode,
    configure,
    configure_from_file,
    get_config,
    get_logger,
    get_mode,
    set_logger,
    set_mode,
    use_config,
)
from .decorator import accepts
from .exceptions import (
    ArgGuardError,
    ConfigurationError,
    IncorrectArgumentType,
    InvalidDeclaration,
    UndeclaredArgument,
)
from .validation import (
    ExactType,
    Predicate,
    UnionType,
    mapping_with,
    sequence_of,
    validate,
    with_capabilities,
)

__version__ = "0.1.0"

__all__ = [
    "ArgGuardError",
    "ConfigurationError",
    "ExactType",
    "GuardConfig",
    "IncorrectArgumentType",
    "InvalidDeclaration",
    "Mode",
    "Predicate",
    "UndeclaredArgument",
    "UnionType",
    "accepts",
    "configure",
    "configure_from_file",
    "get_config",
    "get_logger",
    "get_mode",
    "mapping_with",
    "sequence_of",
    "set_logger",
    "set_mode",
    "use_config",
    "validate",
    "with_capabilities",
]
