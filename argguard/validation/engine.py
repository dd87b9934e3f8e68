# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Validation engine - checks an argument snapshot against a declaration.

Usage inside a routine::

    def render(template, context=None):
        validate({"template": str, "context": [dict, None]}, locals())
        ...

The snapshot must contain exactly the routine's bound parameters, so call
``validate`` before binding any other local name. Methods using ``super()``
carry ``__class__`` in ``locals()`` and closures carry their free variables;
use :func:`argguard.accepts` for those.

In ``raise`` mode the first violation aborts the call. In ``warn`` mode every
violation is logged and the routine carries on with the invalid values.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from ..config import get_config
from ..exceptions import ArgGuardError, InvalidDeclaration, UndeclaredArgument
from ..runtime.dispatch import notify, resolve_mode
from ..telemetry.metrics import validation_total
from .base import Constraint, to_constraint

logger = logging.getLogger(__name__)

INVALID_DECLARATION = (
    "Invalid type declaration. validate() expects a mapping of argument names to types, "
    "like: validate({'foo': str}, locals()). Received: %r"
)
INVALID_SNAPSHOT = "validate() expects a mapping of argument names to values, got %s"
UNDECLARED_ARGUMENTS = "Undeclared arguments: %s"
MISSING_ARGUMENTS = "Missing arguments: %s"


def compile_declaration(declaration: Any) -> Dict[str, Constraint]:
    """Turn a raw declaration into an ordered ``name -> Constraint`` dict.

    Raises :class:`InvalidDeclaration` for anything that is not a mapping of
    string names to recognised constraint shapes.
    """

    if not isinstance(declaration, Mapping):
        raise InvalidDeclaration(INVALID_DECLARATION % (declaration,))

    compiled: Dict[str, Constraint] = {}
    for argument_name, declared in declaration.items():
        if not isinstance(argument_name, str):
            raise InvalidDeclaration(INVALID_DECLARATION % (declaration,))
        compiled[argument_name] = to_constraint(argument_name, declared)
    return compiled


def validate(
    declaration: Mapping[str, Any],
    snapshot: Mapping[str, Any],
    mode_override: Optional[Any] = None,
) -> None:
    """Validate *snapshot* against *declaration*.

    Args:
        declaration: Argument name to type, list of types, or matcher.
        snapshot: Argument name to the value bound for this call.
        mode_override: ``"raise"`` or ``"warn"`` to bypass the configured mode
            for this call only.

    Raises:
        InvalidDeclaration: The declaration or snapshot is malformed.
        ConfigurationError: *mode_override* is not a known mode.
        UndeclaredArgument: Names differ between snapshot and declaration
            (``raise`` mode).
        IncorrectArgumentType: A value fails its constraint (``raise`` mode).
    """

    constraints = compile_declaration(declaration)
    if not isinstance(snapshot, Mapping):
        raise InvalidDeclaration(INVALID_SNAPSHOT % type(snapshot).__name__)
    resolve_mode(mode_override, get_config().mode)

    logger.debug(
        "Validating %d declared argument(s) against %d bound value(s)",
        len(constraints),
        len(snapshot),
    )

    try:
        undeclared = [name for name in snapshot if name not in constraints]
        if undeclared:
            notify(mode_override, UndeclaredArgument, UNDECLARED_ARGUMENTS % (undeclared,))

        missing = [name for name in constraints if name not in snapshot]
        if missing:
            notify(mode_override, UndeclaredArgument, MISSING_ARGUMENTS % (missing,))

        for argument_name, constraint in constraints.items():
            if argument_name not in snapshot:
                continue
            constraint.check(argument_name, snapshot[argument_name], mode_override)
    except ArgGuardError:
        validation_total.add(1, {"status": "raised"})
        raise

    validation_total.add(1, {"status": "completed"})


__all__ = [
    "compile_declaration",
    "validate",
]
