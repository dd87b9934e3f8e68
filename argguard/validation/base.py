# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Constraint model: the three shapes a declared argument type can take.

``ExactType`` and ``UnionType`` compare the runtime type of a value;
``Predicate`` wraps a matcher callable that reports its own violations.
Raw declaration values (classes, lists of classes, ``typing`` unions,
callables) are turned into one of these by :func:`to_constraint`.
"""

from __future__ import annotations

import types
import typing
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Tuple, Union

from ..exceptions import IncorrectArgumentType, InvalidDeclaration
from ..runtime.dispatch import notify

INCORRECT_ARGUMENT_TYPE = "Expected argument '%s' to be a '%s', but got '%s'"
INVALID_TYPE = (
    "Invalid type declaration for: '%s'. Type declaration should be a class (`str`), "
    "a list of classes (`[str, None]`), or a matcher (`sequence_of(str)`). Received: %r"
)

NoneType = type(None)

_UNION_ORIGINS = (typing.Union, types.UnionType)


def type_name(cls: type) -> str:
    return cls.__name__


def format_types(classes: Iterable[type]) -> str:
    """Render classes as ``[str, NoneType]``."""

    return "[" + ", ".join(type_name(c) for c in classes) + "]"


@dataclass(frozen=True)
class ExactType:
    """Value must be an instance of ``type`` (subclasses included)."""

    type: type

    def describe(self) -> str:
        return type_name(self.type)

    def check(self, argument_name: str, argument_value: Any, mode_override=None) -> None:
        if not isinstance(argument_value, self.type):
            notify(
                mode_override,
                IncorrectArgumentType,
                INCORRECT_ARGUMENT_TYPE
                % (argument_name, self.describe(), type_name(type(argument_value))),
            )


@dataclass(frozen=True)
class UnionType:
    """Value's exact runtime type must be one of ``types``."""

    types: Tuple[type, ...]

    def describe(self) -> str:
        return format_types(self.types)

    def check(self, argument_name: str, argument_value: Any, mode_override=None) -> None:
        if type(argument_value) not in self.types:
            notify(
                mode_override,
                IncorrectArgumentType,
                INCORRECT_ARGUMENT_TYPE
                % (argument_name, self.describe(), type_name(type(argument_value))),
            )


@dataclass(frozen=True)
class Predicate:
    """A matcher that reports its own violations.

    ``fn`` is called positionally as ``fn(argument_name, argument_value,
    mode_override)``; it signals failure by calling
    :func:`argguard.runtime.notify`, and its return value is ignored.
    """

    fn: Callable[..., Any]
    description: str = field(default="")

    def describe(self) -> str:
        return self.description or getattr(self.fn, "__qualname__", repr(self.fn))

    def check(self, argument_name: str, argument_value: Any, mode_override=None) -> None:
        self.fn(argument_name, argument_value, mode_override)


Constraint = Union[ExactType, UnionType, Predicate]
CONSTRAINT_TYPES = (ExactType, UnionType, Predicate)


def _as_class(member: Any) -> Optional[type]:
    if member is None:
        return NoneType
    if isinstance(member, type):
        return member
    return None


def _union_of(argument_name: str, declared: Any, members: Iterable[Any]) -> UnionType:
    classes = []
    for member in members:
        cls = _as_class(member)
        if cls is None:
            raise InvalidDeclaration(INVALID_TYPE % (argument_name, declared))
        if cls not in classes:
            classes.append(cls)
    if not classes:
        raise InvalidDeclaration(INVALID_TYPE % (argument_name, declared))
    return UnionType(tuple(classes))


def to_constraint(argument_name: str, declared: Any) -> Constraint:
    """Coerce a raw declaration value into a :data:`Constraint`."""

    if isinstance(declared, CONSTRAINT_TYPES):
        return declared

    if declared is typing.Any:
        raise InvalidDeclaration(INVALID_TYPE % (argument_name, declared))

    if isinstance(declared, type):
        try:
            isinstance(None, declared)
        except TypeError:
            # typing.Any and runtime-uncheckable protocols are classes too.
            raise InvalidDeclaration(INVALID_TYPE % (argument_name, declared)) from None
        return ExactType(declared)

    if isinstance(declared, (list, tuple)):
        return _union_of(argument_name, declared, declared)

    origin = typing.get_origin(declared)
    if origin in _UNION_ORIGINS or isinstance(declared, types.UnionType):
        return _union_of(argument_name, declared, typing.get_args(declared))
    if origin is not None:
        # Subscripted generics such as List[int] are callable but not matchers.
        raise InvalidDeclaration(INVALID_TYPE % (argument_name, declared))

    if callable(declared):
        return Predicate(declared)

    raise InvalidDeclaration(INVALID_TYPE % (argument_name, declared))


def evaluate(constraint: Any, argument_name: str, argument_value: Any, mode_override=None) -> None:
    """Check *argument_value* against *constraint*, notifying on failure."""

    if not isinstance(constraint, CONSTRAINT_TYPES):
        raise InvalidDeclaration(INVALID_TYPE % (argument_name, constraint))
    constraint.check(argument_name, argument_value, mode_override)


__all__ = [
    "CONSTRAINT_TYPES",
    "Constraint",
    "ExactType",
    "INCORRECT_ARGUMENT_TYPE",
    "INVALID_TYPE",
    "NoneType",
    "Predicate",
    "UnionType",
    "evaluate",
    "format_types",
    "to_constraint",
    "type_name",
]
