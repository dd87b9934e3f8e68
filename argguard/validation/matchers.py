# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Matcher factories for structured argument shapes.

Each factory returns a :class:`~argguard.validation.base.Predicate`. The
predicate stops after a wrong container kind, but otherwise reports every
missing key, missing capability or content mismatch it finds; whether the
first report aborts the call is up to the failure mode.

.. note::

   ``sequence_of`` compares the *set* of element types present in the value
   with the declared set, and the two must be equal. ``sequence_of(str, None)``
   therefore rejects ``["a", "b"]`` because no ``None`` element is present,
   and every ``sequence_of`` rejects an empty sequence.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from typing import Any

from ..exceptions import IncorrectArgumentType, InvalidDeclaration
from ..runtime.dispatch import notify
from .base import NoneType, Predicate, format_types

SEQUENCE_OF_NOT_GIVEN_SEQUENCE = "Expected a sequence to be passed as argument '%s', but got %r"
SEQUENCE_OF_INVALID_CONTENT = "Expected sequence passed as argument '%s' to contain only %s, but got %s"

MAPPING_WITH_NOT_GIVEN_MAPPING = "Expected a mapping to be passed as argument '%s', but got %r"
MAPPING_WITH_MISSING_KEY = "Expected mapping passed as argument '%s' to have key %r, but it did not"

WITH_CAPABILITIES_MISSING = "Expected object passed as argument '%s' to respond to '.%s', but it did not"

_TEXT_TYPES = (str, bytes, bytearray)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def sequence_of(*allowed_types) -> Predicate:
    """Match a sequence whose distinct element types are exactly *allowed_types*."""

    allowed = []
    for member in allowed_types:
        cls = NoneType if member is None else member
        if not isinstance(cls, type):
            raise InvalidDeclaration(f"sequence_of() expects classes, got {member!r}")
        if cls not in allowed:
            allowed.append(cls)
    if not allowed:
        raise InvalidDeclaration("sequence_of() expects at least one class")
    allowed_set = frozenset(allowed)

    def check(argument_name: str, argument_value: Any, mode_override=None) -> None:
        if not _is_sequence(argument_value):
            notify(
                mode_override,
                IncorrectArgumentType,
                SEQUENCE_OF_NOT_GIVEN_SEQUENCE % (argument_name, argument_value),
            )
            return

        actual = list(dict.fromkeys(type(item) for item in argument_value))
        if frozenset(actual) != allowed_set:
            notify(
                mode_override,
                IncorrectArgumentType,
                SEQUENCE_OF_INVALID_CONTENT
                % (argument_name, format_types(allowed), format_types(actual)),
            )

    return Predicate(check, description=f"sequence_of({', '.join(c.__name__ for c in allowed)})")


def mapping_with(*expected_keys: Hashable) -> Predicate:
    """Match a mapping that has every key in *expected_keys* (extra keys allowed)."""

    for key in expected_keys:
        if not isinstance(key, Hashable):
            raise InvalidDeclaration(f"mapping_with() expects hashable keys, got {key!r}")
    keys = tuple(expected_keys)

    def check(argument_name: str, argument_value: Any, mode_override=None) -> None:
        if not isinstance(argument_value, Mapping):
            notify(
                mode_override,
                IncorrectArgumentType,
                MAPPING_WITH_NOT_GIVEN_MAPPING % (argument_name, argument_value),
            )
            return

        for key in keys:
            if key not in argument_value:
                notify(
                    mode_override,
                    IncorrectArgumentType,
                    MAPPING_WITH_MISSING_KEY % (argument_name, key),
                )

    return Predicate(check, description=f"mapping_with({', '.join(repr(k) for k in keys)})")


def with_capabilities(*method_names: str) -> Predicate:
    """Match any object exposing a callable attribute for each of *method_names*."""

    for name in method_names:
        if not isinstance(name, str) or not name.isidentifier():
            raise InvalidDeclaration(f"with_capabilities() expects method names, got {name!r}")
    names = tuple(method_names)

    def check(argument_name: str, argument_value: Any, mode_override=None) -> None:
        for name in names:
            if not callable(getattr(argument_value, name, None)):
                notify(
                    mode_override,
                    IncorrectArgumentType,
                    WITH_CAPABILITIES_MISSING % (argument_name, name),
                )

    return Predicate(check, description=f"with_capabilities({', '.join(names)})")


__all__ = [
    "mapping_with",
    "sequence_of",
    "with_capabilities",
]
