# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""
Tests for the constraint model.

- Classes become ExactType (isinstance semantics, subclasses accepted)
- Lists of classes and typing unions become UnionType (exact runtime type)
- Callables become Predicate
- Anything else is an InvalidDeclaration, raised regardless of mode
"""
from __future__ import annotations

from typing import Any, List, Optional, Protocol, Union

import pytest

from argguard.config import Mode
from argguard.exceptions import IncorrectArgumentType, InvalidDeclaration
from argguard.runtime import notify
from argguard.validation import (
    ExactType,
    Predicate,
    UnionType,
    evaluate,
    to_constraint,
    validate,
)


class Base:
    pass


class Child(Base):
    pass


class Closeable(Protocol):
    def close(self) -> None: ...


# ------------------------------------------------------------------
# Coercion
# ------------------------------------------------------------------


def test_class_becomes_exact_type():
    assert to_constraint("p", str) == ExactType(str)


@pytest.mark.parametrize(
    "declared,expected",
    [
        ([str, int], (str, int)),
        ((str, None), (str, type(None))),
        ([int, int, None], (int, type(None))),
        (Optional[int], (int, type(None))),
        (Union[str, bytes], (str, bytes)),
        (int | None, (int, type(None))),
    ],
)
def test_union_shapes_become_union_type(declared, expected):
    assert to_constraint("p", declared) == UnionType(expected)


def test_callable_becomes_predicate():
    def matcher(argument_name, argument_value, mode_override=None):
        return None

    constraint = to_constraint("p", matcher)

    assert isinstance(constraint, Predicate)
    assert constraint.fn is matcher


def test_existing_constraints_are_kept_as_is():
    constraint = UnionType((str,))
    assert to_constraint("p", constraint) is constraint


@pytest.mark.parametrize(
    "declared", [1234, "str", [], [str, 1], {"a": str}, List[int], Any, Closeable]
)
def test_invalid_shapes_raise_invalid_declaration(declared):
    with pytest.raises(InvalidDeclaration) as exc_info:
        to_constraint("param1", declared)

    assert "Invalid type declaration for: 'param1'" in str(exc_info.value)


# ------------------------------------------------------------------
# Evaluation
# ------------------------------------------------------------------


def test_exact_type_accepts_subclasses():
    evaluate(ExactType(Base), "p", Child())


def test_exact_type_rejects_other_types():
    with pytest.raises(IncorrectArgumentType) as exc_info:
        evaluate(ExactType(type(None)), "param1", "foo")

    assert str(exc_info.value) == "Expected argument 'param1' to be a 'NoneType', but got 'str'"


def test_union_type_matches_any_member():
    constraint = UnionType((str, int))
    evaluate(constraint, "p", "foo")
    evaluate(constraint, "p", 1)


def test_union_type_uses_exact_runtime_type():
    """A subclass instance is not a member of a union naming only its base."""
    with pytest.raises(IncorrectArgumentType):
        evaluate(UnionType((Base, type(None))), "p", Child())


def test_union_type_failure_message_lists_members():
    with pytest.raises(IncorrectArgumentType) as exc_info:
        evaluate(UnionType((type(None), int)), "param1", "foo")

    assert str(exc_info.value) == "Expected argument 'param1' to be a '[NoneType, int]', but got 'str'"


def test_predicate_receives_name_value_and_override():
    seen = []

    def matcher(argument_name, argument_value, mode_override):
        seen.append((argument_name, argument_value, mode_override))
        return False  # return values are ignored

    evaluate(Predicate(matcher), "p", 42, Mode.WARN)

    assert seen == [("p", 42, Mode.WARN)]


def test_predicate_arguments_are_passed_positionally(warn_logger):
    """GIVEN a matcher written with its own parameter names
    WHEN it is used in a declaration
    THEN it receives name, value and override in that order
    """

    def positive(name, value, mode=None):
        if value <= 0:
            notify(mode, IncorrectArgumentType, f"{name} must be positive")

    validate({"p": positive}, {"p": 1})
    validate({"p": positive}, {"p": -1})

    warn_logger.warning.assert_called_once_with("IncorrectArgumentType: p must be positive")


def test_evaluate_rejects_non_constraints():
    with pytest.raises(InvalidDeclaration):
        evaluate(str, "p", "foo")


def test_predicate_describe_prefers_description():
    assert Predicate(print, description="custom").describe() == "custom"
    assert Predicate(print).describe() == "print"
