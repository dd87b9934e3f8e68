# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Source inspection helpers for test suites.

These answer "does this function declare its input types?" by parsing the
function's source, without running it. A function declares input types when
it is decorated with ``accepts`` or calls ``validate`` in its own body::

    def test_service_declares_types():
        assert_declares_input_types(MyService)
"""

from __future__ import annotations

import ast
import inspect
import logging
import textwrap
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)

DECORATOR_ENTRY_POINT = "accepts"
CALL_ENTRY_POINT = "validate"
PACKAGE_NAME = "argguard"

_SCOPE_NODES = (ast.FunctionDef, ast.AsyncFunctionDef, ast.Lambda, ast.ClassDef)


def _callee_name(node: ast.AST) -> Optional[str]:
    if isinstance(node, ast.Call):
        node = node.func
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        return node.attr
    return None


def _is_validate_call(node: ast.AST) -> bool:
    if not isinstance(node, ast.Call):
        return False
    func = node.func
    if isinstance(func, ast.Name):
        return func.id == CALL_ENTRY_POINT
    if isinstance(func, ast.Attribute):
        return (
            func.attr == CALL_ENTRY_POINT
            and isinstance(func.value, ast.Name)
            and func.value.id == PACKAGE_NAME
        )
    return False


def _walk_own_scope(statements):
    """Yield every node in *statements* without entering nested scopes."""

    pending = list(statements)
    while pending:
        node = pending.pop()
        if isinstance(node, _SCOPE_NODES):
            continue
        yield node
        pending.extend(ast.iter_child_nodes(node))


def _function_node(func: Callable) -> ast.AST:
    target = inspect.unwrap(func)
    if not inspect.isfunction(target):
        raise ValueError(f"Expected a function, got {type(target).__name__}")

    try:
        source = inspect.getsource(target)
    except (OSError, TypeError) as exc:
        raise ValueError(
            f"Could not find source for '{target.__qualname__}'. "
            "Dynamically created functions cannot be inspected."
        ) from exc

    tree = ast.parse(textwrap.dedent(source))
    for node in tree.body:
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
            return node
    raise ValueError(f"Could not locate the definition of '{target.__qualname__}' in its source")


def declares_input_types(target: Any, method_name: Optional[str] = None) -> bool:
    """Return whether a function (or ``target.method_name``) declares input types."""

    func = target
    if method_name is not None:
        try:
            func = inspect.getattr_static(target, method_name)
        except AttributeError:
            raise ValueError(
                f"No method '{method_name}' found on '{getattr(target, '__qualname__', target)}', "
                "did you spell the method name correctly?"
            ) from None
        if isinstance(func, (staticmethod, classmethod)):
            func = func.__func__

    node = _function_node(func)

    for decorator in node.decorator_list:
        if _callee_name(decorator) == DECORATOR_ENTRY_POINT:
            return True

    found = any(_is_validate_call(child) for child in _walk_own_scope(node.body))
    logger.debug("%s declares input types: %s", node.name, found)
    return found


def _own_methods(cls: type):
    for name, member in vars(cls).items():
        if isinstance(member, (staticmethod, classmethod)):
            member = member.__func__
        if not inspect.isfunction(member):
            continue
        if name.startswith("__") and name.endswith("__") and name != "__init__":
            continue
        yield name, member


def undeclared_methods(cls: type) -> List[str]:
    """Names of the methods defined on *cls* that do not declare input types."""

    return [name for name, member in _own_methods(cls) if not declares_input_types(member)]


def assert_declares_input_types(cls: type) -> None:
    """Fail with one line per method of *cls* that does not declare input types."""

    failures = [
        f"Expected '{cls.__qualname__}.{name}' to declare input types by using "
        f"`{DECORATOR_ENTRY_POINT}` or `{CALL_ENTRY_POINT}`, but it did not."
        for name in undeclared_methods(cls)
    ]
    if failures:
        raise AssertionError("\n".join(failures))


__all__ = [
    "assert_declares_input_types",
    "declares_input_types",
    "undeclared_methods",
]
