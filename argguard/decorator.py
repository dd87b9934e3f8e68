# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

# argguard/decorator.py

import functools
import inspect
import logging
from typing import Any, Callable, Mapping, Optional

from .config import Mode
from .exceptions import InvalidDeclaration
from .runtime.dispatch import resolve_mode
from .validation.engine import compile_declaration, validate

logger = logging.getLogger(__name__)

_IMPLICIT_RECEIVERS = ("self", "cls")


def accepts(declaration: Mapping[str, Any], *, mode: Optional[Any] = None):
    """
    Declare the expected argument types of a function.

    The declaration is checked when the decorator is applied; on every call
    the bound arguments (defaults included) are validated before the wrapped
    function runs. A leading ``self`` or ``cls`` parameter is left out of the
    snapshot unless it is declared.

    :param declaration: Mapping of parameter name to a class, a list of
                        classes, or a matcher such as ``sequence_of(str)``.
    :param mode: Optional. ``"raise"`` or ``"warn"`` to override the
                 configured failure mode for this function only.

    .. code-block:: python

        from argguard import accepts, mapping_with, sequence_of

        @accepts({"name": str, "tags": sequence_of(str), "extra": [dict, None]})
        def create(name, tags, extra=None): ...

        class Renderer:
            @accepts({"options": mapping_with("width", "height")}, mode="warn")
            def render(self, options): ...

    In ``warn`` mode the function still runs when validation fails; the
    violations are only logged.
    """

    constraints = compile_declaration(declaration)
    resolve_mode(mode, Mode.RAISE)

    def decorator(func: Callable):
        signature = inspect.signature(func)
        parameter_names = list(signature.parameters)

        unknown = [name for name in constraints if name not in signature.parameters]
        if unknown:
            raise InvalidDeclaration(
                f"Declared argument(s) {unknown} are not parameters of '{func.__qualname__}'"
            )

        skipped = None
        if parameter_names and parameter_names[0] in _IMPLICIT_RECEIVERS and parameter_names[0] not in constraints:
            skipped = parameter_names[0]

        def _snapshot(args, kwargs):
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            return {name: value for name, value in bound.arguments.items() if name != skipped}

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            """Wrapper for synchronous functions."""
            validate(constraints, _snapshot(args, kwargs), mode)
            return func(*args, **kwargs)

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            """Wrapper for asynchronous functions."""
            validate(constraints, _snapshot(args, kwargs), mode)
            return await func(*args, **kwargs)

        if inspect.iscoroutinefunction(func):
            wrapper = async_wrapper
        else:
            wrapper = sync_wrapper

        logger.debug("Declared input types for %s: %s", func.__qualname__, list(constraints))
        # Attach the compiled declaration for introspection
        wrapper.__argguard_declaration__ = constraints
        return wrapper

    return decorator


__all__ = ["accepts"]
