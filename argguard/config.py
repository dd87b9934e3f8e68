# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Failure-policy configuration.

A :class:`GuardConfig` holds the failure mode (``raise`` or ``warn``) and the
logger that receives warnings in ``warn`` mode. One process-wide instance is
created at import time; its initial mode comes from ``ARGGUARD_MODE`` when
that variable is set. Code that should not touch shared state can run under
``use_config(GuardConfig(...))``, which swaps the configuration for the
current thread or asyncio task only.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Final, Iterator, Optional, Tuple, Union

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LOGGER_NAME = "argguard"
MODE_ENV_VAR = "ARGGUARD_MODE"


class Mode(str, Enum):
    """Failure policy applied to value violations."""

    RAISE = "raise"
    WARN = "warn"


MODE_VALUES: Final[Tuple[str, ...]] = tuple(m.value for m in Mode)

ModeLike = Union[Mode, str]


def parse_mode(value: Any) -> Optional[Mode]:
    """Return the :class:`Mode` matching *value*, or ``None`` if there is none."""

    if isinstance(value, Mode):
        return value
    if isinstance(value, str):
        try:
            return Mode(value.lower())
        except ValueError:
            return None
    return None


def _require_mode(value: Any) -> Mode:
    mode = parse_mode(value)
    if mode is None:
        raise ConfigurationError(
            f"argguard mode must be one of {list(MODE_VALUES)}, got {value!r}"
        )
    return mode


def _require_logger(value: Any):
    if not callable(getattr(value, "warning", None)):
        raise ConfigurationError("argguard logger expects an object that responds to .warning")
    return value


class GuardConfig:
    """Mode and warning sink used by the notification dispatcher.

    Both fields are validated on assignment and guarded by a lock, so a
    reader always sees a consistent ``(mode, logger)`` pair via :meth:`resolve`.
    """

    def __init__(self, mode: ModeLike = Mode.RAISE, logger=None):
        self._lock = threading.Lock()
        self._mode = _require_mode(mode)
        self._logger = _require_logger(
            logger if logger is not None else logging.getLogger(DEFAULT_LOGGER_NAME)
        )

    @property
    def mode(self) -> Mode:
        with self._lock:
            return self._mode

    @mode.setter
    def mode(self, value: ModeLike) -> None:
        mode = _require_mode(value)
        with self._lock:
            self._mode = mode

    @property
    def logger(self):
        with self._lock:
            return self._logger

    @logger.setter
    def logger(self, value) -> None:
        sink = _require_logger(value)
        with self._lock:
            self._logger = sink

    def resolve(self):
        """Return the current ``(mode, logger)`` pair atomically."""

        with self._lock:
            return self._mode, self._logger

    def __repr__(self) -> str:
        mode, sink = self.resolve()
        return f"GuardConfig(mode={mode.value!r}, logger={sink!r})"


def _mode_from_env() -> Mode:
    raw = os.getenv(MODE_ENV_VAR, "")
    if not raw:
        return Mode.RAISE
    return _require_mode(raw)


_DEFAULT_CONFIG: Final[GuardConfig] = GuardConfig(mode=_mode_from_env())
_ACTIVE_CONFIG: contextvars.ContextVar[Optional[GuardConfig]] = contextvars.ContextVar(
    "argguard_config", default=None
)


def get_default_config() -> GuardConfig:
    """Return the process-wide configuration instance."""

    return _DEFAULT_CONFIG


def get_config() -> GuardConfig:
    """Return the configuration active in the current context."""

    active = _ACTIVE_CONFIG.get()
    return active if active is not None else _DEFAULT_CONFIG


@contextlib.contextmanager
def use_config(config: GuardConfig) -> Iterator[GuardConfig]:
    """Run the enclosed block with *config* instead of the process-wide one."""

    if not isinstance(config, GuardConfig):
        raise ConfigurationError(f"use_config expects a GuardConfig, got {type(config).__name__}")
    token = _ACTIVE_CONFIG.set(config)
    try:
        yield config
    finally:
        _ACTIVE_CONFIG.reset(token)


def set_mode(mode: ModeLike) -> None:
    get_config().mode = mode


def get_mode() -> Mode:
    return get_config().mode


def set_logger(sink) -> None:
    """Route ``warn``-mode violations to *sink*.

    The sink follows the :class:`logging.Logger` protocol and must expose
    ``warning(message)``. An object offering only ``warn`` is rejected with
    :class:`ConfigurationError`.
    """
    get_config().logger = sink


def get_logger():
    return get_config().logger


def configure(*, mode: Optional[ModeLike] = None, logger=None) -> GuardConfig:
    """Initialise the process-wide configuration.

    Fields left as ``None`` keep their current value. Returns the
    process-wide :class:`GuardConfig`.
    """

    config = _DEFAULT_CONFIG
    if mode is not None:
        config.mode = mode
    if logger is not None:
        config.logger = logger
    return config


_FILE_KEYS = frozenset({"mode", "logger"})


def configure_from_file(path: Union[str, Path]) -> GuardConfig:
    """Initialise the process-wide configuration from a YAML or JSON file.

    The document must be a mapping with the optional keys ``mode``
    (``raise`` or ``warn``) and ``logger`` (the name of a stdlib logger)::

        mode: warn
        logger: myapp.argguard
    """

    path = Path(path)
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text)
    elif suffix == ".json":
        data = json.loads(text)
    else:
        raise ConfigurationError(f"Unsupported configuration file type '{path.suffix}' for {path}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping, got {type(data).__name__}")

    unknown = sorted(set(data) - _FILE_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration key(s) in {path}: {unknown}")

    sink = None
    logger_name = data.get("logger")
    if logger_name is not None:
        if not isinstance(logger_name, str):
            raise ConfigurationError(f"'logger' in {path} must be a logger name, got {logger_name!r}")
        sink = logging.getLogger(logger_name)

    logger.debug("Loading argguard configuration from %s", path)
    return configure(mode=data.get("mode"), logger=sink)


__all__ = [
    "DEFAULT_LOGGER_NAME",
    "MODE_ENV_VAR",
    "MODE_VALUES",
    "GuardConfig",
    "Mode",
    "configure",
    "configure_from_file",
    "get_config",
    "get_default_config",
    "get_logger",
    "get_mode",
    "parse_mode",
    "set_logger",
    "set_mode",
    "use_config",
]
