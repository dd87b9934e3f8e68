"""Pytest fixtures for the argguard test-suite.

Every test starts from the process-wide configuration in ``raise`` mode with
its original logger, and whatever a test changes is restored afterwards.
"""
from __future__ import annotations

from unittest.mock import Mock

import pytest

from argguard.config import Mode, get_default_config


@pytest.fixture(autouse=True)
def _restore_config():  # noqa: D401
    """Reset the process-wide configuration around each test."""
    config = get_default_config()
    mode, sink = config.resolve()
    config.mode = Mode.RAISE
    yield config
    config.mode = mode
    config.logger = sink


@pytest.fixture()
def warn_logger(_restore_config):  # noqa: D401
    """Install a mock warning sink and switch the process to ``warn`` mode."""
    sink = Mock(spec=["warning"])
    _restore_config.logger = sink
    _restore_config.mode = Mode.WARN
    return sink


@pytest.fixture()
def recording_logger(_restore_config):  # noqa: D401
    """Install a mock warning sink but keep ``raise`` mode."""
    sink = Mock(spec=["warning"])
    _restore_config.logger = sink
    return sink


@pytest.fixture()
def anyio_backend():  # noqa: D401
    """Force *anyio* tests to use the standard asyncio backend only."""
    return "asyncio"
