"""Shared test fixtures and configuration.

Keeps the application logger away from the real user log directory.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from pomodoro_cli.models.focus.presets import Preset, SessionSelector
from pomodoro_cli.models.focus.state import TimerState


def _clear_app_logger() -> None:
    logger = logging.getLogger("pomodoro_cli")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path):
    """Send log files to *tmp_path* and reset the logger singleton."""
    import pomodoro_cli.utils.logger as logger_mod

    logger_mod._logger = None
    _clear_app_logger()
    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield tmp_path / "logs"
    logger_mod._logger = None
    _clear_app_logger()


@pytest.fixture()
def initial_state() -> TimerState:
    """Fresh state with the default 25/5 and 50/10 presets."""
    return TimerState.initial()


@pytest.fixture()
def one_minute_state() -> TimerState:
    """Fresh state offering a single 1/1 preset."""
    return TimerState.initial(SessionSelector.create([Preset(focus_minutes=1, break_minutes=1)]))
