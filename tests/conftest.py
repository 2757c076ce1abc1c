"""Shared test fixtures and configuration.

Provides a synthetic clock for the timer engine and isolates tests from the
real config and log directories.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from tomato_cli.models.timer.engine import TimerConfig, TimerEngine


# ---------------------------------------------------------------------------
# Synthetic time
# ---------------------------------------------------------------------------


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingNotifier:
    """Collects notifications instead of showing them."""

    def __init__(self):
        self.sent: list[tuple[str, str]] = []

    def notify(self, title: str, body: str) -> None:
        self.sent.append((title, body))

    @property
    def titles(self) -> list[str]:
        return [title for title, _ in self.sent]


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def engine(clock, notifier) -> TimerEngine:
    """Fresh engine with default durations: Focus, paused, zero elapsed."""
    return TimerEngine(config=TimerConfig(), clock=clock, notifier=notifier)


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point config and log directories at *tmp_path* and reset singletons."""
    import tomato_cli.config as config_mod
    import tomato_cli.utils.logger as logger_mod

    config_dir = tmp_path / "config"
    log_dir = tmp_path / "logs"

    config_mod._config_manager = None
    logger_mod._logger = None
    with patch("tomato_cli.config.user_config_dir", return_value=str(config_dir)):
        with patch("tomato_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
            yield tmp_path

    config_mod._config_manager = None
    for handler in list(logging.getLogger("tomato_cli").handlers):
        handler.close()
    logging.getLogger("tomato_cli").handlers.clear()
    logging.getLogger("tomato_cli").propagate = True
    logger_mod._logger = None
