"""Pomodoro timer: phase engine, key bindings and fullscreen display."""

from .controller import TimerController
from .engine import TimerConfig, TimerEngine, TimerSnapshot
from .keyboard import KeyboardHandler, TerminalError, get_keyboard_handler
from .phase import AppTab, Phase, SettingSelection
from .ui import TimerDisplay

__all__ = [
    "AppTab",
    "KeyboardHandler",
    "Phase",
    "SettingSelection",
    "TerminalError",
    "TimerConfig",
    "TimerController",
    "TimerDisplay",
    "TimerEngine",
    "TimerSnapshot",
    "get_keyboard_handler",
]
