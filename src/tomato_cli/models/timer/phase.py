"""Phase, settings cursor and view enums for the Pomodoro timer."""

from enum import Enum


class Phase(Enum):
    """One of the three timer phases."""

    FOCUS = "focus"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def color(self) -> str:
        """Rich color name used for the phase accent."""
        return _COLORS[self]


_DISPLAY_NAMES = {
    Phase.FOCUS: "FOCUS SESSION",
    Phase.SHORT_BREAK: "SHORT BREAK",
    Phase.LONG_BREAK: "LONG BREAK",
}

_COLORS = {
    Phase.FOCUS: "red",
    Phase.SHORT_BREAK: "green",
    Phase.LONG_BREAK: "blue",
}


class SettingSelection(Enum):
    """Cursor over the three duration settings, in display order."""

    FOCUS_TIME = "focus_minutes"
    SHORT_BREAK_TIME = "short_break_minutes"
    LONG_BREAK_TIME = "long_break_minutes"

    @property
    def label(self) -> str:
        return _SETTING_LABELS[self]

    @property
    def phase(self) -> Phase:
        """The phase whose duration this setting controls."""
        return _SETTING_PHASES[self]

    def next(self) -> "SettingSelection":
        members = list(SettingSelection)
        return members[(members.index(self) + 1) % len(members)]

    def prev(self) -> "SettingSelection":
        members = list(SettingSelection)
        return members[(members.index(self) - 1) % len(members)]


_SETTING_LABELS = {
    SettingSelection.FOCUS_TIME: "Focus Duration",
    SettingSelection.SHORT_BREAK_TIME: "Short Break Duration",
    SettingSelection.LONG_BREAK_TIME: "Long Break Duration",
}

_SETTING_PHASES = {
    SettingSelection.FOCUS_TIME: Phase.FOCUS,
    SettingSelection.SHORT_BREAK_TIME: Phase.SHORT_BREAK,
    SettingSelection.LONG_BREAK_TIME: Phase.LONG_BREAK,
}


class AppTab(Enum):
    """Top-level view shown by the display."""

    TIMER = "timer"
    SETTINGS = "settings"

    def toggle(self) -> "AppTab":
        return AppTab.SETTINGS if self is AppTab.TIMER else AppTab.TIMER
