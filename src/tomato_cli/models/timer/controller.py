"""Key bindings: translate normalised key names into engine calls."""

from __future__ import annotations

from .engine import TimerEngine
from .phase import AppTab, Phase

QUIT_KEYS = ("q",)
TAB_KEYS = ("tab",)

PHASE_KEYS = {
    "1": Phase.FOCUS,
    "2": Phase.SHORT_BREAK,
    "3": Phase.LONG_BREAK,
}

TIMER_HINTS = (
    "[Space] Toggle | [R] Reset | [N] Next Phase | "
    "[1/2/3] Set Phase | [Tab] Settings | [Q] Quit"
)
SETTINGS_HINTS = (
    "[Up/Down] Select | [Left/Right] Adjust (±{step}m) | "
    "[Tab] Back to Timer | [Q] Quit"
)


class TimerController:
    """Owns the active view and dispatches key presses to the engine."""

    def __init__(self, engine: TimerEngine, adjust_step: int = 5):
        self.engine = engine
        self.adjust_step = adjust_step
        self.current_tab = AppTab.TIMER

    def hints(self) -> str:
        """Footer text for the active view."""
        if self.current_tab is AppTab.TIMER:
            return TIMER_HINTS
        return SETTINGS_HINTS.format(step=self.adjust_step)

    def handle_key(self, key: str | None) -> bool:
        """Apply *key*. Returns False when the user asked to quit."""
        if key is None:
            return True
        if key in QUIT_KEYS:
            return False
        if key in TAB_KEYS:
            self.current_tab = self.current_tab.toggle()
            return True

        if self.current_tab is AppTab.TIMER:
            self._handle_timer_key(key)
        else:
            self._handle_settings_key(key)
        return True

    def _handle_timer_key(self, key: str) -> None:
        engine = self.engine
        if key == "space":
            engine.toggle_run()
        elif key == "r":
            engine.reset()
        elif key == "n":
            engine.advance_phase()
        elif key in PHASE_KEYS:
            engine.set_phase(PHASE_KEYS[key])

    def _handle_settings_key(self, key: str) -> None:
        engine = self.engine
        if key in ("up", "k"):
            engine.select_prev_setting()
        elif key in ("down", "j"):
            engine.select_next_setting()
        elif key in ("left", "h"):
            engine.adjust_selected_setting(-self.adjust_step)
        elif key in ("right", "l"):
            engine.adjust_selected_setting(self.adjust_step)
