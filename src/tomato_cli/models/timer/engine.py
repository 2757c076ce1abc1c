"""Pomodoro timer engine: phase cycling and elapsed-time accounting.

The engine never sleeps and never schedules anything. The display loop calls
``tick()`` on every iteration and reads the accessors to render. Time comes
from an injectable monotonic clock so tests can drive it synthetically.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import Protocol

from .phase import Phase, SettingSelection

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

# Inclusive minute limits per phase
MINUTE_LIMITS = {
    Phase.FOCUS: (1, 120),
    Phase.SHORT_BREAK: (1, 60),
    Phase.LONG_BREAK: (1, 60),
}

DEFAULT_LONG_BREAK_INTERVAL = 4


class Notifier(Protocol):
    """Anything that can show a title/body notification."""

    def notify(self, title: str, body: str) -> None: ...


def clamp_minutes(phase: Phase, minutes: int) -> int:
    """Clamp a duration in minutes to the valid range for *phase*."""
    low, high = MINUTE_LIMITS[phase]
    return max(low, min(high, int(minutes)))


@dataclass
class TimerConfig:
    """Durations (minutes) and cycling behaviour for the engine."""

    focus_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 15
    long_break_interval: int = DEFAULT_LONG_BREAK_INTERVAL
    auto_advance: bool = True

    def __post_init__(self) -> None:
        self.focus_minutes = clamp_minutes(Phase.FOCUS, self.focus_minutes)
        self.short_break_minutes = clamp_minutes(
            Phase.SHORT_BREAK, self.short_break_minutes
        )
        self.long_break_minutes = clamp_minutes(
            Phase.LONG_BREAK, self.long_break_minutes
        )
        self.long_break_interval = max(0, int(self.long_break_interval))

    def minutes_for(self, phase: Phase) -> int:
        """Get duration in minutes for *phase*."""
        if phase is Phase.FOCUS:
            return self.focus_minutes
        elif phase is Phase.SHORT_BREAK:
            return self.short_break_minutes
        else:  # long break
            return self.long_break_minutes

    @classmethod
    def from_settings(cls, settings) -> "TimerConfig":
        """Build from a ``tomato_cli.config.TimerSettings`` model."""
        return cls(**settings.model_dump())


@dataclass(frozen=True)
class TimerSnapshot:
    """Everything the display needs, read at a single instant."""

    phase: Phase
    running: bool
    elapsed: timedelta
    remaining: timedelta
    target: timedelta
    pomodoro_count: int
    long_break_interval: int
    selected_setting: SettingSelection
    durations: dict[Phase, int] = field(default_factory=dict)

    @property
    def progress(self) -> float:
        """Fraction of the target already elapsed, in [0, 1]."""
        if not self.target:
            return 0.0
        return max(0.0, min(1.0, self.elapsed / self.target))


class TimerEngine:
    """Focus/short-break/long-break state machine.

    Elapsed time is banked into ``accumulated`` whenever the timer pauses; while
    running the live span since ``anchor`` is added on top. Every reset, phase
    change and settings adjustment zeroes the accounting and pauses the timer.
    """

    def __init__(
        self,
        config: TimerConfig | None = None,
        clock: Clock = time.monotonic,
        notifier: Notifier | None = None,
    ):
        # Settings adjustments must not leak into the caller's config
        self.config = replace(config) if config is not None else TimerConfig()
        self._clock = clock
        self._notifier = notifier

        self.phase = Phase.FOCUS
        self.running = False
        self.pomodoro_count = 0
        self.selected_setting = SettingSelection.FOCUS_TIME

        self._anchor = self._clock()
        self._accumulated = timedelta(0)

    @property
    def long_break_interval(self) -> int:
        return self.config.long_break_interval

    # --- Time accounting ---

    def _elapsed_at(self, now: float) -> timedelta:
        if not self.running:
            return self._accumulated
        return self._accumulated + timedelta(seconds=max(0.0, now - self._anchor))

    def target_duration(self) -> timedelta:
        return timedelta(minutes=self.config.minutes_for(self.phase))

    def elapsed(self) -> timedelta:
        return self._elapsed_at(self._clock())

    def remaining(self) -> timedelta:
        return max(timedelta(0), self.target_duration() - self.elapsed())

    def snapshot(self) -> TimerSnapshot:
        now = self._clock()
        target = self.target_duration()
        elapsed = self._elapsed_at(now)
        return TimerSnapshot(
            phase=self.phase,
            running=self.running,
            elapsed=elapsed,
            remaining=max(timedelta(0), target - elapsed),
            target=target,
            pomodoro_count=self.pomodoro_count,
            long_break_interval=self.long_break_interval,
            selected_setting=self.selected_setting,
            durations={phase: self.config.minutes_for(phase) for phase in Phase},
        )

    # --- Run state ---

    def toggle_run(self) -> None:
        now = self._clock()
        if self.running:
            self._accumulated = self._elapsed_at(now)
            self.running = False
        else:
            self._anchor = now
            self.running = True

    def reset(self) -> None:
        self.running = False
        self._accumulated = timedelta(0)
        self._anchor = self._clock()

    # --- Phase transitions ---

    def next_phase(self) -> Phase:
        """Phase that ``advance_phase`` would move to, given the next count."""
        if self.phase is Phase.FOCUS:
            interval = self.long_break_interval
            if interval > 0 and (self.pomodoro_count + 1) % interval == 0:
                return Phase.LONG_BREAK
            return Phase.SHORT_BREAK
        return Phase.FOCUS

    def advance_phase(self) -> None:
        """Move to the next phase in the cycle and pause at zero elapsed."""
        next_phase = self.next_phase()
        if self.phase is Phase.FOCUS:
            self.pomodoro_count += 1

        logger.info(
            "phase %s -> %s (pomodoros=%d)",
            self.phase.value,
            next_phase.value,
            self.pomodoro_count,
        )
        self.phase = next_phase
        self.reset()
        self._notify("Phase Changed", f"Starting {self.phase.display_name}")

    def set_phase(self, phase: Phase) -> None:
        """Jump straight to *phase* without counting a pomodoro."""
        logger.info("phase set manually: %s", phase.value)
        self.phase = phase
        self.reset()

    def tick(self) -> bool:
        """Handle completion of the running phase.

        Returns True if the phase finished on this call.
        """
        if not self.running or self.remaining() > timedelta(0):
            return False

        finished = self.phase
        if self.config.auto_advance:
            self._notify("Timer Finished!", f"{finished.display_name} complete.")
            self.advance_phase()
            self.toggle_run()
        else:
            self.toggle_run()
            self._notify("Timer Finished!", "Time to switch phases.")

        logger.info(
            "%s finished (auto_advance=%s)", finished.value, self.config.auto_advance
        )
        return True

    # --- Settings ---

    def select_next_setting(self) -> None:
        self.selected_setting = self.selected_setting.next()

    def select_prev_setting(self) -> None:
        self.selected_setting = self.selected_setting.prev()

    def adjust_selected_setting(self, delta: int) -> None:
        """Add *delta* minutes to the selected duration and restart the timer."""
        selection = self.selected_setting
        current = getattr(self.config, selection.value)
        updated = clamp_minutes(selection.phase, current + delta)
        setattr(self.config, selection.value, updated)
        logger.debug("%s: %d -> %d", selection.value, current, updated)
        self.reset()

    # --- Notifications ---

    def _notify(self, title: str, body: str) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier.notify(title, body)
        except Exception:
            # Notifications are best effort; the timer keeps going
            logger.warning("notification failed: %s", title, exc_info=True)
