"""Full-screen timer UI."""

import time

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from .controller import TimerController
from .engine import TimerSnapshot
from .phase import AppTab, Phase, SettingSelection

SETTINGS_COLOR = "cyan"
BAR_WIDTH = 40


def format_clock(seconds: float) -> str:
    """Format a non-negative number of seconds as MM:SS."""
    total = max(0, int(seconds))
    return f"{total // 60:02d}:{total % 60:02d}"


def progress_bar(ratio: float, width: int = BAR_WIDTH) -> str:
    """Render *ratio* (0..1) as a block bar."""
    filled = int(width * max(0.0, min(1.0, ratio)))
    return "▓" * filled + "░" * (width - filled)


def pomodoro_dots(count: int, interval: int) -> str:
    """Show position in the current long-break cycle."""
    if interval <= 0:
        return ""
    done = count % interval
    return " ".join("●" if i < done else "○" for i in range(interval))


class TimerDisplay:
    """Manages the fullscreen timer display."""

    def __init__(self, console: Console | None = None, poll_interval: float = 0.25):
        self.console = console or Console()
        self.poll_interval = poll_interval

    def create_layout(self, controller: TimerController) -> Layout:
        """Create the layout for the active view."""
        snapshot = controller.engine.snapshot()

        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        layout["header"].update(
            Align.center(self._create_tabs(controller.current_tab, snapshot.phase))
        )

        if controller.current_tab is AppTab.TIMER:
            body = self._create_timer_body(snapshot)
        else:
            body = self._create_settings_body(snapshot)
        layout["body"].update(Align.center(body, vertical="middle"))

        footer_text = Text(f"Controls: {controller.hints()}", style="dim", justify="center")
        layout["footer"].update(Align.center(footer_text, vertical="middle"))

        return layout

    def _create_tabs(self, current_tab: AppTab, phase: Phase) -> Text:
        highlight = phase.color if current_tab is AppTab.TIMER else SETTINGS_COLOR
        tabs = Text(justify="center")
        for tab, title in ((AppTab.TIMER, " Timer "), (AppTab.SETTINGS, " Settings ")):
            style = f"bold {highlight} reverse" if tab is current_tab else "dim"
            tabs.append(title, style=style)
            tabs.append("  ")
        return tabs

    def _create_timer_body(self, snapshot: TimerSnapshot) -> Group:
        """Phase name, status, countdown and progress."""
        color = snapshot.phase.color
        components = [
            Text(snapshot.phase.display_name, style=f"bold {color}", justify="center"),
            Text(
                f"[ {'RUNNING' if snapshot.running else 'PAUSED'} ]",
                style="dim",
                justify="center",
            ),
            Text(""),
        ]

        timer_color = color if snapshot.running else "white"
        components.append(
            Text(
                format_clock(snapshot.remaining.total_seconds()),
                style=f"bold {timer_color}",
                justify="center",
            )
        )
        components.append(Text(""))

        ratio = snapshot.progress
        bar = Text(justify="center")
        bar.append(progress_bar(ratio), style=color)
        bar.append(f"  {ratio * 100:.0f}%", style="dim")
        components.append(bar)
        components.append(Text(""))

        cycle = Text(justify="center")
        cycle.append(f"Pomodoros: {snapshot.pomodoro_count}  ", style="bold")
        cycle.append(
            pomodoro_dots(snapshot.pomodoro_count, snapshot.long_break_interval),
            style=color,
        )
        components.append(cycle)

        return Group(*components)

    def _create_settings_body(self, snapshot: TimerSnapshot) -> Panel:
        """Three duration rows with the selected one highlighted."""
        rows = []
        for selection in SettingSelection:
            minutes = snapshot.durations[selection.phase]
            if selection is snapshot.selected_setting:
                style = "bold yellow on grey23"
            else:
                style = "white"
            rows.append(
                Text(
                    f" {selection.label}   < {minutes:02d} min > ",
                    style=style,
                    justify="center",
                )
            )
            rows.append(Text(""))

        return Panel(
            Group(*rows),
            title=" Configuration ",
            border_style=SETTINGS_COLOR,
            padding=(1, 4),
        )

    def run(self, controller: TimerController, keyboard) -> str:
        """
        Run the fullscreen timer until the user quits.

        Returns 'quit' or 'interrupted'.
        """
        try:
            with Live(
                self.create_layout(controller),
                console=self.console,
                refresh_per_second=4,
                screen=True,
            ) as live:
                while True:
                    controller.engine.tick()

                    if not controller.handle_key(keyboard.get_key()):
                        return "quit"

                    live.update(self.create_layout(controller))
                    time.sleep(self.poll_interval)

        except KeyboardInterrupt:
            return "interrupted"
        finally:
            keyboard.stop()
