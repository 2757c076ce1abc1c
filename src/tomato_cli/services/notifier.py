"""Desktop notifications for phase changes.

Notifications are a convenience: every failure is logged and swallowed so the
timer never stops because a notification daemon is missing.
"""

from __future__ import annotations

import logging
import subprocess
import sys

logger = logging.getLogger(__name__)

_NOTIFY_TIMEOUT = 5  # seconds

# Title and body are passed as argv so no quoting is needed
_APPLESCRIPT = [
    "-e",
    "on run argv",
    "-e",
    "display notification (item 2 of argv) with title (item 1 of argv)",
    "-e",
    "end run",
]


class DesktopNotifier:
    """Sends native notifications on Linux, macOS and Windows."""

    def __init__(
        self,
        app_name: str = "tomato",
        enabled: bool = True,
        platform: str | None = None,
    ):
        self.app_name = app_name
        self.enabled = enabled
        self.platform = platform or sys.platform

    def build_command(self, title: str, body: str) -> list[str] | None:
        """Return the command line that shows the notification, if any."""
        if self.platform.startswith("linux"):
            return ["notify-send", "-a", self.app_name, title, body]
        if self.platform == "darwin":
            return ["osascript", *_APPLESCRIPT, title, body]
        return None

    def notify(self, title: str, body: str) -> None:
        """Show a notification; never raises."""
        if not self.enabled:
            return

        try:
            if self.platform == "win32":
                self._notify_windows(title, body)
                return

            command = self.build_command(title, body)
            if command is None:
                logger.debug("no notification backend for %s", self.platform)
                return

            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=_NOTIFY_TIMEOUT,
            )
            if result.returncode != 0:
                logger.warning(
                    "%s exited with %d: %s",
                    command[0],
                    result.returncode,
                    result.stderr.strip(),
                )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("notification failed: %s", e)
        except Exception:
            logger.warning("notification failed", exc_info=True)

    def _notify_windows(self, title: str, body: str) -> None:
        from plyer import notification

        notification.notify(
            title=title, message=body, app_name=self.app_name, timeout=10
        )
