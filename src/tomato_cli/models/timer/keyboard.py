"""Cross-platform keyboard input handler for timer controls.

Keys are normalised to short names: single characters are lowercased, and
``space``, ``tab``, ``escape``, ``up``, ``down``, ``left`` and ``right`` are
spelled out.
"""

import os
import sys
from typing import Optional

_ESCAPE_SEQUENCES = {
    "[A": "up",
    "[B": "down",
    "[C": "right",
    "[D": "left",
    "OA": "up",
    "OB": "down",
    "OC": "right",
    "OD": "left",
}

# Second byte after a 0x00/0xE0 prefix from msvcrt
_WINDOWS_SCAN_CODES = {
    "H": "up",
    "P": "down",
    "M": "right",
    "K": "left",
}

_NAMED_KEYS = {
    " ": "space",
    "\t": "tab",
    "\x1b": "escape",
}


class TerminalError(Exception):
    """The terminal could not be switched into or out of cbreak mode."""


def normalize_key(key: str) -> str:
    """Map a raw character to the key name used by the controller."""
    return _NAMED_KEYS.get(key, key.lower())


class KeyboardHandler:
    """Non-blocking keyboard input handler for POSIX terminals."""

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings = None
        self._pending = ""
        self._setup()

    def _setup(self):
        """Setup terminal for non-blocking input."""
        import termios
        import tty

        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (termios.error, OSError) as e:
            raise TerminalError(f"Cannot read keys from this terminal: {e}") from e

    def get_key(self) -> Optional[str]:
        """
        Get a single keypress without blocking.

        Returns the key name or None if no key pressed. Several keys can arrive
        in one read (auto-repeat, fast typing); the extras are kept and handed
        out one per call.
        """
        if not self._pending:
            import select

            if not select.select([self.fd], [], [], 0)[0]:
                return None
            self._pending = os.read(self.fd, 64).decode("utf-8", errors="ignore")
            if not self._pending:
                return None
        return self._next_key()

    def _next_key(self) -> str:
        """Consume one key from the pending buffer."""
        data = self._pending
        if data[0] != "\x1b" or len(data) == 1 or data[1] not in "[O":
            self._pending = data[1:]
            return normalize_key(data[0])

        # ESC O X, or ESC [ params final-byte
        end = 2
        if data[1] == "[":
            while end < len(data) and not "@" <= data[end] <= "~":
                end += 1
        end += 1
        self._pending = data[end:]
        return _ESCAPE_SEQUENCES.get(data[1:end], "escape")

    def stop(self):
        """Restore terminal settings."""
        if not self.old_settings:
            return
        import termios

        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
        except (termios.error, OSError) as e:
            raise TerminalError(f"Cannot restore terminal settings: {e}") from e
        finally:
            self.old_settings = None


class WindowsKeyboardHandler:
    """Keyboard handler for Windows using msvcrt."""

    def __init__(self):
        import msvcrt

        self.msvcrt = msvcrt

    def get_key(self) -> Optional[str]:
        """Get key on Windows."""
        if not self.msvcrt.kbhit():
            return None

        key = self.msvcrt.getwch()
        if key in ("\x00", "\xe0"):
            return _WINDOWS_SCAN_CODES.get(self.msvcrt.getwch())
        return normalize_key(key)

    def stop(self):
        """No cleanup needed on Windows."""
        pass


def get_keyboard_handler():
    """Create the keyboard handler for the current platform."""
    if sys.platform == "win32":
        return WindowsKeyboardHandler()
    return KeyboardHandler()
