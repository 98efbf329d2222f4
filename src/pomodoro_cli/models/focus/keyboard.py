"""Keyboard input for the timer loop."""

import os
import select
import sys
import termios
import tty
from typing import Optional

from pomodoro_cli.exceptions import TerminalError

from .events import Abort, Confirm, Event, MoveDown, MoveUp, PauseToggle, Quit

ESCAPE = "\x1b"
CTRL_C = "\x03"

_ESCAPE_SEQUENCES = {
    "[A": "up",
    "[B": "down",
    "OA": "up",
    "OB": "down",
}

KEY_BINDINGS: dict[str, Event] = {
    "up": MoveUp(),
    "k": MoveUp(),
    "down": MoveDown(),
    "j": MoveDown(),
    "enter": Confirm(),
    "e": Confirm(),
    "p": PauseToggle(),
    "esc": Abort(),
    "a": Abort(),
    "q": Quit(),
    "ctrl+c": Quit(),
}


def key_to_event(key: Optional[str]) -> Optional[Event]:
    """Translate a key name from ``KeyboardHandler.get_key`` into an event."""
    if key is None:
        return None
    return KEY_BINDINGS.get(key)


class KeyboardHandler:
    """Non-blocking keyboard input in cbreak mode."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.old_settings = None
        try:
            self.fd = self.stream.fileno()
        except (AttributeError, OSError, ValueError) as e:
            raise TerminalError("Standard input is not a terminal") from e
        self._setup()

    def _setup(self):
        """Put the terminal in cbreak mode, remembering the old settings."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error as e:
            raise TerminalError(f"Failed to initialise terminal: {e}") from e

    def _ready(self, timeout: float) -> bool:
        return bool(select.select([self.fd], [], [], timeout)[0])

    def _read_char(self) -> str:
        # select() only sees bytes not yet pulled into a Python-side buffer.
        return os.read(self.fd, 1).decode(errors="ignore")

    def get_key(self, timeout: float = 0) -> Optional[str]:
        """
        Wait up to ``timeout`` seconds for a keypress.

        Returns a key name (``"up"``, ``"enter"``, ``"esc"``, ``"ctrl+c"`` or
        the lowercased character) or None if no key was pressed.
        """
        if not self._ready(timeout):
            return None

        char = self._read_char()
        if char in ("\r", "\n"):
            return "enter"
        if char == CTRL_C:
            return "ctrl+c"
        if char == ESCAPE:
            return self._read_escape()
        return char.lower()

    def _read_escape(self) -> str:
        sequence = ""
        while len(sequence) < 2 and self._ready(0.01):
            sequence += self._read_char()
        return _ESCAPE_SEQUENCES.get(sequence, "esc")

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except termios.error:
                pass
