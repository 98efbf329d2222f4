"""Timer state for one run of the program."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from .presets import SessionSelector


class Phase(str, Enum):
    """Countdown phase."""

    IDLE = "idle"
    FOCUSED = "focused"
    ON_BREAK = "on_break"


DEFAULT_WIDTH = 80


@dataclass(frozen=True)
class TimerState:
    """Snapshot of the timer. Every event produces a new instance.

    Durations and ``remaining`` are whole seconds.
    """

    selector: SessionSelector = field(default_factory=SessionSelector)
    phase: Phase = Phase.IDLE
    remaining: int = 0
    focus_duration: int = 0
    break_duration: int = 0
    paused: bool = False
    sessions_completed: int = 0
    selecting: bool = True
    notice: str = ""
    width: int = DEFAULT_WIDTH

    @classmethod
    def initial(cls, selector: SessionSelector | None = None) -> "TimerState":
        """Program start: selector shown, default preset pre-selected."""
        selector = selector or SessionSelector()
        preset = selector.default_preset
        return cls(
            selector=selector,
            focus_duration=preset.focus_seconds,
            break_duration=preset.break_seconds,
        )

    @property
    def phase_duration(self) -> int:
        """Length of the current phase in seconds (0 while idle)."""
        if self.phase == Phase.FOCUSED:
            return self.focus_duration
        if self.phase == Phase.ON_BREAK:
            return self.break_duration
        return 0

    @property
    def running(self) -> bool:
        """True while a countdown is active and not paused."""
        return not self.selecting and not self.paused


def reset_for_reselection(state: TimerState) -> TimerState:
    """Return to the selector, keeping the lifetime session count.

    Everything tied to the abandoned countdown is cleared and the default
    preset is highlighted again. ``sessions_completed`` and the terminal
    width carry over.
    """
    selector = state.selector.reset()
    preset = selector.default_preset
    return replace(
        state,
        selector=selector,
        phase=Phase.IDLE,
        remaining=0,
        focus_duration=preset.focus_seconds,
        break_duration=preset.break_seconds,
        paused=False,
        selecting=True,
        notice="",
    )
