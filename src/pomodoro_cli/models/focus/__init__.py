"""Focus mode - Pomodoro timer state machine and terminal front end."""

from .events import (
    Abort,
    Confirm,
    Exit,
    MoveDown,
    MoveUp,
    PauseToggle,
    Quit,
    Resize,
    ScheduleTick,
    Tick,
)
from .keyboard import KeyboardHandler
from .loop import FocusLoop, TickScheduler
from .machine import handle
from .presets import DEFAULT_PRESETS, Preset, SessionSelector
from .state import Phase, TimerState, reset_for_reselection
from .ui import TimerDisplay, render_view

__all__ = [
    "Abort",
    "Confirm",
    "Exit",
    "MoveDown",
    "MoveUp",
    "PauseToggle",
    "Quit",
    "Resize",
    "ScheduleTick",
    "Tick",
    "KeyboardHandler",
    "FocusLoop",
    "TickScheduler",
    "handle",
    "DEFAULT_PRESETS",
    "Preset",
    "SessionSelector",
    "Phase",
    "TimerState",
    "reset_for_reselection",
    "TimerDisplay",
    "render_view",
]
