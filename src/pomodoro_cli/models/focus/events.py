"""Events consumed and effects produced by the timer state machine."""

from __future__ import annotations

from dataclasses import dataclass

from pomodoro_cli.utils.exit_codes import SUCCESS


@dataclass(frozen=True)
class MoveUp:
    pass


@dataclass(frozen=True)
class MoveDown:
    pass


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class PauseToggle:
    pass


@dataclass(frozen=True)
class Abort:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Tick:
    """One second has elapsed."""


@dataclass(frozen=True)
class Resize:
    width: int


Event = MoveUp | MoveDown | Confirm | PauseToggle | Abort | Quit | Tick | Resize


@dataclass(frozen=True)
class ScheduleTick:
    """Arm the next tick.

    With ``restart`` the clock is re-anchored to now, otherwise the next tick
    follows the previous deadline so the cadence does not drift.
    """

    restart: bool = False


@dataclass(frozen=True)
class Exit:
    """Stop the loop and print ``summary`` as the last line of output."""

    summary: str
    code: int = SUCCESS


Effect = ScheduleTick | Exit
