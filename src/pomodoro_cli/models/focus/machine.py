"""Pomodoro state machine.

``handle`` is the single entry point: it takes the current state and one
event and returns the next state plus the effects the loop should carry out.
It performs no I/O and reads no clock, so a whole session can be replayed by
feeding it ``Tick`` events.
"""

from __future__ import annotations

from dataclasses import replace

from .events import (
    Abort,
    Confirm,
    Effect,
    Event,
    Exit,
    MoveDown,
    MoveUp,
    PauseToggle,
    Quit,
    Resize,
    ScheduleTick,
    Tick,
)
from .presets import Preset
from .state import Phase, TimerState, reset_for_reselection

SELECTION_FAILED = "Selection failed"

Transition = tuple[TimerState, list[Effect]]


def format_minutes(seconds: int) -> str:
    """Short duration for notices: ``25m``, ``1h30m``."""
    hours, minutes = divmod(seconds // 60, 60)
    return f"{hours}h{minutes}m" if hours else f"{minutes}m"


def summary_line(state: TimerState) -> str:
    return f"Completed sessions: {state.sessions_completed}"


def next_phase(state: TimerState) -> TimerState:
    """Flip between focus and break once ``remaining`` reaches zero."""
    if state.phase == Phase.FOCUSED:
        return replace(
            state,
            phase=Phase.ON_BREAK,
            remaining=state.break_duration,
            sessions_completed=state.sessions_completed + 1,
        )
    if state.phase == Phase.ON_BREAK:
        return replace(state, phase=Phase.FOCUSED, remaining=state.focus_duration)
    return state


def on_tick(state: TimerState) -> Transition:
    """Count down one second; a tick reaching zero transitions right away.

    The next tick is always scheduled, also while paused or selecting.
    """
    effects: list[Effect] = [ScheduleTick()]
    if not state.running:
        return state, effects

    remaining = max(state.remaining - 1, 0)
    state = replace(state, remaining=remaining, notice="")
    if remaining == 0:
        state = next_phase(state)
    return state, effects


def on_pause_toggle(state: TimerState) -> Transition:
    if state.selecting:
        return state, []
    return replace(state, paused=not state.paused), []


def on_select(state: TimerState, preset: Preset) -> Transition:
    """Start a countdown from ``preset``. The session count is kept."""
    focus_duration = preset.focus_seconds
    break_duration = preset.break_seconds
    state = replace(
        state,
        phase=Phase.FOCUSED,
        focus_duration=focus_duration,
        break_duration=break_duration,
        remaining=focus_duration,
        paused=False,
        selecting=False,
        notice=(
            f"Starting a pomodoro session of {format_minutes(focus_duration)} "
            f"and {format_minutes(break_duration)} break"
        ),
    )
    return state, [ScheduleTick(restart=True)]


def on_confirm(state: TimerState) -> Transition:
    if not state.selecting:
        return state, []
    preset = state.selector.confirm_selection()
    if preset is None:
        return replace(state, notice=SELECTION_FAILED), []
    return on_select(state, preset)


def on_move(state: TimerState, direction: int) -> Transition:
    if not state.selecting:
        return state, []
    return replace(state, selector=state.selector.move_highlight(direction)), []


def on_abort(state: TimerState) -> Transition:
    if state.selecting:
        return state, []
    return reset_for_reselection(state), []


def on_quit(state: TimerState) -> Transition:
    return state, [Exit(summary=summary_line(state))]


def handle(state: TimerState, event: Event) -> Transition:
    """Apply one event to ``state``."""
    if isinstance(event, Tick):
        return on_tick(state)
    if isinstance(event, MoveUp):
        return on_move(state, -1)
    if isinstance(event, MoveDown):
        return on_move(state, 1)
    if isinstance(event, Confirm):
        return on_confirm(state)
    if isinstance(event, PauseToggle):
        return on_pause_toggle(state)
    if isinstance(event, Abort):
        return on_abort(state)
    if isinstance(event, Quit):
        return on_quit(state)
    if isinstance(event, Resize):
        return replace(state, width=max(event.width, 1)), []
    raise TypeError(f"Unknown event: {event!r}")
