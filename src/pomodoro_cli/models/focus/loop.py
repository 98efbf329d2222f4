"""Single-threaded event loop driving the timer state machine."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from rich.live import Live

from pomodoro_cli.exceptions import TerminalError

from .events import Event, Exit, Quit, Resize, ScheduleTick, Tick
from .keyboard import KeyboardHandler, key_to_event
from .machine import handle
from .state import TimerState
from .ui import TimerDisplay


class TickScheduler:
    """Holds the deadline of the single pending tick."""

    def __init__(self, interval: float = 1.0, clock: Callable[[], float] = time.monotonic):
        self.interval = interval
        self.clock = clock
        self.deadline: float | None = None
        self.pending = False

    def schedule(self, restart: bool = False) -> None:
        """Arm the next tick one interval after the previous deadline (or now)."""
        if restart or self.deadline is None:
            self.deadline = self.clock() + self.interval
        else:
            self.deadline += self.interval
        self.pending = True

    def due(self) -> bool:
        return self.pending and self.clock() >= self.deadline

    def fire(self) -> Tick:
        self.pending = False
        return Tick()

    def time_until_due(self) -> float:
        if not self.pending:
            return self.interval
        return max(self.deadline - self.clock(), 0.0)


class FocusLoop:
    """Feeds terminal, keyboard and clock events into ``handle`` one at a time."""

    def __init__(
        self,
        state: TimerState,
        display: TimerDisplay,
        keyboard: KeyboardHandler,
        scheduler: TickScheduler | None = None,
        logger: logging.Logger | None = None,
        poll_interval: float = 0.25,
    ):
        self.state = state
        self.display = display
        self.keyboard = keyboard
        self.scheduler = scheduler or TickScheduler()
        self.logger = logger or logging.getLogger("pomodoro_cli")
        self.poll_interval = poll_interval

    def dispatch(self, event: Event) -> Exit | None:
        """Apply one event and carry out its effects. Returns the Exit effect, if any."""
        previous = self.state
        self.state, effects = handle(self.state, event)
        self._log_change(previous, self.state)

        exit_effect = None
        for effect in effects:
            if isinstance(effect, ScheduleTick):
                self.scheduler.schedule(restart=effect.restart)
            elif isinstance(effect, Exit):
                exit_effect = effect
        return exit_effect

    def next_event(self) -> Event | None:
        """Take the next event: resize first, then a due tick, then a key."""
        width = self.display.console.width
        if width != self.state.width:
            return Resize(width)
        if self.scheduler.due():
            return self.scheduler.fire()
        timeout = min(self.scheduler.time_until_due(), self.poll_interval)
        return key_to_event(self.keyboard.get_key(timeout))

    def run(self) -> Exit:
        """Run until a Quit event. Returns the Exit effect carrying the summary."""
        self.scheduler.schedule(restart=True)
        try:
            with Live(
                self.display.create_layout(self.state),
                console=self.display.console,
                auto_refresh=False,
                screen=True,
            ) as live:
                while True:
                    event = self.next_event()
                    if event is None:
                        continue
                    exit_effect = self.dispatch(event)
                    if exit_effect is not None:
                        return exit_effect
                    live.update(self.display.create_layout(self.state), refresh=True)
        except KeyboardInterrupt:
            return self.dispatch(Quit())
        except OSError as e:
            raise TerminalError(f"Failed to write to terminal: {e}") from e
        finally:
            self.keyboard.stop()

    def _log_change(self, previous: TimerState, current: TimerState) -> None:
        if previous.selecting and not current.selecting:
            self.logger.info(
                "Session started: focus=%ss break=%ss",
                current.focus_duration,
                current.break_duration,
            )
        elif not previous.selecting and current.selecting:
            self.logger.info(
                "Back to preset selection (sessions completed: %d)",
                current.sessions_completed,
            )
        elif previous.phase != current.phase:
            self.logger.info(
                "Phase %s -> %s (sessions completed: %d)",
                previous.phase.value,
                current.phase.value,
                current.sessions_completed,
            )
        if previous.paused != current.paused:
            self.logger.info("Timer %s", "paused" if current.paused else "resumed")
