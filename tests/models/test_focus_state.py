"""Unit tests for TimerState and reset_for_reselection."""

from __future__ import annotations

from dataclasses import replace

from pomodoro_cli.models.focus.presets import DEFAULT_PRESETS, Preset, SessionSelector
from pomodoro_cli.models.focus.state import (
    DEFAULT_WIDTH,
    Phase,
    TimerState,
    reset_for_reselection,
)


class TestInitialState:
    def test_default_preset_preselected(self):
        state = TimerState.initial()

        assert state.selecting is True
        assert state.phase == Phase.IDLE
        assert state.remaining == 0
        assert state.focus_duration == 25 * 60
        assert state.break_duration == 5 * 60
        assert state.selector.highlighted == 0
        assert state.width == DEFAULT_WIDTH

    def test_uses_selector_default(self):
        selector = SessionSelector.create(DEFAULT_PRESETS, default_index=1)
        state = TimerState.initial(selector)

        assert state.focus_duration == 50 * 60
        assert state.selector.highlighted == 1


class TestPhaseDuration:
    def test_idle_is_zero(self):
        assert TimerState.initial().phase_duration == 0

    def test_follows_phase(self):
        state = replace(TimerState.initial(), focus_duration=60, break_duration=30)
        assert replace(state, phase=Phase.FOCUSED).phase_duration == 60
        assert replace(state, phase=Phase.ON_BREAK).phase_duration == 30

    def test_running(self):
        state = replace(TimerState.initial(), selecting=False, phase=Phase.FOCUSED)
        assert state.running is True
        assert replace(state, paused=True).running is False
        assert TimerState.initial().running is False


class TestResetForReselection:
    def _mid_session(self) -> TimerState:
        selector = SessionSelector.create([Preset(25, 5), Preset(50, 10)]).move_highlight(1)
        return TimerState(
            selector=selector,
            phase=Phase.ON_BREAK,
            remaining=123,
            focus_duration=50 * 60,
            break_duration=10 * 60,
            paused=True,
            sessions_completed=7,
            selecting=False,
            notice="something",
            width=132,
        )

    def test_preserves_sessions_completed(self):
        assert reset_for_reselection(self._mid_session()).sessions_completed == 7

    def test_preserves_width(self):
        assert reset_for_reselection(self._mid_session()).width == 132

    def test_clears_countdown(self):
        state = reset_for_reselection(self._mid_session())

        assert state.phase == Phase.IDLE
        assert state.remaining == 0
        assert state.paused is False
        assert state.selecting is True
        assert state.notice == ""

    def test_restores_default_preset(self):
        state = reset_for_reselection(self._mid_session())

        assert state.selector.highlighted == 0
        assert state.focus_duration == 25 * 60
        assert state.break_duration == 5 * 60

    def test_does_not_mutate_input(self):
        before = self._mid_session()
        reset_for_reselection(before)
        assert before.phase == Phase.ON_BREAK
        assert before.remaining == 123

    def test_matches_fresh_state_except_counter(self):
        reset = reset_for_reselection(self._mid_session())
        fresh = TimerState.initial(reset.selector)

        assert replace(reset, sessions_completed=0, width=DEFAULT_WIDTH) == fresh
