"""Unit tests for presets and the session selector."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from pomodoro_cli.exceptions import PresetConfigError
from pomodoro_cli.models.focus.presets import (
    DEFAULT_PRESETS,
    Preset,
    SessionSelector,
    validate_presets,
)


# ---------------------------------------------------------------------------
# Preset
# ---------------------------------------------------------------------------


class TestPreset:
    def test_seconds(self):
        preset = Preset(focus_minutes=25, break_minutes=5)
        assert preset.focus_seconds == 1500
        assert preset.break_seconds == 300

    def test_label(self):
        assert Preset(focus_minutes=50, break_minutes=10).label == "50min/10min"

    def test_is_immutable(self):
        preset = Preset(focus_minutes=25, break_minutes=5)
        with pytest.raises(FrozenInstanceError):
            preset.focus_minutes = 30

    def test_defaults(self):
        assert [(p.focus_minutes, p.break_minutes) for p in DEFAULT_PRESETS] == [
            (25, 5),
            (50, 10),
        ]


# ---------------------------------------------------------------------------
# validate_presets
# ---------------------------------------------------------------------------


class TestValidatePresets:
    def test_accepts_positive_durations(self):
        presets = [Preset(1, 1), Preset(90, 20)]
        assert validate_presets(presets) == tuple(presets)

    def test_rejects_empty_list(self):
        with pytest.raises(PresetConfigError, match="No presets"):
            validate_presets([])

    @pytest.mark.parametrize(
        "preset",
        [Preset(0, 5), Preset(25, 0), Preset(-25, 5), Preset(25, -1)],
    )
    def test_rejects_non_positive(self, preset):
        with pytest.raises(PresetConfigError, match="positive integer"):
            validate_presets([Preset(25, 5), preset])

    def test_rejects_non_integer(self):
        with pytest.raises(PresetConfigError):
            validate_presets([Preset(2.5, 5)])

    def test_rejects_bool(self):
        with pytest.raises(PresetConfigError):
            validate_presets([Preset(True, 5)])


# ---------------------------------------------------------------------------
# SessionSelector
# ---------------------------------------------------------------------------


class TestSessionSelector:
    def test_create_highlights_default(self):
        selector = SessionSelector.create(DEFAULT_PRESETS, default_index=1)
        assert selector.highlighted == 1
        assert selector.default_preset == DEFAULT_PRESETS[1]

    def test_create_rejects_bad_default_index(self):
        with pytest.raises(PresetConfigError, match="out of range"):
            SessionSelector.create(DEFAULT_PRESETS, default_index=2)

    def test_create_rejects_invalid_presets(self):
        with pytest.raises(PresetConfigError):
            SessionSelector.create([Preset(0, 0)])

    def test_move_down_and_up(self):
        selector = SessionSelector.create([Preset(1, 1), Preset(2, 1), Preset(3, 1)])

        selector = selector.move_highlight(1).move_highlight(1)
        assert selector.highlighted == 2

        selector = selector.move_highlight(-1)
        assert selector.highlighted == 1

    def test_move_clamps_without_wraparound(self):
        selector = SessionSelector.create(DEFAULT_PRESETS)
        assert selector.move_highlight(-1).highlighted == 0
        assert selector.move_highlight(1).move_highlight(1).highlighted == 1

    def test_move_uses_only_direction_sign(self):
        selector = SessionSelector.create([Preset(1, 1), Preset(2, 1), Preset(3, 1)])
        assert selector.move_highlight(5).highlighted == 1

    def test_move_returns_new_selector(self):
        selector = SessionSelector.create(DEFAULT_PRESETS)
        moved = selector.move_highlight(1)
        assert selector.highlighted == 0
        assert moved.highlighted == 1

    def test_confirm_returns_highlighted(self):
        selector = SessionSelector.create(DEFAULT_PRESETS).move_highlight(1)
        assert selector.confirm_selection() == Preset(50, 10)

    def test_confirm_without_highlight_returns_none(self):
        selector = SessionSelector(presets=DEFAULT_PRESETS, highlighted=None)
        assert selector.confirm_selection() is None

    def test_move_from_no_highlight_starts_at_default(self):
        selector = SessionSelector(presets=DEFAULT_PRESETS, highlighted=None)
        assert selector.move_highlight(1).highlighted == 1

    def test_reset_restores_default_highlight(self):
        selector = SessionSelector.create(DEFAULT_PRESETS).move_highlight(1)
        assert selector.reset().highlighted == 0
