"""Interval presets and the session selector."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from pomodoro_cli.exceptions import PresetConfigError


@dataclass(frozen=True)
class Preset:
    """A focus/break interval pair, both in minutes."""

    focus_minutes: int
    break_minutes: int

    @property
    def focus_seconds(self) -> int:
        return self.focus_minutes * 60

    @property
    def break_seconds(self) -> int:
        return self.break_minutes * 60

    @property
    def label(self) -> str:
        """Label shown in the selector list, e.g. ``25min/5min``."""
        return f"{self.focus_minutes}min/{self.break_minutes}min"


DEFAULT_PRESETS: tuple[Preset, ...] = (
    Preset(focus_minutes=25, break_minutes=5),
    Preset(focus_minutes=50, break_minutes=10),
)


def validate_presets(presets: Iterable[Preset]) -> tuple[Preset, ...]:
    """Check a preset list before it reaches the timer.

    Raises:
        PresetConfigError: If the list is empty or a duration is not a
            positive integer.
    """
    presets = tuple(presets)
    if not presets:
        raise PresetConfigError("No presets configured")

    for preset in presets:
        for name in ("focus_minutes", "break_minutes"):
            value = getattr(preset, name)
            # bool is an int subclass, reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise PresetConfigError(
                    f"Invalid preset {preset.focus_minutes}/{preset.break_minutes}: "
                    f"{name} must be a positive integer"
                )
    return presets


@dataclass(frozen=True)
class SessionSelector:
    """Ordered presets with a highlighted entry.

    ``highlighted`` is ``None`` only when nothing is highlighted, in which
    case confirming yields no preset.
    """

    presets: tuple[Preset, ...] = DEFAULT_PRESETS
    highlighted: int | None = 0
    default_index: int = 0

    @classmethod
    def create(
        cls, presets: Iterable[Preset] = DEFAULT_PRESETS, default_index: int = 0
    ) -> "SessionSelector":
        """Build a selector from a validated preset list.

        Raises:
            PresetConfigError: On an invalid preset list or default index.
        """
        presets = validate_presets(presets)
        if not 0 <= default_index < len(presets):
            raise PresetConfigError(
                f"Default preset index {default_index} is out of range "
                f"(1-{len(presets)})"
            )
        return cls(presets=presets, highlighted=default_index, default_index=default_index)

    @property
    def default_preset(self) -> Preset:
        return self.presets[self.default_index]

    def move_highlight(self, direction: int) -> "SessionSelector":
        """Move the highlight up (negative) or down (positive), clamped to the list."""
        if not self.presets:
            return self
        current = self.highlighted if self.highlighted is not None else self.default_index
        step = (direction > 0) - (direction < 0)
        index = min(max(current + step, 0), len(self.presets) - 1)
        return replace(self, highlighted=index)

    def confirm_selection(self) -> Preset | None:
        """Return the highlighted preset, or None if nothing is highlighted."""
        if self.highlighted is None or not 0 <= self.highlighted < len(self.presets):
            return None
        return self.presets[self.highlighted]

    def reset(self) -> "SessionSelector":
        """Highlight the default preset again."""
        return replace(self, highlighted=self.default_index)
