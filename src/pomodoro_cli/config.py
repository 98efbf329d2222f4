"""Configuration management for Pomodoro CLI.

Presets come from an optional ``config.json`` in the user config directory::

    {
        "presets": [
            {"focus_minutes": 25, "break_minutes": 5},
            {"focus_minutes": 50, "break_minutes": 10}
        ],
        "default_preset": 0,
        "log_level": "INFO"
    }

The file is only ever read; the timer keeps nothing between runs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

from pomodoro_cli.exceptions import PresetConfigError
from pomodoro_cli.models.focus.presets import DEFAULT_PRESETS, Preset, SessionSelector

CONFIG_FILE = "config.json"


class PresetConfig(BaseModel):
    """One focus/break pair in minutes."""

    focus_minutes: int
    break_minutes: int

    def to_preset(self) -> Preset:
        return Preset(focus_minutes=self.focus_minutes, break_minutes=self.break_minutes)


def _default_presets() -> list[PresetConfig]:
    return [
        PresetConfig(focus_minutes=p.focus_minutes, break_minutes=p.break_minutes)
        for p in DEFAULT_PRESETS
    ]


class AppConfig(BaseModel):
    """Main configuration."""

    presets: list[PresetConfig] = Field(default_factory=_default_presets)
    default_preset: int = Field(default=0, description="Index of the preset highlighted at start")
    tick_seconds: float = Field(default=1.0, gt=0, description="Length of one timer tick")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Level of records written to the log file"
    )

    def build_selector(self) -> SessionSelector:
        """Validated selector for these presets.

        Raises:
            PresetConfigError: On an empty list, a non-positive duration or a
                default index outside the list.
        """
        return SessionSelector.create(
            [p.to_preset() for p in self.presets], default_index=self.default_preset
        )


def parse_preset(value: str) -> PresetConfig:
    """Parse the ``FOCUS/BREAK`` form used on the command line, e.g. ``25/5``."""
    parts = value.split("/", 1)
    if len(parts) != 2:
        raise PresetConfigError(f"Invalid preset '{value}': expected FOCUS/BREAK in minutes")
    try:
        focus_minutes, break_minutes = (int(part.strip()) for part in parts)
    except ValueError as e:
        raise PresetConfigError(
            f"Invalid preset '{value}': durations must be whole minutes"
        ) from e
    return PresetConfig(focus_minutes=focus_minutes, break_minutes=break_minutes)


class ConfigManager:
    """Loads Pomodoro CLI configuration."""

    def __init__(self, config_path: Path | None = None):
        if config_path is None:
            config_path = Path(user_config_dir("pomodoro_cli")) / CONFIG_FILE
        self.config_path = config_path
        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Read the config file, falling back to defaults when it does not exist.

        Raises:
            PresetConfigError: If the file cannot be read or does not match
                the schema.
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                return AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            return AppConfig()
        except ValidationError as e:
            raise PresetConfigError(f"Invalid config file {self.config_path}: {e}") from e
        except OSError as e:
            raise PresetConfigError(f"Failed to read config {self.config_path}: {e}") from e
