"""Timer display.

``render_view`` turns a state into plain text and is what the tests pin down.
``TimerDisplay`` adds colours and layout on top of it for the live screen.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.text import Text

from .machine import SELECTION_FAILED
from .state import Phase, TimerState

TITLE = "Choose the pomodoro setting"
FOCUS_ICON = "🍅"
BREAK_ICON = "😴"
PAUSED_PREFIX = "Paused the timer: "
HIGHLIGHT_MARKER = "> "
ITEM_INDENT = "  "

# Theme
TITLE_STYLE = "bold"
ITEM_STYLE = "white"
SELECTED_STYLE = "bold magenta"
FOCUS_STYLE = "bold red"
BREAK_STYLE = "bold cyan"
PAUSED_STYLE = "bold yellow"
NOTICE_STYLE = "green"
FAILURE_STYLE = "bold red"
HINT_STYLE = "dim"


def format_remaining(seconds: int) -> str:
    """``MM:SS``, or ``H:MM:SS`` from one hour up. Negative input shows 00:00."""
    seconds = max(int(seconds), 0)
    hours, rest = divmod(seconds, 3600)
    mins, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{mins:02d}:{secs:02d}"
    return f"{mins:02d}:{secs:02d}"


def countdown_line(state: TimerState) -> str:
    """Countdown text for the current phase, e.g. ``🍅 24:59``."""
    remaining = format_remaining(state.remaining)
    if state.phase == Phase.ON_BREAK:
        line = f"{BREAK_ICON} Break {remaining}"
    else:
        line = f"{FOCUS_ICON} {remaining}"
    if state.paused:
        line = PAUSED_PREFIX + line
    return line


def selector_lines(state: TimerState) -> list[str]:
    selector = state.selector
    lines = [TITLE, ""]
    for index, preset in enumerate(selector.presets):
        if index == selector.highlighted:
            lines.append(HIGHLIGHT_MARKER + preset.label)
        else:
            lines.append(ITEM_INDENT + preset.label)
    return [_truncate(line, state.width) for line in lines]


def hint_line(state: TimerState) -> str:
    if state.selecting:
        return "↑/k up  •  ↓/j down  •  enter select  •  q quit"
    if state.paused:
        return "p resume  •  esc back to presets  •  q quit"
    return "p pause  •  esc back to presets  •  q quit"


def sessions_line(state: TimerState) -> str:
    return f"Sessions completed: {state.sessions_completed}"


def render_view(state: TimerState) -> str:
    """Plain-text snapshot of the screen for ``state``."""
    if state.selecting:
        lines = selector_lines(state)
        if state.sessions_completed > 0:
            lines += ["", sessions_line(state)]
    else:
        lines = [countdown_line(state), sessions_line(state)]
    if state.notice:
        lines += ["", state.notice]
    lines += ["", hint_line(state)]
    return "\n".join(lines)


def _truncate(line: str, width: int) -> str:
    if width > 0 and len(line) > width:
        return line[:width]
    return line


class TimerDisplay:
    """Styles the timer view for the live terminal screen."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def create_layout(self, state: TimerState) -> Layout:
        """Create the layout with header, body and key hints."""
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        header = Text(f"{FOCUS_ICON}  Pomodoro", style="bold", justify="center")
        layout["header"].update(Align.center(header, vertical="middle"))
        layout["body"].update(Align.center(self._create_body(state), vertical="middle"))
        footer = Text(hint_line(state), style=HINT_STYLE, justify="center")
        layout["footer"].update(Align.center(footer, vertical="middle"))
        return layout

    def _create_body(self, state: TimerState) -> Group:
        components = []
        if state.selecting:
            lines = selector_lines(state)
            components.append(Text(lines[0], style=TITLE_STYLE))
            components.append(Text(""))
            for index, line in enumerate(lines[2:]):
                selected = index == state.selector.highlighted
                components.append(Text(line, style=SELECTED_STYLE if selected else ITEM_STYLE))
            if state.sessions_completed > 0:
                components.append(Text(""))
                components.append(Text(sessions_line(state), style=HINT_STYLE))
        else:
            if state.paused:
                style = PAUSED_STYLE
            elif state.phase == Phase.ON_BREAK:
                style = BREAK_STYLE
            else:
                style = FOCUS_STYLE
            components.append(Text(countdown_line(state), style=style, justify="center"))
            components.append(Text(""))
            components.append(Text(sessions_line(state), style=HINT_STYLE, justify="center"))

        if state.notice:
            components.append(Text(""))
            components.append(self._create_notice(state.notice))

        return Group(*components)

    @staticmethod
    def _create_notice(notice: str) -> Text:
        style = FAILURE_STYLE if notice == SELECTION_FAILED else NOTICE_STYLE
        return Text(notice, style=style, justify="center")

