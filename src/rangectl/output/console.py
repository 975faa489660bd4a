"""Rich Console factory and theme for rangectl output.

Consoles render to a StringIO buffer so renderers can return strings.
In non-TTY environments (tests, pipes) Rich drops color codes itself.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RANGE_THEME = Theme(
    {
        "range.ok": "bold green",
        "range.error": "bold red",
        "range.warning": "bold yellow",
        "range.op": "bold cyan",
        "range.key": "dim",
        "range.rule": "bold blue",
        "range.date": "bold",
        "range.label": "magenta",
        "range.selected": "bold green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=RANGE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
