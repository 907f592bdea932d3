"""Rich Console factory and theme for ugraph output.

Consoles render to a StringIO buffer so renderers keep a
``ServiceResult -> str`` contract. In non-TTY environments (tests, pipes)
Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

UGRAPH_THEME = Theme(
    {
        "ug.ok": "bold green",
        "ug.error": "bold red",
        "ug.warning": "bold yellow",
        "ug.op": "bold cyan",
        "ug.key": "dim",
        "ug.node": "bold blue",
        "ug.count": "magenta",
        "ug.yes": "bold red",
        "ug.no": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=UGRAPH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
