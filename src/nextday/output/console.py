"""Rich rendering into a string.

Output is rendered into a StringIO-backed Console and handed to
``click.echo``, so the caller still picks stdout or stderr. Rich emits no
escape codes when the buffer is not a terminal.
"""

from __future__ import annotations

from collections.abc import Iterable
from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

NEXTDAY_THEME = Theme(
    {
        "nextday.date": "bold green",
        "nextday.error": "bold red",
        "nextday.diagnostic": "red",
    }
)


def create_console(*, no_color: bool = False) -> Console:
    """Create a Console writing to a private StringIO buffer."""
    return Console(file=StringIO(), theme=NEXTDAY_THEME, no_color=no_color, highlight=False)


def render_lines(lines: Iterable[str], style: str, *, no_color: bool = False) -> str:
    """Render each line as plain Text in *style*; markup like ``[1,31]`` stays literal."""
    console = create_console(no_color=no_color)
    for line in lines:
        console.print(Text(line, style=style), soft_wrap=True)
    buffer = console.file
    assert isinstance(buffer, StringIO)
    return buffer.getvalue().rstrip("\n")
