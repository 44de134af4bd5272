"""Rich console and theme for domblock output.

Renderers draw into an in-memory console so formatters can return plain
strings. Rich drops color codes on its own when the buffer is not a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DOM_THEME = Theme(
    {
        "dom.ok": "bold green",
        "dom.error": "bold red",
        "dom.op": "bold cyan",
        "dom.key": "dim",
        "dom.domain": "bold",
        "dom.bad": "bold red",
        "dom.good": "green",
        "dom.matched": "magenta",
    }
)


def create_console() -> Console:
    """Console writing to a StringIO buffer at a fixed 120-column width."""
    return Console(file=StringIO(), theme=DOM_THEME, highlight=False, width=120)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
