"""Rich Console factory and theme for timegap output.

Consoles render into a StringIO buffer so renderers keep the
``format_result() -> str`` contract. Outside a terminal (tests, pipes)
Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TIMEGAP_THEME = Theme(
    {
        "tg.ok": "bold green",
        "tg.error": "bold red",
        "tg.op": "bold cyan",
        "tg.key": "dim",
        "tg.month": "bold blue",
        "tg.zone": "magenta",
        "tg.value": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=TIMEGAP_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
