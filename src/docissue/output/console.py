"""Rich Console factory and theme for docissue output.

Consoles render into a StringIO buffer so formatters keep returning
plain strings. Outside a terminal (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DOC_THEME = Theme(
    {
        "doc.ok": "bold green",
        "doc.error": "bold red",
        "doc.code": "red",
        "doc.op": "bold cyan",
        "doc.key": "dim",
        "doc.label": "bold",
        "doc.stamp": "bold magenta",
        "doc.type.enrollment": "green",
        "doc.type.transcript": "blue",
    }
)

_TYPE_STYLES: dict[str, str] = {
    "enrollment": "doc.type.enrollment",
    "transcript": "doc.type.transcript",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width.
    """
    return Console(
        file=StringIO(),
        theme=DOC_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(request_type: str) -> str:
    """Return the Rich style name for a request type."""
    return _TYPE_STYLES.get(request_type, "")
