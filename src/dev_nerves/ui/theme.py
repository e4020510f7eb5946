"""Console theme for dev-nerves.

Cyan headings, green ticks, yellow warnings, red errors.
"""

from dataclasses import dataclass

from rich.console import Console
from rich.style import Style
from rich.theme import Theme


@dataclass
class NervesTheme:
    """Color palette."""

    PRIMARY = "cyan"
    SUCCESS = "green"
    WARNING = "yellow"
    ERROR = "red"
    INFO = "blue"
    TEXT_DIM = "grey50"


THEME = Theme({
    "title": Style(color=NervesTheme.PRIMARY, bold=True),
    "primary": Style(color=NervesTheme.PRIMARY),
    "ok": Style(color=NervesTheme.SUCCESS),
    "warn": Style(color=NervesTheme.WARNING),
    "error": Style(color=NervesTheme.ERROR),
    "info": Style(color=NervesTheme.INFO),
    "text.dim": Style(color=NervesTheme.TEXT_DIM),
})


def make_console() -> Console:
    """Console used for all operator-facing output."""
    return Console(theme=THEME, highlight=False)


console = make_console()
