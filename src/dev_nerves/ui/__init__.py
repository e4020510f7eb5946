"""Terminal UI for dev-nerves."""

from dev_nerves.ui.theme import NervesTheme, THEME, console, make_console
from dev_nerves.ui.prompter import (
    Prompter,
    ConsolePrompter,
    ScriptedPrompter,
    PrompterExhaustedError,
)

__all__ = [
    "NervesTheme",
    "THEME",
    "console",
    "make_console",
    "Prompter",
    "ConsolePrompter",
    "ScriptedPrompter",
    "PrompterExhaustedError",
]
