"""Interactive prompts.

Core code only talks to the ``Prompter`` capability set:

- ``select_one(options, render, label)`` picks one of ``options``
- ``text_input(label)`` reads a line of plain text
- ``secret_input(label)`` reads a line without echoing it

``ConsolePrompter`` is the terminal implementation. ``ScriptedPrompter``
replays canned answers and is what tests (and any non-interactive caller)
hand to the resolver.
"""

from collections import deque
from typing import Any, Callable, Iterable, List, Optional, Protocol, Sequence, Tuple

import click
from rich.console import Console
from rich.markup import escape


class PrompterExhaustedError(RuntimeError):
    """A scripted prompter was asked something it has no answer for."""
    pass


class Prompter(Protocol):
    """Capability set required by the configuration resolver."""

    def select_one(
        self,
        options: Sequence[Any],
        render: Callable[[Any], str] = str,
        label: str = "Select an option:",
    ) -> Any:
        ...

    def text_input(self, label: str) -> str:
        ...

    def secret_input(self, label: str) -> str:
        ...


# =============================================================================
# Terminal implementation
# =============================================================================

class ConsolePrompter:
    """Numbered menus and line input on the terminal."""

    def __init__(self, console: Optional[Console] = None):
        if console is None:
            from dev_nerves.ui.theme import console as default_console
            console = default_console
        self.console = console

    def select_one(
        self,
        options: Sequence[Any],
        render: Callable[[Any], str] = str,
        label: str = "Select an option:",
    ) -> Any:
        if not options:
            raise ValueError("select_one needs at least one option")

        self.console.print(f"\n[bold]{escape(label)}[/]")
        for index, option in enumerate(options, 1):
            self.console.print(f"  [primary]{index}.[/] {escape(render(option))}")

        choice = click.prompt(
            f"\nEnter number (1-{len(options)})",
            type=click.IntRange(1, len(options)),
            default=1,
        )
        return options[choice - 1]

    def text_input(self, label: str) -> str:
        return click.prompt(label, default="", show_default=False)

    def secret_input(self, label: str) -> str:
        return click.prompt(label, default="", show_default=False, hide_input=True)


# =============================================================================
# Scripted implementation
# =============================================================================

class ScriptedPrompter:
    """Prompter that answers from a fixed script.

    Answers are consumed in order regardless of which method asks. For
    ``select_one`` an answer may be one of the offered options or an
    ``int`` index into them.

    Every call is recorded in ``calls`` as ``(method, label)`` so callers can
    assert that nothing was asked.
    """

    def __init__(self, answers: Iterable[Any] = ()):
        self._answers = deque(answers)
        self.calls: List[Tuple[str, str]] = []
        self.offered: List[Sequence[Any]] = []

    @property
    def called(self) -> bool:
        return bool(self.calls)

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def _next(self, method: str, label: str) -> Any:
        self.calls.append((method, label))
        if not self._answers:
            raise PrompterExhaustedError(f"No scripted answer for {method}({label!r})")
        return self._answers.popleft()

    def select_one(
        self,
        options: Sequence[Any],
        render: Callable[[Any], str] = str,
        label: str = "Select an option:",
    ) -> Any:
        self.offered.append(list(options))
        answer = self._next("select_one", label)

        # bool is an int subclass; treat True/False as option values
        if isinstance(answer, int) and not isinstance(answer, bool):
            return options[answer]
        if answer not in options:
            raise ValueError(f"Scripted answer {answer!r} is not one of {list(options)!r}")
        return answer

    def text_input(self, label: str) -> str:
        return str(self._next("text_input", label))

    def secret_input(self, label: str) -> str:
        return str(self._next("secret_input", label))
