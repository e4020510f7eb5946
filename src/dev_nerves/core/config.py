"""Resolving the project configuration.

Explicit command-line values are merged with interactive answers into one
``Configuration``. The merge rules:

- Target: a valid ``--target`` is used as is. An invalid one prints a
  warning and falls back to the device menu, as does a missing one.
- WiFi: only when *neither* ``--wifi-ssid`` nor ``--wifi-psk`` is given is
  the operator asked. If either is given, WiFi counts as configured and the
  missing half stays empty without a prompt. Passing only an SSID therefore
  yields an empty password. This is long-standing behaviour and is kept.
- Dependencies: only asked about when the target was not given.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from rich.console import Console
from rich.markup import escape

from dev_nerves import devices
from dev_nerves.errors import InvalidProjectNameError, ProjectExistsError
from dev_nerves.ui.prompter import Prompter

PROJECT_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")


@dataclass(frozen=True)
class Configuration:
    """Resolved configuration for one run. Empty string means unset."""
    target: str
    wifi_ssid: str = ""
    wifi_psk: str = ""

    @property
    def wifi_configured(self) -> bool:
        """SSID is set. The getting-started guide branches on this alone."""
        return self.wifi_ssid != ""

    @property
    def has_wifi_credentials(self) -> bool:
        """SSID and PSK are both set.

        The dev container environment and the target.exs block branch on
        this, not on ``wifi_configured``.
        """
        return self.wifi_ssid != "" and self.wifi_psk != ""


def _default_console() -> Console:
    from dev_nerves.ui.theme import console
    return console


# =============================================================================
# Project name
# =============================================================================

def is_valid_project_name(name: str) -> bool:
    return PROJECT_NAME_PATTERN.match(name) is not None


def validate_project_name(name: str, cwd: Optional[Path] = None) -> Path:
    """Check the project name and that its directory is free.

    Args:
        name: Project name from the command line
        cwd: Directory the project is created in (defaults to cwd)

    Returns:
        Path the project will be created at

    Raises:
        InvalidProjectNameError: If the name is malformed
        ProjectExistsError: If the directory already exists
    """
    if not is_valid_project_name(name):
        raise InvalidProjectNameError(name)

    project_dir = (cwd or Path.cwd()) / name
    if project_dir.exists():
        raise ProjectExistsError(name)
    return project_dir


# =============================================================================
# Target
# =============================================================================

def prompt_target(prompter: Prompter, console: Optional[Console] = None) -> str:
    """Ask for a target from the device menu."""
    console = console or _default_console()
    console.print("\n[primary]Select your target device:[/]\n")

    codes = list(devices.target_codes())
    selected = prompter.select_one(
        codes,
        render=lambda code: devices.lookup(code).menu_label,
        label="Choose your device:",
    )

    console.print(f"\n[ok]✓[/] Selected: [primary]{selected}[/]\n")
    return selected


def resolve_target(
    explicit: Optional[str],
    prompter: Prompter,
    console: Optional[Console] = None,
) -> str:
    """Resolve the target device code."""
    console = console or _default_console()

    if explicit is not None:
        if devices.is_valid_target(explicit):
            console.print(f"[ok]✓[/] Target: [primary]{explicit}[/]")
            return explicit
        console.print(
            f"[warn]Warning:[/] Invalid target '{escape(explicit)}', prompting for selection..."
        )

    return prompt_target(prompter, console)


# =============================================================================
# WiFi
# =============================================================================

def prompt_wifi(prompter: Prompter, console: Optional[Console] = None) -> Tuple[str, str]:
    """Ask whether to configure WiFi and, if so, for the credentials."""
    console = console or _default_console()
    console.print("\n[primary]WiFi Configuration[/]")

    configure = prompter.select_one(
        [True, False],
        render=lambda yes: "Yes, configure WiFi now" if yes else "No, I'll configure it later",
        label="Would you like to configure WiFi?",
    )

    if not configure:
        console.print(
            "\n[info]ℹ[/] WiFi configuration skipped. You can configure it later "
            "in .devcontainer/devcontainer.json\n"
        )
        return "", ""

    console.print("")
    ssid = prompter.text_input("WiFi SSID").strip()
    psk = prompter.secret_input("WiFi Password").strip()

    console.print(f"\n[ok]✓[/] WiFi configured for SSID: [primary]{escape(ssid)}[/]\n")
    return ssid, psk


def resolve_wifi(
    explicit_ssid: Optional[str],
    explicit_psk: Optional[str],
    prompter: Prompter,
    console: Optional[Console] = None,
) -> Tuple[str, str]:
    """Resolve WiFi credentials as ``(ssid, psk)``.

    Either explicit value short-circuits the prompt. The other one is left
    empty.
    """
    console = console or _default_console()

    if explicit_ssid is None and explicit_psk is None:
        return prompt_wifi(prompter, console)

    console.print(f"[ok]✓[/] WiFi configured: [primary]{escape(explicit_ssid or 'none')}[/]")
    return explicit_ssid or "", explicit_psk or ""


# =============================================================================
# Dependency installation
# =============================================================================

def resolve_install_deps(
    interactive: bool,
    prompter: Prompter,
    console: Optional[Console] = None,
) -> bool:
    """Decide whether ``mix nerves.new`` should fetch dependencies on the host.

    Only asked in interactive mode. Windows hosts cannot build Nerves
    dependencies, so the first (default) option is to skip.
    """
    if not interactive:
        return False

    console = console or _default_console()
    console.print("\n[primary]📦 Dependency Installation[/]\n")

    install = prompter.select_one(
        [False, True],
        render=lambda yes: (
            "Yes, install on host (only if Linux/Mac with Nerves installed)"
            if yes
            else "No, install in dev container (RECOMMENDED for Windows)"
        ),
        label="Install dependencies now? (Recommended: No for Windows users)",
    )

    console.print("")
    if install:
        console.print(
            "[warn]⚠️  [/]Will attempt to install dependencies on host.\n"
            "(May fail on Windows - dependencies will be installed in container instead)\n"
        )
    else:
        console.print(
            "[ok]✓[/] Dependencies will be skipped. Install them in the dev container later.\n"
        )
    return install


# =============================================================================
# Entry point
# =============================================================================

def gather_configuration(
    target: Optional[str],
    wifi_ssid: Optional[str],
    wifi_psk: Optional[str],
    prompter: Prompter,
    console: Optional[Console] = None,
) -> Configuration:
    """Build the run's configuration from flags and prompts."""
    console = console or _default_console()
    console.print("[primary]📋 Configuration[/]\n")

    resolved_target = resolve_target(target, prompter, console)
    ssid, psk = resolve_wifi(wifi_ssid, wifi_psk, prompter, console)

    return Configuration(target=resolved_target, wifi_ssid=ssid, wifi_psk=psk)
