"""dev-nerves new - Create a Nerves project with a dev container setup."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from dev_nerves.bootstrap import ProjectBootstrapper
from dev_nerves.core.config import (
    Configuration,
    gather_configuration,
    resolve_install_deps,
    validate_project_name,
)
from dev_nerves.core.settings import DevNervesSettings, load_settings
from dev_nerves.errors import DevNervesError
from dev_nerves.templates import scaffold_devcontainer
from dev_nerves.templates.context import ArtifactContext
from dev_nerves.ui.prompter import ConsolePrompter, Prompter
from dev_nerves.ui.theme import console


@click.command()
@click.argument("name")
@click.option(
    "--target",
    "-t",
    help="Target device code (see `dev-nerves targets`)",
)
@click.option("--wifi-ssid", help="WiFi SSID to configure")
@click.option("--wifi-psk", help="WiFi password to configure")
@click.option(
    "--settings",
    "settings_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file (JSON)",
)
def new_cmd(
    name: str,
    target: Optional[str],
    wifi_ssid: Optional[str],
    wifi_psk: Optional[str],
    settings_file: Optional[Path],
):
    """Create a new Nerves project with dev container setup.

    NAME is the project directory name.

    \b
    Example:
      dev-nerves new my_robot
      dev-nerves new my_robot -t rpi4 --wifi-ssid MyWiFi --wifi-psk password123
    """
    try:
        create_project(
            name,
            target=target,
            wifi_ssid=wifi_ssid,
            wifi_psk=wifi_psk,
            settings=load_settings(settings_file),
        )
    except DevNervesError as e:
        console.print(f"[error]Error:[/] {escape(str(e))}")
        raise SystemExit(1)


def create_project(
    name: str,
    target: Optional[str] = None,
    wifi_ssid: Optional[str] = None,
    wifi_psk: Optional[str] = None,
    settings: Optional[DevNervesSettings] = None,
    prompter: Optional[Prompter] = None,
    bootstrapper: Optional[ProjectBootstrapper] = None,
    cwd: Optional[Path] = None,
    out: Optional[Console] = None,
) -> Configuration:
    """Validate, resolve, bootstrap and scaffold a project.

    Raises:
        DevNervesError: On invalid input, a failed generator or a
            filesystem error
    """
    out = out or console
    cwd = cwd or Path.cwd()
    settings = settings or DevNervesSettings()
    project_dir = validate_project_name(name, cwd)

    prompter = prompter or ConsolePrompter(out)
    bootstrapper = bootstrapper or ProjectBootstrapper(settings.bootstrap_command, cwd=cwd)

    out.print(Panel.fit(
        "[bold]🚀 Nerves Dev Container Setup[/]\n"
        "Easy Nerves development for Windows users",
        border_style="cyan",
    ))

    config = gather_configuration(target, wifi_ssid, wifi_psk, prompter, out)
    install_deps = resolve_install_deps(target is None, prompter, out)

    out.print("\n[primary]📦 Creating Nerves project...[/]\n")
    bootstrapper.ensure_project(name, config.target, install_deps=install_deps)
    out.print("\n[ok]✅[/] Nerves project created successfully")
    if install_deps:
        out.print(
            "\n[primary]ℹ️  Note:[/] If you see \"error command failed to execute\" above, "
            "that's expected on Windows.\n"
            "Dependencies will be installed inside the dev container instead."
        )

    out.print("\n[primary]🐳 Adding dev container configuration...[/]\n")
    ctx = ArtifactContext(project_name=name, configuration=config, settings=settings)
    scaffold_devcontainer(project_dir, ctx, console=out)
    out.print("\n[ok]✅[/] Dev container setup complete")

    _print_next_steps(name, config, out)
    return config


def _print_next_steps(name: str, config: Configuration, out: Console):
    """Print next steps after creation."""
    out.print(f"\n[ok]✓[/] Project [primary]{name}[/] ready (target: [primary]{config.target}[/])")
    if config.wifi_configured:
        out.print(f"  📡 WiFi: {escape(config.wifi_ssid)}")

    out.print("\n[bold]Next steps:[/]")
    out.print(f"  cd {name}")
    out.print(f"  code {name}.code-workspace")
    out.print("  F1 → 'Dev Containers: Reopen in Container'")
    out.print("  mix deps.get && mix firmware   [text.dim](inside the container)[/]")
    out.print("\n  See [primary]FIRST_DEVICE.md[/] for the full guide.")
