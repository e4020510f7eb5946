"""Main CLI entry point for dev-nerves."""

import logging

import click
from rich.logging import RichHandler

from dev_nerves import __version__
from dev_nerves.commands.new import new_cmd
from dev_nerves.commands.targets import targets_cmd
from dev_nerves.ui.theme import console


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__, prog_name="dev-nerves")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """dev-nerves - Nerves projects with a ready-made dev container.

    Build Nerves firmware from Windows, Mac or Linux without installing
    Elixir on the host: everything runs inside a VS Code dev container.

    \b
    Quick Start:
      dev-nerves new my_robot                 Interactive setup
      dev-nerves new my_robot -t rpi4         Skip the device menu
      dev-nerves targets                      List supported devices

    \b
    WiFi:
      dev-nerves new my_robot -t rpi4 --wifi-ssid MyWiFi --wifi-psk secret
    """
    _configure_logging(verbose)


main.add_command(new_cmd, name="new")
main.add_command(targets_cmd, name="targets")


if __name__ == "__main__":
    main()
