"""dev-nerves targets - List supported target devices."""

import click
from rich.table import Table

from dev_nerves.devices import list_devices
from dev_nerves.ui.theme import console


@click.command()
def targets_cmd():
    """List supported target devices in menu order."""
    table = Table(title="Supported Targets")
    table.add_column("Target", style="cyan")
    table.add_column("Device")
    table.add_column("Description", style="dim")

    for device in list_devices():
        table.add_row(device.code, device.display_name, device.short_description)

    console.print(table)
    console.print("\n[bold]Usage:[/]")
    console.print("  dev-nerves new my_robot --target rpi4")
