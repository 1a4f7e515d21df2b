"""Subcommand modules for timegap.

register_commands() imports the groups lazily so ``timegap --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups on the root CLI group."""
    from timegap.commands.month import month
    from timegap.commands.sales import sales
    from timegap.commands.zone import zone

    cli.add_command(month)
    cli.add_command(zone)
    cli.add_command(sales)
