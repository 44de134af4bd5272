"""Subcommand modules for domblock.

Provides register_commands() which uses deferred imports to keep
``domblock --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from domblock.commands.check import check
    from domblock.commands.lookup import lookup

    cli.add_command(check)
    cli.add_command(lookup)
