"""Subcommand modules for prjboard.

Provides register_commands() which uses deferred imports to keep
``prjboard --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from prjboard.commands.add import add
    from prjboard.commands.run import run

    cli.add_command(add)
    cli.add_command(run)
