"""Command: interactive board session."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from prjboard.commands._base import BoardCommand

if TYPE_CHECKING:
    from prjboard.commands._context import AppContext


@click.command(cls=BoardCommand, examples="  prjboard run\n  prjboard -v run")
@click.pass_obj
def run(app: AppContext) -> None:
    """Prompt for projects one at a time and show the board after each."""
    board = app.board
    while True:
        title = click.prompt("Title", default="", show_default=False)
        description = click.prompt("Description", default="", show_default=False)
        people = click.prompt("People", default="", show_default=False)
        if board.submit(title, description, people):
            app.emit_board()
        if not click.confirm("Add another project?", default=True):
            break
