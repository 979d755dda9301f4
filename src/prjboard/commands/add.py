"""Command: submit one project through the form and show the board."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from prjboard.commands._base import BoardCommand

if TYPE_CHECKING:
    from prjboard.commands._context import AppContext

_ADD_EXAMPLES = """\
  prjboard add "Build API" "REST service" 3
  prjboard --json add "Build API" "REST service" 3
  prjboard add "Docs" "User guide" 2 --html"""


@click.command(cls=BoardCommand, examples=_ADD_EXAMPLES)
@click.argument("title")
@click.argument("description")
@click.argument("people")
@click.option("--html", is_flag=True, help="Print the rendered page markup instead of the lists.")
@click.pass_obj
def add(app: AppContext, title: str, description: str, people: str, html: bool) -> None:
    """Submit a project (TITLE, DESCRIPTION, PEOPLE) and show the board."""
    if not app.board.submit(title, description, people):
        raise SystemExit(1)
    app.emit_board(html=html)
