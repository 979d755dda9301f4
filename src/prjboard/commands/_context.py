"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns the single :class:`ProjectBoard` of the process,
and with it the single project store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from prjboard.output.renderers import format_alert, render_json, render_lists

if TYPE_CHECKING:
    from prjboard.app import ProjectBoard
    from prjboard.config.settings import BoardSettings


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The board is lazily mounted on first use so ``--help`` and
    ``--version`` never touch templates. Every later access returns the
    same board.
    """

    def __init__(self, settings: BoardSettings) -> None:
        self.settings = settings
        self._board: ProjectBoard | None = None

        from prjboard.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def board(self) -> ProjectBoard:
        """The mounted board (created on first access).

        Raises:
            click.ClickException: A template or host node is missing.
        """
        if self._board is None:
            from prjboard.app import ProjectBoard
            from prjboard.infrastructure.dom import MountResolutionError

            ui = self.settings.ui
            validation = self.settings.validation
            try:
                self._board = ProjectBoard(
                    self.alert,
                    template_dir=ui.template_dir,
                    host_id=ui.host_id,
                    input_template=ui.input_template,
                    list_template=ui.list_template,
                    form_id=ui.form_id,
                    people_min=validation.people_min,
                    people_max=validation.people_max,
                    alert_message=validation.alert_message,
                )
            except MountResolutionError as exc:
                msg = f"Cannot mount board: {exc}"
                raise click.ClickException(msg) from exc
        return self._board

    def alert(self, message: str) -> None:
        """Show a blocking user-facing alert on stderr."""
        click.echo(format_alert(message), err=True)

    def emit_board(self, *, html: bool = False) -> None:
        """Write the board's visible state to stdout."""
        if html:
            click.echo(self.board.document.to_html())
        elif self.settings.json_output:
            click.echo(render_json(self.board))
        else:
            click.echo(render_lists(self.board))
