"""Root CLI group for prjboard with global flags and command registration."""

from __future__ import annotations

import click

from prjboard import __version__
from prjboard.commands import register_commands
from prjboard.commands._context import AppContext
from prjboard.config.settings import BoardSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="prjboard")
@click.option("--json", "json_output", is_flag=True, help="Print the store snapshot as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """prjboard — project board with a validated form and filtered lists."""
    settings = BoardSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
