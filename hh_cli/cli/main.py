# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Typer entrypoint for hh CLI."""

from typing import Optional

import typer

from hh_cli.cli.commands import register_commands
from hh_cli.cli.context import CliConfigError, CLIContext
from hh_cli.cli.errors import handle_command_error
from hh_cli.utils.logger import configure_logging

app = typer.Typer(
    help="hh - Blazing fast interaction with HDFS",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        from hh_cli import __version__

        typer.echo(f"hh version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to the hh config file (default: $HH_CONFIG_FILE or ~/.hh)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Resolve configuration once and share it with every command."""
    try:
        cli_ctx = CLIContext.from_config_path(config)
        try:
            configure_logging(cli_ctx.config.log_level, cli_ctx.config.log_output)
        except OSError as e:
            raise CliConfigError(
                f"Cannot open log output {cli_ctx.config.log_output}: {e}"
            ) from e
    except CliConfigError as exc:
        handle_command_error(exc)

    ctx.obj = cli_ctx


register_commands(app)


if __name__ == "__main__":
    app()
