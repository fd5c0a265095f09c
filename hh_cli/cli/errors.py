# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Exception handling helpers for CLI commands."""

from typing import Any, Callable, NoReturn

import httpx
import typer

from hh_cli.cli.context import CliConfigError, CLIContext, get_cli_context
from hh_cli.cli.output import output_error, output_success
from hh_cli.exceptions import RemoteError, render
from hh_cli.executor import CommandExecutor


def handle_command_error(exc: Exception) -> NoReturn:
    """Normalize command exceptions into user-facing output and exit codes."""
    if isinstance(exc, typer.Exit):
        raise exc

    if isinstance(exc, CliConfigError):
        output_error(message=str(exc), code="CLI_CONFIG", exit_code=2)

    elif isinstance(exc, RemoteError):
        output_error(message=render(exc), code=exc.kind.value, exit_code=1)

    elif isinstance(exc, (httpx.ConnectError, httpx.ConnectTimeout, httpx.ReadTimeout)):
        output_error(
            message=(
                "Failed to connect to namenode. "
                "Check namenode.host in ~/.hh and ensure WebHDFS is reachable "
                f"({exc})."
            ),
            code="CONNECTION_ERROR",
            exit_code=3,
        )

    else:
        output_error(message=str(exc), code="CLI_ERROR", exit_code=1)


def execute_command(
    ctx: CLIContext,
    operation: Callable[[CommandExecutor], Any],
    needs_client: bool = True,
) -> Any:
    """Run a command with consistent error handling and cleanup."""
    try:
        executor = ctx.get_executor(needs_client=needs_client)
        return operation(executor)
    except Exception as exc:  # noqa: BLE001
        handle_command_error(exc)
    finally:
        ctx.close_client()


def run(
    ctx: typer.Context,
    fn: Callable[[CommandExecutor], Any],
    needs_client: bool = True,
) -> None:
    """Execute a command with boilerplate: context → execute → output."""
    cli_ctx = get_cli_context(ctx)
    result = execute_command(cli_ctx, fn, needs_client=needs_client)
    output_success(result)
