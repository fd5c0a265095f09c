# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""CLI output helpers."""

from typing import Any, NoReturn

import typer

from hh_cli.utils.logger import get_logger

logger = get_logger(__name__)


def output_success(result: Any) -> None:
    """Print a successful command result; None or empty output prints nothing."""
    if result is None or result == "":
        return
    typer.echo(result)


def output_error(*, message: str, code: str, exit_code: int) -> NoReturn:
    """Print exactly one error message on stderr, then exit."""
    logger.debug("Command failed [%s], exit code %d", code, exit_code)
    typer.echo(message, err=True)
    raise typer.Exit(exit_code)
