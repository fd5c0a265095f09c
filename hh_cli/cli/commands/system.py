# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""System utility commands."""

import typer

from hh_cli.cli.errors import run


def register(app: typer.Typer) -> None:
    """Register system utility commands."""

    @app.command("version")
    def version_command(ctx: typer.Context) -> None:
        """Show version information."""
        run(ctx, lambda executor: executor.version(), needs_client=False)
