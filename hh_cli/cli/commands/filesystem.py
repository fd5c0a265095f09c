# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Filesystem commands."""

from typing import Optional

import typer

from hh_cli.cli.completion import complete_any, complete_directory
from hh_cli.cli.errors import run


def register(app: typer.Typer) -> None:
    """Register filesystem commands."""

    @app.command("cd")
    def cd_command(
        ctx: typer.Context,
        path: Optional[str] = typer.Argument(
            None,
            help="The directory to change to (default: /user/<user>)",
            metavar="DIRECTORY",
            autocompletion=complete_directory,
        ),
    ) -> None:
        """Change working directory."""
        run(ctx, lambda executor: executor.cd(path))

    @app.command("ls")
    def ls_command(
        ctx: typer.Context,
        path: str = typer.Argument(
            "",
            help="The directory to list",
            metavar="DIRECTORY",
            show_default=False,
            autocompletion=complete_directory,
        ),
    ) -> None:
        """List the contents of a directory."""
        run(ctx, lambda executor: executor.ls(path))

    @app.command("du")
    def du_command(
        ctx: typer.Context,
        path: str = typer.Argument(
            "",
            help="The file/directory to check the usage of",
            metavar="PATH",
            show_default=False,
            autocompletion=complete_any,
        ),
    ) -> None:
        """Show the amount of space used by file or directory."""
        run(ctx, lambda executor: executor.du(path))

    @app.command("mkdir")
    def mkdir_command(
        ctx: typer.Context,
        path: str = typer.Argument(
            ...,
            help="The directory to create",
            metavar="DIRECTORY",
            autocompletion=complete_directory,
        ),
        parents: bool = typer.Option(
            False, "-p", "--parents", help="Create intermediate directories"
        ),
    ) -> None:
        """Create a directory in the specified location."""
        run(ctx, lambda executor: executor.mkdir(path, parents=parents))

    @app.command("rm")
    def rm_command(
        ctx: typer.Context,
        path: str = typer.Argument(
            ...,
            help="The file/directory to remove",
            metavar="PATH",
            autocompletion=complete_any,
        ),
        recursive: bool = typer.Option(
            False, "-r", "--recursive", help="Recursively remove the whole file hierarchy"
        ),
    ) -> None:
        """Delete a file or directory."""
        run(ctx, lambda executor: executor.rm(path, recursive=recursive))

    @app.command("mv")
    def mv_command(
        ctx: typer.Context,
        src: str = typer.Argument(
            ..., help="Source file/directory", metavar="PATH", autocompletion=complete_any
        ),
        dst: str = typer.Argument(
            ..., help="Destination file/directory", metavar="PATH", autocompletion=complete_any
        ),
        force: bool = typer.Option(
            False, "-f", "--force", help="Overwrite destination if it exists"
        ),
    ) -> None:
        """Rename a file or directory."""
        run(ctx, lambda executor: executor.mv(src, dst, force=force))

    @app.command("pwd")
    def pwd_command(ctx: typer.Context) -> None:
        """Print working directory."""
        run(ctx, lambda executor: executor.pwd(), needs_client=False)
