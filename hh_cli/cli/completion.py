# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tab completion of remote paths."""

from typing import List, Optional

import httpx
import typer

from hh_cli.client.base import BaseClient
from hh_cli.client.types import Missing
from hh_cli.exceptions import RemoteError
from hh_cli.utils.formatters import display_path
from hh_cli.utils.logger import get_logger
from hh_cli.utils.path import split_parent
from hh_cli.utils.workdir import WorkingDirStore

logger = get_logger(__name__)


def path_candidates(
    client: BaseClient,
    workdir: WorkingDirStore,
    partial: str,
    directories_only: bool = False,
) -> List[str]:
    """Entries of the parent of ``partial`` whose display path starts with ``partial``.

    Candidates keep the directory part exactly as typed, so relative input
    completes to relative paths.
    """
    directory, _ = split_parent(partial)
    listing = client.list_directory(workdir.get_absolute(directory))
    if isinstance(listing, Missing):
        return []

    candidates = [
        display_path(directory, entry)
        for entry in listing.entries
        if entry.is_dir or not directories_only
    ]
    return [c for c in candidates if c.startswith(partial)]


def config_option(ctx: typer.Context) -> Optional[str]:
    """The ``--config`` value given on the command line being completed."""
    return ctx.find_root().params.get("config")


def complete_path(
    incomplete: str,
    directories_only: bool = False,
    config_path: Optional[str] = None,
) -> List[str]:
    """Completion callback body; any remote or configuration failure yields no candidates."""
    from hh_cli.cli.context import CliConfigError, CLIContext

    try:
        cli_ctx = CLIContext.from_config_path(config_path)
        try:
            client = cli_ctx.get_client()
            return path_candidates(client, cli_ctx.workdir, incomplete, directories_only)
        finally:
            cli_ctx.close_client()
    except (CliConfigError, RemoteError, httpx.HTTPError) as e:
        logger.debug("Completion of %r failed: %s", incomplete, e)
        return []


def complete_any(ctx: typer.Context, incomplete: str) -> List[str]:
    return complete_path(incomplete, config_path=config_option(ctx))


def complete_directory(ctx: typer.Context, incomplete: str) -> List[str]:
    return complete_path(incomplete, directories_only=True, config_path=config_option(ctx))
