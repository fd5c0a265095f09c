# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Runtime context and client factory for CLI commands."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import typer

from hh_cli.executor import CommandExecutor
from hh_cli.utils.config import (
    DEFAULT_HH_CONF,
    HH_CONFIG_ENV,
    HHConfig,
    load_hh_config,
    resolve_config_path,
)
from hh_cli.utils.workdir import WorkingDirStore

if TYPE_CHECKING:
    from hh_cli.client.base import BaseClient


class CliConfigError(ValueError):
    """Raised when required CLI configuration is missing or invalid."""


@dataclass
class CLIContext:
    """Shared state for one CLI invocation."""

    config: HHConfig
    workdir: WorkingDirStore
    _client: Optional["BaseClient"] = field(default=None, init=False, repr=False)

    @classmethod
    def from_config_path(cls, config_path: Optional[str] = None) -> "CLIContext":
        """Resolve the configuration once and build the context around it."""
        path = resolve_config_path(config_path, HH_CONFIG_ENV, DEFAULT_HH_CONF)
        try:
            config = load_hh_config(path)
        except (ValueError, FileNotFoundError) as e:
            raise CliConfigError(str(e)) from e
        return cls(config=config, workdir=WorkingDirStore(config))

    def get_client(self) -> "BaseClient":
        """Create the WebHDFS client on first use."""
        if self._client is not None:
            return self._client

        from hh_cli.client.webhdfs import WebHDFSClient

        try:
            self._client = WebHDFSClient(self.config)
        except ValueError as e:
            raise CliConfigError(str(e)) from e
        self._client.initialize()
        return self._client

    def get_executor(self, needs_client: bool = True) -> CommandExecutor:
        client = self.get_client() if needs_client else None
        return CommandExecutor(self.workdir, client)

    def close_client(self) -> None:
        """Close the client if it has been created."""
        if self._client is None:
            return
        self._client.close()
        self._client = None


def get_cli_context(ctx: typer.Context) -> CLIContext:
    """Return a typed CLI context from Typer context."""
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context is not initialized")
    return ctx.obj
