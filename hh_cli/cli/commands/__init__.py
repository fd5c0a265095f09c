# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Command registration for hh CLI."""

import typer

from hh_cli.cli.commands import filesystem, system


def register_commands(app: typer.Typer) -> None:
    """Register all supported commands into the root CLI app."""
    filesystem.register(app)
    system.register(app)
