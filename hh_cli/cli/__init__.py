# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""hh CLI package."""

from hh_cli.cli.main import app

__all__ = ["app"]
