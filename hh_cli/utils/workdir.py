# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Persisted remote working directory.

The working directory lives in a one-line file (``~/.hhwd`` by default) so
relative paths resolve the same way across separate ``hh`` invocations.
"""

from pathlib import Path
from typing import Optional

from hh_cli.utils.config import HHConfig, resolve_workdir_path
from hh_cli.utils.logger import get_logger
from hh_cli.utils.path import is_absolute, join, normalize

logger = get_logger(__name__)


class WorkingDirStore:
    """Reads and writes the persisted working directory."""

    def __init__(self, config: HHConfig, path: Optional[Path] = None):
        self._config = config
        self.path = path if path is not None else resolve_workdir_path()

    def get_default_working_dir(self) -> str:
        return self._config.default_working_dir

    def get_working_dir(self) -> str:
        """Return the persisted working directory, or the default if it cannot be read."""
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Working directory not readable from %s: %s", self.path, e)
            return self.get_default_working_dir()

        working_dir = content.split("\n", 1)[0]
        if not is_absolute(working_dir):
            logger.debug("Ignoring working directory %r from %s", working_dir, self.path)
            return self.get_default_working_dir()
        return working_dir

    def set_working_dir(self, path: str) -> None:
        self.path.write_text(path + "\n", encoding="utf-8")

    def get_absolute(self, path: str) -> str:
        """Resolve ``path`` against the working directory and normalize it."""
        if is_absolute(path):
            return normalize(path)

        working_dir = self.get_working_dir()
        if not path:
            return normalize(working_dir)
        return normalize(join(working_dir, path))
