# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Command semantics for hh.

Each public method implements one command on top of the working-directory
store and the remote client contract, and returns the text to print (or
None when the command prints nothing).
"""

from typing import List, Optional, Tuple

from hh_cli import __version__
from hh_cli.client.base import BaseClient
from hh_cli.client.types import FileStatus, Missing
from hh_cli.exceptions import ErrorKind, RemoteError, is_access_denied
from hh_cli.utils.formatters import display_path, format_listing, format_size, format_usage
from hh_cli.utils.logger import get_logger
from hh_cli.utils.path import join
from hh_cli.utils.workdir import WorkingDirStore

logger = get_logger(__name__)


class CommandExecutor:
    """Runs hh commands.

    ``client`` may be None for commands that never touch the remote
    filesystem (``pwd`` and ``version``).
    """

    def __init__(self, workdir: WorkingDirStore, client: Optional[BaseClient] = None):
        self.workdir = workdir
        self._client = client

    @property
    def client(self) -> BaseClient:
        if self._client is None:
            raise RuntimeError("This command requires a remote filesystem client")
        return self._client

    def get_listing_or_fail(self, path: str) -> List[FileStatus]:
        """List ``path``, raising a NOT_FOUND RemoteError if it does not exist."""
        listing = self.client.list_directory(path)
        if isinstance(listing, Missing):
            raise RemoteError(
                f"File/directory does not exist: {listing.path}", "", kind=ErrorKind.NOT_FOUND
            )
        return listing.entries

    # ============= Navigation =============

    def cd(self, path: Optional[str] = None) -> None:
        """Change the persisted working directory; no argument means the user's home."""
        target = self.workdir.get_default_working_dir() if path is None else path
        absolute = self.workdir.get_absolute(target)
        self.get_listing_or_fail(absolute)
        self.workdir.set_working_dir(absolute)
        logger.debug("Working directory set to %s", absolute)

    def pwd(self) -> str:
        return self.workdir.get_working_dir()

    # ============= Inspection =============

    def ls(self, path: str = "") -> str:
        absolute = self.workdir.get_absolute(path)
        return format_listing(self.get_listing_or_fail(absolute))

    def du(self, path: str = "") -> str:
        absolute = self.workdir.get_absolute(path)
        entries = self.get_listing_or_fail(absolute)

        usage: List[Tuple[str, str]] = []
        for entry in entries:
            usage.append((self._entry_size(absolute, entry), display_path(absolute, entry)))
        return format_usage(usage)

    def _entry_size(self, parent: str, entry: FileStatus) -> str:
        entry_path = join(parent, entry.name)
        try:
            summary = self.client.content_summary(entry_path)
        except RemoteError as e:
            if is_access_denied(e):
                logger.debug("Access denied summarizing %s", entry_path)
                return "-"
            raise
        return format_size(summary.length)

    # ============= Mutation =============

    def mkdir(self, path: str, parents: bool = False) -> Optional[str]:
        absolute = self.workdir.get_absolute(path)
        if not self.client.create_directory(absolute, create_parents=parents):
            return f"Failed to create: {absolute}"
        return None

    def rm(self, path: str, recursive: bool = False) -> Optional[str]:
        absolute = self.workdir.get_absolute(path)
        if not self.client.delete(absolute, recursive=recursive):
            return f"Failed to remove: {absolute}"
        return None

    def mv(self, src: str, dst: str, force: bool = False) -> None:
        abs_src = self.workdir.get_absolute(src)
        abs_dst = self.workdir.get_absolute(dst)
        self.client.rename(abs_src, abs_dst, overwrite=force)

    # ============= Misc =============

    def version(self) -> str:
        return f"hh version {__version__}"
