# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Base client interface for hh.

Defines the remote filesystem contract the command layer depends on.
"""

from abc import ABC, abstractmethod

from hh_cli.client.types import ContentSummary, Listing


class BaseClient(ABC):
    """Abstract base class for remote filesystem clients."""

    # ============= Lifecycle =============

    def initialize(self) -> None:
        """Initialize the client."""

    def close(self) -> None:
        """Close the client and release resources."""

    # ============= File System =============

    @abstractmethod
    def list_directory(self, path: str) -> Listing:
        """List a directory; ``Missing`` when the path does not exist."""
        ...

    @abstractmethod
    def content_summary(self, path: str) -> ContentSummary:
        """Aggregate usage of ``path``. Raises ``RemoteError`` on failure."""
        ...

    @abstractmethod
    def create_directory(self, path: str, create_parents: bool = False) -> bool:
        """Create a directory. Returns False if it was not created."""
        ...

    @abstractmethod
    def delete(self, path: str, recursive: bool = False) -> bool:
        """Delete a file or directory. Returns False if nothing was deleted."""
        ...

    @abstractmethod
    def rename(self, src: str, dst: str, overwrite: bool = False) -> None:
        """Rename ``src`` to ``dst``. Raises ``RemoteError`` on failure."""
        ...
