# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Remote filesystem metadata types."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Union


class FileType(str, Enum):
    FILE = "FILE"
    DIRECTORY = "DIRECTORY"
    SYMLINK = "SYMLINK"


@dataclass(frozen=True)
class FileStatus:
    """Metadata of one directory entry."""

    name: str
    file_type: FileType
    permission: int
    owner: str
    group: str
    length: int = 0
    modification_time: int = 0
    replication: int = 0

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY

    @classmethod
    def from_webhdfs(cls, data: Dict[str, Any]) -> "FileStatus":
        """Build from a WebHDFS ``FileStatus`` JSON object (permission is an octal string)."""
        return cls(
            name=data.get("pathSuffix", ""),
            file_type=FileType(data.get("type", "FILE")),
            permission=int(data.get("permission", "0"), 8),
            owner=data.get("owner", ""),
            group=data.get("group", ""),
            length=int(data.get("length", 0)),
            modification_time=int(data.get("modificationTime", 0)),
            replication=int(data.get("replication", 0)),
        )


@dataclass(frozen=True)
class ContentSummary:
    """Aggregate usage of a subtree."""

    length: int
    file_count: int = 0
    directory_count: int = 0

    @classmethod
    def from_webhdfs(cls, data: Dict[str, Any]) -> "ContentSummary":
        return cls(
            length=int(data.get("length", 0)),
            file_count=int(data.get("fileCount", 0)),
            directory_count=int(data.get("directoryCount", 0)),
        )


@dataclass(frozen=True)
class Found:
    """A directory listing for a path that exists."""

    path: str
    entries: List[FileStatus] = field(default_factory=list)


@dataclass(frozen=True)
class Missing:
    """The listed path does not exist."""

    path: str


Listing = Union[Found, Missing]
