# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures: an in-memory remote filesystem and a temporary working-directory store."""

from typing import Dict, List, Set

import pytest

from hh_cli.client.base import BaseClient
from hh_cli.client.types import ContentSummary, FileStatus, FileType, Found, Listing, Missing
from hh_cli.exceptions import (
    ACCESS_CONTROL_EXCEPTION,
    FILE_ALREADY_EXISTS_EXCEPTION,
    FILE_NOT_FOUND_EXCEPTION,
    RemoteError,
)
from hh_cli.utils.config import HHConfig, NameNode
from hh_cli.utils.path import split_parent
from hh_cli.utils.workdir import WorkingDirStore


def _parent(path: str) -> str:
    return split_parent(path)[0].rstrip("/") or "/"


class FakeClient(BaseClient):
    """In-memory remote filesystem keyed by absolute path."""

    def __init__(self):
        self.dirs: Set[str] = {"/"}
        self.files: Dict[str, int] = {}
        self.denied: Set[str] = set()
        self.calls: List[tuple] = []
        self.closed = False

    def add_dir(self, path: str) -> "FakeClient":
        while path not in self.dirs:
            self.dirs.add(path)
            path = _parent(path)
        return self

    def add_file(self, path: str, size: int) -> "FakeClient":
        self.add_dir(_parent(path))
        self.files[path] = size
        return self

    def close(self) -> None:
        self.closed = True

    def _children(self, path: str) -> List[str]:
        names = [p for p in self.dirs | set(self.files) if p != "/" and _parent(p) == path]
        return sorted(names)

    def _status(self, path: str) -> FileStatus:
        name = path.rsplit("/", 1)[1]
        if path in self.dirs:
            return FileStatus(name, FileType.DIRECTORY, 0o755, "alice", "supergroup", 0, 0, 0)
        return FileStatus(
            name, FileType.FILE, 0o644, "alice", "supergroup", self.files[path], 0, 3
        )

    def list_directory(self, path: str) -> Listing:
        self.calls.append(("list_directory", path))
        key = path.rstrip("/") or "/"
        if key in self.files:
            return Found(path, [self._status(key)])
        if key not in self.dirs:
            return Missing(path)
        return Found(path, [self._status(p) for p in self._children(key)])

    def content_summary(self, path: str) -> ContentSummary:
        self.calls.append(("content_summary", path))
        if path in self.denied:
            raise RemoteError(
                ACCESS_CONTROL_EXCEPTION,
                f"Permission denied: user=alice, access=READ_EXECUTE, inode=\"{path}\"\n\tat ...",
            )
        if path in self.files:
            return ContentSummary(self.files[path], 1, 0)
        if path not in self.dirs:
            raise RemoteError(FILE_NOT_FOUND_EXCEPTION, f"File does not exist: {path}")
        total = sum(size for p, size in self.files.items() if p.startswith(path + "/"))
        return ContentSummary(total)

    def create_directory(self, path: str, create_parents: bool = False) -> bool:
        self.calls.append(("create_directory", path, create_parents))
        if path in self.dirs:
            return True
        if not create_parents and _parent(path) not in self.dirs:
            return False
        self.add_dir(path)
        return True

    def delete(self, path: str, recursive: bool = False) -> bool:
        self.calls.append(("delete", path, recursive))
        if path in self.files:
            del self.files[path]
            return True
        if path not in self.dirs or path == "/":
            return False
        if self._children(path) and not recursive:
            raise RemoteError("org.apache.hadoop.fs.PathIsNotEmptyDirectoryException", path)
        self.dirs = {d for d in self.dirs if d != path and not d.startswith(path + "/")}
        self.files = {f: s for f, s in self.files.items() if not f.startswith(path + "/")}
        return True

    def rename(self, src: str, dst: str, overwrite: bool = False) -> None:
        self.calls.append(("rename", src, dst, overwrite))
        if src not in self.files and src not in self.dirs:
            raise RemoteError(FILE_NOT_FOUND_EXCEPTION, f"File does not exist: {src}")
        if (dst in self.files or dst in self.dirs) and not overwrite:
            raise RemoteError(
                FILE_ALREADY_EXISTS_EXCEPTION, f"rename destination {dst} already exists."
            )
        if src in self.files:
            self.files[dst] = self.files.pop(src)
        else:
            self.dirs.discard(src)
            self.dirs.add(dst)


@pytest.fixture
def hh_config() -> HHConfig:
    return HHConfig(user="alice", namenodes=[NameNode(host="nn1")])


@pytest.fixture
def workdir_file(tmp_path):
    return tmp_path / "hhwd"


@pytest.fixture
def workdir(hh_config, workdir_file) -> WorkingDirStore:
    return WorkingDirStore(hh_config, workdir_file)


@pytest.fixture
def fake_client() -> FakeClient:
    client = FakeClient()
    client.add_dir("/user/alice")
    client.add_dir("/tmp")
    return client

