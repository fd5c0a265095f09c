# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Remote path helpers.

Remote paths are plain strings separated by ``/``. Only ``..`` segments are
collapsed by ``normalize``; ``.`` and empty segments are kept as they are.
"""

from typing import List, Tuple

from hh_cli.exceptions import InvariantViolation

SEPARATOR = "/"


def is_absolute(path: str) -> bool:
    return path.startswith(SEPARATOR)


def normalize(path: str) -> str:
    """Collapse ``..`` segments in an absolute remote path.

    ``..`` pops the most recently kept segment and is dropped when nothing is
    left to pop, so climbing above the root is a no-op.

    Args:
        path: Absolute remote path

    Returns:
        Normalized absolute path

    Raises:
        InvariantViolation: If ``path`` is not absolute
    """
    if not is_absolute(path):
        raise InvariantViolation(f"normalize: not an absolute path: {path!r}")

    root, *segments = path.split(SEPARATOR)
    kept: List[str] = []
    for segment in segments:
        if segment == "..":
            if kept:
                kept.pop()
        else:
            kept.append(segment)

    return SEPARATOR.join([root, *kept]) or SEPARATOR


def join(parent: str, child: str) -> str:
    """Join ``child`` onto ``parent`` with a single separator.

    An absolute ``child`` replaces ``parent``. An empty ``parent`` leaves
    ``child`` untouched.
    """
    if is_absolute(child):
        return child
    if not parent:
        return child
    return parent.rstrip(SEPARATOR) + SEPARATOR + child


def split_parent(path: str) -> Tuple[str, str]:
    """Split a path into its directory part (with trailing ``/``) and its last segment.

    ``"a/b/c"`` -> ``("a/b/", "c")``, ``"c"`` -> ``("", "c")``,
    ``"./c"`` -> ``("", "c")``.
    """
    head, sep, tail = path.rpartition(SEPARATOR)
    directory = head + sep
    if directory == "./":
        directory = ""
    return directory, tail
