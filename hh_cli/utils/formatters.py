# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Formatting utilities for hh commands.

Renders remote metadata as stable, scriptable text: sizes, permission
strings, replication, timestamps and the ``ls``/``du`` tables.
"""

from datetime import datetime, timezone
from typing import List, Sequence, Tuple

import tabulate as tabulate_module
from tabulate import DataRow, TableFormat, tabulate

from hh_cli.client.types import FileStatus, FileType
from hh_cli.utils.path import join

# Columns padded to their widest cell and joined by a single space.
_SINGLE_SPACE_FORMAT = TableFormat(
    lineabove=None,
    linebelowheader=None,
    linebetweenrows=None,
    linebelow=None,
    headerrow=DataRow("", " ", ""),
    datarow=DataRow("", " ", ""),
    padding=0,
    with_header_hide=None,
)

_TYPE_PREFIX = {
    FileType.FILE: "-",
    FileType.DIRECTORY: "d",
    FileType.SYMLINK: "l",
}


def format_size(size: int) -> str:
    """
    Convert a byte count to a short decimal-unit string.

    Division truncates, so there is never a fractional part.

    Example:
        >>> format_size(999)
        '999B'
        >>> format_size(1500)
        '1K'
        >>> format_size(2_500_000)
        '2M'
    """
    if size <= 0:
        return "0"
    if size < 1000:
        return f"{size}B"
    if size < 1000**2:
        return f"{size // 1000}K"
    if size < 1000**3:
        return f"{size // 1000**2}M"
    if size < 1000**4:
        return f"{size // 1000**3}G"
    return f"{size // 1000**4}T"


def format_permission(permission: int) -> str:
    """
    Convert permission bits to an rwx string.

    Example:
        >>> format_permission(0o755)
        'rwxr-xr-x'
    """

    def _triple(bits: int) -> str:
        r = "r" if bits & 0x4 else "-"
        w = "w" if bits & 0x2 else "-"
        x = "x" if bits & 0x1 else "-"
        return r + w + x

    return _triple(permission >> 6) + _triple(permission >> 3) + _triple(permission)


def format_mode(file_type: FileType, permission: int) -> str:
    return _TYPE_PREFIX[file_type] + format_permission(permission)


def format_replication(replication: int) -> str:
    return "-" if replication == 0 else str(replication)


def format_timestamp(millis: int) -> str:
    """Epoch milliseconds as ``YYYY-MM-DD HH:MM`` in UTC."""
    moment = datetime.fromtimestamp(millis // 1000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M")


def display_name(status: FileStatus) -> str:
    """Entry name, with a trailing ``/`` for directories."""
    return status.name + ("/" if status.is_dir else "")


def display_path(parent: str, status: FileStatus) -> str:
    """Entry path under ``parent``, with a trailing ``/`` for directories."""
    return join(parent, status.name) + ("/" if status.is_dir else "")


def format_columns(rows: List[List[str]], aligns: Sequence[str]) -> str:
    """Align ``rows`` column by column; an empty table renders as ``""``.

    The last column is left aligned and written verbatim, so names keep any
    leading or trailing whitespace.
    """
    if not rows:
        return ""
    if len(aligns) == 1:
        return "\n".join(row[0] for row in rows)

    preserve = tabulate_module.PRESERVE_WHITESPACE
    tabulate_module.PRESERVE_WHITESPACE = True
    try:
        table = tabulate(
            [row[:-1] for row in rows],
            tablefmt=_SINGLE_SPACE_FORMAT,
            colalign=tuple(aligns[:-1]),
            disable_numparse=True,
        )
    finally:
        tabulate_module.PRESERVE_WHITESPACE = preserve

    # tabulate strips each row, which drops the padding of a left-aligned column.
    lines = table.split("\n")
    width = max(len(line) for line in lines)
    return "\n".join(f"{line.ljust(width)} {row[-1]}" for line, row in zip(lines, rows))


def format_listing(entries: Sequence[FileStatus]) -> str:
    """Render the ``ls`` output: a summary line followed by one row per entry."""
    rows = [
        [
            format_mode(e.file_type, e.permission),
            format_replication(e.replication),
            e.owner,
            e.group,
            format_size(e.length),
            format_timestamp(e.modification_time),
            display_name(e),
        ]
        for e in entries
    ]
    table = format_columns(rows, ("left", "right", "left", "left", "right", "right", "left"))
    lines = [f"Found {len(entries)} items"]
    if table:
        lines.append(table)
    return "\n".join(lines)


def format_usage(usage: Sequence[Tuple[str, str]]) -> str:
    """Render the ``du`` output from (size cell, display path) pairs."""
    rows = [[size, path] for size, path in usage]
    return format_columns(rows, ("right", "left"))


__all__ = [
    "display_name",
    "display_path",
    "format_columns",
    "format_listing",
    "format_mode",
    "format_permission",
    "format_replication",
    "format_size",
    "format_timestamp",
    "format_usage",
]
