# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Exception classes for hh.

Remote failures are a single ``RemoteError`` type tagged with an ``ErrorKind``.
The kind is looked up from the error subject (the remote Java exception class
name) in a static table, so classification stays data rather than a class tree.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional


class ErrorKind(str, Enum):
    """Classifier tags for remote errors."""

    NOT_FOUND = "NOT_FOUND"
    ACCESS_DENIED = "ACCESS_DENIED"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    GENERIC = "GENERIC"


ACCESS_CONTROL_EXCEPTION = "org.apache.hadoop.security.AccessControlException"
FILE_ALREADY_EXISTS_EXCEPTION = "org.apache.hadoop.fs.FileAlreadyExistsException"
FILE_NOT_FOUND_EXCEPTION = "java.io.FileNotFoundException"

SUBJECT_TO_KIND: Dict[str, ErrorKind] = {
    ACCESS_CONTROL_EXCEPTION: ErrorKind.ACCESS_DENIED,
    FILE_ALREADY_EXISTS_EXCEPTION: ErrorKind.ALREADY_EXISTS,
    FILE_NOT_FOUND_EXCEPTION: ErrorKind.NOT_FOUND,
}

# Subjects whose body is only ever shown as its first line.
ONE_LINER_SUBJECTS: FrozenSet[str] = frozenset(SUBJECT_TO_KIND)


class HHError(Exception):
    """Base exception for all hh errors."""


class InvariantViolation(HHError):
    """A programming error, e.g. normalizing a relative path."""


class RemoteError(HHError):
    """A classified failure reported by (or about) the remote filesystem.

    Args:
        subject: Short classifier string, usually a Java exception class name.
        body: Optional multi-line detail.
        kind: Explicit classification; derived from ``subject`` when omitted.
    """

    def __init__(self, subject: str, body: str = "", kind: Optional[ErrorKind] = None):
        super().__init__(subject)
        self.subject = subject
        self.body = body or ""
        self.kind = kind if kind is not None else classify(subject)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"RemoteError(subject={self.subject!r}, body={self.body!r}, kind={self.kind.value})"


def classify(subject: str) -> ErrorKind:
    """Return the error kind for a remote exception subject."""
    return SUBJECT_TO_KIND.get(subject, ErrorKind.GENERIC)


def render(error: RemoteError) -> str:
    """Render a remote error the way it is shown to the user.

    One-liner subjects show only the first line of the body, an empty body
    shows the subject alone, anything else shows the subject followed by the
    full body.
    """
    if error.subject in ONE_LINER_SUBJECTS:
        return error.body.split("\n", 1)[0]
    if not error.body:
        return error.subject
    return f"{error.subject}\n{error.body}"


def is_access_denied(error: RemoteError) -> bool:
    return error.subject == ACCESS_CONTROL_EXCEPTION
