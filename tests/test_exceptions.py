# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tests for remote error classification and rendering."""

from hh_cli.exceptions import (
    ACCESS_CONTROL_EXCEPTION,
    FILE_ALREADY_EXISTS_EXCEPTION,
    FILE_NOT_FOUND_EXCEPTION,
    ErrorKind,
    RemoteError,
    classify,
    is_access_denied,
    render,
)


class TestClassify:
    def test_known_subjects(self):
        assert classify(FILE_NOT_FOUND_EXCEPTION) is ErrorKind.NOT_FOUND
        assert classify(ACCESS_CONTROL_EXCEPTION) is ErrorKind.ACCESS_DENIED
        assert classify(FILE_ALREADY_EXISTS_EXCEPTION) is ErrorKind.ALREADY_EXISTS

    def test_unknown_subject_is_generic(self):
        assert classify("org.apache.hadoop.ipc.RemoteException") is ErrorKind.GENERIC

    def test_error_derives_kind_from_subject(self):
        assert RemoteError(ACCESS_CONTROL_EXCEPTION, "denied").kind is ErrorKind.ACCESS_DENIED

    def test_explicit_kind_overrides_subject(self):
        error = RemoteError("File/directory does not exist: /x", kind=ErrorKind.NOT_FOUND)
        assert error.kind is ErrorKind.NOT_FOUND


class TestRender:
    def test_one_liner_subject_shows_first_body_line(self):
        error = RemoteError(ACCESS_CONTROL_EXCEPTION, "Permission denied: user=bob\n\tat a.b.C")
        assert render(error) == "Permission denied: user=bob"

    def test_generic_with_body_shows_subject_and_body(self):
        error = RemoteError("java.lang.IllegalArgumentException", "line one\nline two")
        assert render(error) == "java.lang.IllegalArgumentException\nline one\nline two"

    def test_empty_body_shows_subject(self):
        assert render(RemoteError("File/directory does not exist: /x")) == (
            "File/directory does not exist: /x"
        )

    def test_str_matches_render(self):
        error = RemoteError(FILE_NOT_FOUND_EXCEPTION, "File does not exist: /x")
        assert str(error) == "File does not exist: /x"


def test_is_access_denied():
    assert is_access_denied(RemoteError(ACCESS_CONTROL_EXCEPTION, "denied"))
    assert not is_access_denied(RemoteError(FILE_NOT_FOUND_EXCEPTION, "missing"))
