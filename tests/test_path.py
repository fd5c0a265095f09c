# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tests for remote path helpers."""

import pytest

from hh_cli.exceptions import InvariantViolation
from hh_cli.utils.path import is_absolute, join, normalize, split_parent


class TestNormalize:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/", "/"),
            ("/a/b", "/a/b"),
            ("/a/b/..", "/a"),
            ("/a/../b", "/b"),
            ("/a/b/../../c", "/c"),
            ("/..", "/"),
            ("/../../x", "/x"),
            ("/a/..", "/"),
        ],
    )
    def test_collapses_parent_segments(self, path, expected):
        assert normalize(path) == expected

    def test_keeps_dot_and_empty_segments(self):
        assert normalize("/a/./b") == "/a/./b"
        assert normalize("/a//b") == "/a//b"
        assert normalize("/a/") == "/a/"

    def test_is_idempotent(self):
        once = normalize("/x/y/../z/../../w")
        assert normalize(once) == once

    def test_relative_path_is_rejected(self):
        with pytest.raises(InvariantViolation):
            normalize("a/b")

    def test_empty_path_is_rejected(self):
        with pytest.raises(InvariantViolation):
            normalize("")


class TestJoin:
    def test_inserts_single_separator(self):
        assert join("/user/alice", "data") == "/user/alice/data"
        assert join("/user/alice/", "data") == "/user/alice/data"

    def test_root_parent(self):
        assert join("/", "tmp") == "/tmp"

    def test_absolute_child_wins(self):
        assert join("/user/alice", "/tmp") == "/tmp"

    def test_empty_parent_keeps_child(self):
        assert join("", "data") == "data"


class TestSplitParent:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("a/b/c", ("a/b/", "c")),
            ("c", ("", "c")),
            ("./c", ("", "c")),
            ("/tm", ("/", "tm")),
            ("/user/", ("/user/", "")),
            ("", ("", "")),
        ],
    )
    def test_split(self, path, expected):
        assert split_parent(path) == expected


def test_is_absolute():
    assert is_absolute("/")
    assert not is_absolute("a")
    assert not is_absolute("")
