# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the persisted working directory."""

from hh_cli.utils.workdir import WorkingDirStore


class TestGetWorkingDir:
    def test_defaults_to_user_home_when_file_missing(self, workdir):
        assert workdir.get_working_dir() == "/user/alice"

    def test_reads_first_line(self, workdir, workdir_file):
        workdir_file.write_text("/tmp/x\ntrailing garbage\n")
        assert workdir.get_working_dir() == "/tmp/x"

    def test_value_without_newline(self, workdir, workdir_file):
        workdir_file.write_text("/data")
        assert workdir.get_working_dir() == "/data"

    def test_empty_file_falls_back(self, workdir, workdir_file):
        workdir_file.write_text("")
        assert workdir.get_working_dir() == "/user/alice"

    def test_relative_value_falls_back(self, workdir, workdir_file):
        workdir_file.write_text("relative/dir\n")
        assert workdir.get_working_dir() == "/user/alice"

    def test_undecodable_file_falls_back(self, workdir, workdir_file):
        workdir_file.write_bytes(b"\xff\xfe\xfa")
        assert workdir.get_working_dir() == "/user/alice"


class TestSetWorkingDir:
    def test_round_trip(self, workdir, workdir_file):
        workdir.set_working_dir("/tmp")
        assert workdir_file.read_text() == "/tmp\n"
        assert workdir.get_working_dir() == "/tmp"

    def test_overwrites(self, workdir):
        workdir.set_working_dir("/a")
        workdir.set_working_dir("/b")
        assert workdir.get_working_dir() == "/b"


class TestGetAbsolute:
    def test_absolute_input_is_normalized(self, workdir):
        assert workdir.get_absolute("/a/b/../c") == "/a/c"

    def test_empty_input_is_working_dir(self, workdir):
        workdir.set_working_dir("/tmp/x")
        assert workdir.get_absolute("") == "/tmp/x"

    def test_relative_input_joins_working_dir(self, workdir):
        workdir.set_working_dir("/tmp/x")
        assert workdir.get_absolute("y") == "/tmp/x/y"
        assert workdir.get_absolute("..") == "/tmp"
        assert workdir.get_absolute("../../..") == "/"

    def test_uses_default_when_nothing_persisted(self, workdir):
        assert workdir.get_absolute("data") == "/user/alice/data"


def test_path_from_environment(hh_config, tmp_path, monkeypatch):
    target = tmp_path / "custom-wd"
    monkeypatch.setenv("HH_WORKDIR_FILE", str(target))
    store = WorkingDirStore(hh_config)
    assert store.path == target
