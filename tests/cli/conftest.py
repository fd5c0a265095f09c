# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""CLI fixtures that route the WebHDFS client to the in-memory filesystem."""

import json

import pytest


@pytest.fixture
def hh_env(tmp_path, monkeypatch):
    """Isolated config, working-directory and Hadoop locations for one CLI run."""
    conf_path = tmp_path / "hh.json"
    conf_path.write_text(json.dumps({"hdfs": {"user": "alice"}, "namenode": {"host": "nn1"}}))
    hadoop_dir = tmp_path / "hadoop-conf"
    hadoop_dir.mkdir()

    env = {
        "HH_CONFIG_FILE": str(conf_path),
        "HH_WORKDIR_FILE": str(tmp_path / "hhwd"),
        "HADOOP_CONF_DIR": str(hadoop_dir),
        "HADOOP_USER_NAME": "nobody",
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return env


@pytest.fixture
def patched_client(fake_client, monkeypatch):
    """Make the CLI build ``fake_client`` instead of a WebHDFS client."""
    import hh_cli.client.webhdfs as webhdfs

    monkeypatch.setattr(webhdfs, "WebHDFSClient", lambda config: fake_client)
    return fake_client
