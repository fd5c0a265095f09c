# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Connection configuration for hh.

The configuration is resolved once per invocation by ``load_hh_config``:
values discovered from the local Hadoop installation are overridden by the
hh config file (``~/.hh``) where it sets them.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

DEFAULT_NAMENODE_PORT = 8020
DEFAULT_NAMENODE_HTTP_PORT = 9870
DEFAULT_PROXY_PORT = 1080
DEFAULT_TIMEOUT = 30


class NameNode(BaseModel):
    """A namenode endpoint."""

    host: str = Field(..., description="Namenode host name")

    port: int = Field(default=DEFAULT_NAMENODE_PORT, description="Namenode RPC port")

    http_port: int = Field(
        default=DEFAULT_NAMENODE_HTTP_PORT, description="Namenode HTTP port serving WebHDFS"
    )

    model_config = {"extra": "forbid", "frozen": True}

    @property
    def webhdfs_url(self) -> str:
        return f"http://{self.host}:{self.http_port}/webhdfs/v1"


class SocksProxy(BaseModel):
    """A SOCKS5 proxy endpoint."""

    host: str = Field(..., description="Proxy host name")

    port: int = Field(default=DEFAULT_PROXY_PORT, description="Proxy port")

    model_config = {"extra": "forbid", "frozen": True}

    @property
    def url(self) -> str:
        return f"socks5://{self.host}:{self.port}"


class HHConfig(BaseModel):
    """Resolved configuration for one hh invocation."""

    user: str = Field(..., description="Remote user identity sent with every request")

    namenodes: List[NameNode] = Field(
        default_factory=list, description="Namenodes to try, in order"
    )

    proxy: Optional[SocksProxy] = Field(default=None, description="Optional SOCKS proxy")

    timeout: int = Field(default=DEFAULT_TIMEOUT, description="Request timeout (seconds)")

    log_level: str = Field(default="WARNING", description="Log level")

    log_output: str = Field(
        default="stderr", description="Log output: 'stdout', 'stderr' or a file path"
    )

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: '{value}'")
        return level

    @property
    def default_working_dir(self) -> str:
        return f"/user/{self.user}"


def merge_config(
    file_values: Dict[str, Any],
    discovered_user: str,
    discovered_namenodes: List[NameNode],
) -> HHConfig:
    """Overlay flattened config-file values onto discovered settings.

    Raises:
        ValueError: If a config value has the wrong type.
    """
    try:
        return _merge(file_values, discovered_user, discovered_namenodes)
    except ValidationError as e:
        raise ValueError(f"Invalid hh configuration: {e}") from e


def _merge(
    file_values: Dict[str, Any],
    discovered_user: str,
    discovered_namenodes: List[NameNode],
) -> HHConfig:
    fields: Dict[str, Any] = {
        "user": file_values.get("hdfs.user") or discovered_user,
        "namenodes": discovered_namenodes,
    }

    host = file_values.get("namenode.host")
    if host:
        fields["namenodes"] = [
            NameNode(
                host=host,
                port=file_values.get("namenode.port", DEFAULT_NAMENODE_PORT),
                http_port=file_values.get("namenode.http_port", DEFAULT_NAMENODE_HTTP_PORT),
            )
        ]

    proxy_host = file_values.get("proxy.host")
    if proxy_host:
        fields["proxy"] = SocksProxy(
            host=proxy_host, port=file_values.get("proxy.port", DEFAULT_PROXY_PORT)
        )

    for file_key, field_name in (
        ("timeout", "timeout"),
        ("log.level", "log_level"),
        ("log.output", "log_output"),
    ):
        if file_key in file_values:
            fields[field_name] = file_values[file_key]

    return HHConfig(**fields)


def load_hh_config(config_path: Optional[Path] = None) -> HHConfig:
    """Build the configuration from discovery and the optional config file.

    Args:
        config_path: Resolved config file, or None when there is none.

    Raises:
        ValueError: If the config file is malformed.
    """
    from hh_cli.utils.config.config_loader import flatten_config, load_config_file
    from hh_cli.utils.config.hadoop_config import discover_namenodes, discover_user

    file_values: Dict[str, Any] = {}
    if config_path is not None:
        file_values = flatten_config(load_config_file(config_path))

    return merge_config(file_values, discover_user(), discover_namenodes())
