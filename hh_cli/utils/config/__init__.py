# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
from .config_loader import (
    DEFAULT_HH_CONF,
    DEFAULT_HH_WORKDIR,
    HH_CONFIG_ENV,
    HH_WORKDIR_ENV,
    flatten_config,
    load_config_file,
    parse_key_value_config,
    resolve_config_path,
    resolve_workdir_path,
)
from .hh_config import HHConfig, NameNode, SocksProxy, load_hh_config, merge_config

__all__ = [
    "DEFAULT_HH_CONF",
    "DEFAULT_HH_WORKDIR",
    "HH_CONFIG_ENV",
    "HH_WORKDIR_ENV",
    "HHConfig",
    "NameNode",
    "SocksProxy",
    "flatten_config",
    "load_config_file",
    "load_hh_config",
    "merge_config",
    "parse_key_value_config",
    "resolve_config_path",
    "resolve_workdir_path",
]
