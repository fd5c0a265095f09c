# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Discovery of connection settings from the local Hadoop installation.

Reads the user from the environment and the namenodes from ``core-site.xml``
and ``hdfs-site.xml`` under ``$HADOOP_CONF_DIR``. Every lookup is best
effort: missing or malformed files simply contribute nothing.
"""

import getpass
import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlsplit

from hh_cli.utils.config.hh_config import DEFAULT_NAMENODE_HTTP_PORT, DEFAULT_NAMENODE_PORT, NameNode
from hh_cli.utils.logger import get_logger

logger = get_logger(__name__)

HADOOP_CONF_DIR_ENV = "HADOOP_CONF_DIR"
HADOOP_USER_NAME_ENV = "HADOOP_USER_NAME"
DEFAULT_HADOOP_CONF_DIR = "/etc/hadoop/conf"


def discover_user() -> str:
    """Return the Hadoop user: ``$HADOOP_USER_NAME`` or the login name."""
    user = os.environ.get(HADOOP_USER_NAME_ENV)
    if user:
        return user
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "hdfs"


def hadoop_conf_dir() -> Path:
    return Path(os.environ.get(HADOOP_CONF_DIR_ENV) or DEFAULT_HADOOP_CONF_DIR)


def read_site_xml(path: Path) -> Dict[str, str]:
    """Parse a Hadoop ``*-site.xml`` file into a name -> value mapping."""
    try:
        tree = ET.parse(path)
    except (OSError, ET.ParseError) as e:
        logger.debug("Skipping Hadoop config %s: %s", path, e)
        return {}

    props: Dict[str, str] = {}
    for prop in tree.getroot().iter("property"):
        name = prop.findtext("name")
        value = prop.findtext("value")
        if name and value is not None:
            props[name.strip()] = value.strip()
    return props


def _split_host_port(address: str, default_port: int) -> Tuple[str, int]:
    host, _, port = address.strip().rpartition(":")
    if not host:
        return port, default_port
    try:
        return host, int(port)
    except ValueError:
        return address, default_port


def _http_port(address: Optional[str]) -> int:
    if not address:
        return DEFAULT_NAMENODE_HTTP_PORT
    return _split_host_port(address, DEFAULT_NAMENODE_HTTP_PORT)[1]


def namenodes_from_site(core: Dict[str, str], hdfs: Dict[str, str]) -> List[NameNode]:
    """Resolve namenode endpoints from parsed core-site and hdfs-site values."""
    default_fs = core.get("fs.defaultFS") or core.get("fs.default.name")
    if not default_fs:
        return []

    parts = urlsplit(default_fs)
    if parts.scheme != "hdfs" or not parts.hostname:
        return []

    nameservice = parts.hostname
    ha_ids = hdfs.get(f"dfs.ha.namenodes.{nameservice}")
    if ha_ids:
        namenodes = []
        for nn_id in (x.strip() for x in ha_ids.split(",")):
            rpc = hdfs.get(f"dfs.namenode.rpc-address.{nameservice}.{nn_id}")
            if not rpc:
                continue
            host, port = _split_host_port(rpc, DEFAULT_NAMENODE_PORT)
            http = hdfs.get(f"dfs.namenode.http-address.{nameservice}.{nn_id}")
            namenodes.append(NameNode(host=host, port=port, http_port=_http_port(http)))
        return namenodes

    return [
        NameNode(
            host=parts.hostname,
            port=parts.port or DEFAULT_NAMENODE_PORT,
            http_port=_http_port(hdfs.get("dfs.namenode.http-address")),
        )
    ]


def discover_namenodes(conf_dir: Optional[Path] = None) -> List[NameNode]:
    conf_dir = conf_dir or hadoop_conf_dir()
    core = read_site_xml(conf_dir / "core-site.xml")
    hdfs = read_site_xml(conf_dir / "hdfs-site.xml")
    return namenodes_from_site(core, hdfs)
