# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""WebHDFS client for hh.

Implements BaseClient over the WebHDFS REST API of the configured namenodes.
"""

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from hh_cli.client.base import BaseClient
from hh_cli.client.types import ContentSummary, FileStatus, FileType, Found, Listing, Missing
from hh_cli.exceptions import ErrorKind, RemoteError
from hh_cli.utils.config import HHConfig, NameNode
from hh_cli.utils.logger import get_logger
from hh_cli.utils.path import split_parent

logger = get_logger(__name__)

STANDBY_EXCEPTION = "org.apache.hadoop.ipc.StandbyException"
IO_EXCEPTION = "java.io.IOException"


class WebHDFSClient(BaseClient):
    """Synchronous WebHDFS client.

    Namenodes are tried in order. A namenode that refuses the connection or
    answers with a StandbyException is skipped; the last namenode that
    answered is remembered for the following requests.

    Examples:
        client = WebHDFSClient(load_hh_config())
        client.initialize()
        listing = client.list_directory("/user/alice")
        client.close()
    """

    def __init__(self, config: HHConfig):
        """Initialize WebHDFSClient.

        Args:
            config: Resolved hh configuration.

        Raises:
            ValueError: If no namenode is configured.
        """
        if not config.namenodes:
            raise ValueError(
                "No namenode configured. Set \"namenode.host\" in ~/.hh "
                "or point HADOOP_CONF_DIR at your cluster configuration."
            )
        self._config = config
        self._namenodes: List[NameNode] = list(config.namenodes)
        self._active = 0
        self._http: Optional[httpx.Client] = None

    # ============= Lifecycle =============

    def initialize(self) -> None:
        """Initialize the HTTP client."""
        kwargs: Dict[str, Any] = {"timeout": float(self._config.timeout)}
        if self._config.proxy is not None:
            kwargs["proxy"] = self._config.proxy.url
        self._http = httpx.Client(**kwargs)

    def close(self) -> None:
        """Close the HTTP client."""
        if self._http:
            self._http.close()
            self._http = None

    # ============= Internal Helpers =============

    def _request(self, method: str, path: str, op: str, **params: str) -> httpx.Response:
        """Send one WebHDFS operation, failing over between namenodes."""
        if self._http is None:
            self.initialize()

        query = {"op": op, "user.name": self._config.user, **params}
        last_error: Optional[Exception] = None

        for offset in range(len(self._namenodes)):
            index = (self._active + offset) % len(self._namenodes)
            namenode = self._namenodes[index]
            url = namenode.webhdfs_url + quote(path)
            logger.debug("%s %s op=%s", method, url, op)

            try:
                response = self._http.request(method, url, params=query)
            except (httpx.ConnectError, httpx.ConnectTimeout) as e:
                logger.info("Namenode %s:%d unreachable: %s", namenode.host, namenode.http_port, e)
                last_error = e
                continue

            error = self._remote_error(response)
            if error is not None and error.subject == STANDBY_EXCEPTION:
                logger.info("Namenode %s:%d is in standby", namenode.host, namenode.http_port)
                last_error = error
                continue

            self._active = index
            return response

        if last_error is None:
            raise RuntimeError("No namenode configured")
        raise last_error

    @staticmethod
    def _remote_error(response: httpx.Response) -> Optional[RemoteError]:
        """Extract the RemoteException carried by an error response."""
        if response.is_success:
            return None
        try:
            exception = response.json()["RemoteException"]
        except (ValueError, KeyError, TypeError):
            return RemoteError(f"HTTP {response.status_code}", response.text)
        subject = exception.get("javaClassName") or exception.get("exception") or "RemoteException"
        return RemoteError(subject, exception.get("message", ""))

    @classmethod
    def _is_not_found(cls, response: httpx.Response) -> bool:
        """404 from any hop, or a FileNotFoundException from the namenode."""
        if response.status_code == 404:
            return True
        error = cls._remote_error(response)
        return error is not None and error.kind is ErrorKind.NOT_FOUND

    def _handle_response(self, response: httpx.Response) -> Dict[str, Any]:
        """Raise the remote error of a failed response, else return its JSON body."""
        error = self._remote_error(response)
        if error is not None:
            raise error
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(IO_EXCEPTION, f"Invalid response from namenode: {e}") from e

    # ============= File System =============

    def get_file_status(self, path: str) -> Optional[FileStatus]:
        """Status of ``path`` itself, or None if it does not exist."""
        response = self._request("GET", path, "GETFILESTATUS")
        if self._is_not_found(response):
            return None
        data = self._handle_response(response)
        return FileStatus.from_webhdfs(data["FileStatus"])

    def list_directory(self, path: str) -> Listing:
        response = self._request("GET", path, "LISTSTATUS")
        if self._is_not_found(response):
            return Missing(path)
        data = self._handle_response(response)
        statuses = data.get("FileStatuses", {}).get("FileStatus", [])
        return Found(path, [FileStatus.from_webhdfs(s) for s in statuses])

    def content_summary(self, path: str) -> ContentSummary:
        data = self._handle_response(self._request("GET", path, "GETCONTENTSUMMARY"))
        return ContentSummary.from_webhdfs(data.get("ContentSummary", {}))

    def create_directory(self, path: str, create_parents: bool = False) -> bool:
        # MKDIRS always creates missing parents, so check the parent first.
        if not create_parents:
            parent = split_parent(path.rstrip("/"))[0].rstrip("/") or "/"
            status = self.get_file_status(parent)
            if status is None or status.file_type is not FileType.DIRECTORY:
                logger.debug("Parent %s of %s is not a directory", parent, path)
                return False

        data = self._handle_response(self._request("PUT", path, "MKDIRS"))
        return bool(data.get("boolean", False))

    def delete(self, path: str, recursive: bool = False) -> bool:
        response = self._request("DELETE", path, "DELETE", recursive=str(recursive).lower())
        data = self._handle_response(response)
        return bool(data.get("boolean", False))

    def rename(self, src: str, dst: str, overwrite: bool = False) -> None:
        response = self._request(
            "PUT",
            src,
            "RENAME",
            destination=dst,
            renameoptions="OVERWRITE" if overwrite else "NONE",
        )
        data = self._handle_response(response)
        if data.get("boolean") is False:
            raise RemoteError(IO_EXCEPTION, f"Failed to rename {src} to {dst}")
