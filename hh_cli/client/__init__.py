# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Remote filesystem clients."""

from hh_cli.client.base import BaseClient
from hh_cli.client.types import ContentSummary, FileStatus, FileType, Found, Listing, Missing
from hh_cli.client.webhdfs import WebHDFSClient

__all__ = [
    "BaseClient",
    "ContentSummary",
    "FileStatus",
    "FileType",
    "Found",
    "Listing",
    "Missing",
    "WebHDFSClient",
]
