# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""hh - fast interaction with HDFS from the command line."""

__version__ = "0.1.0"

__all__ = ["__version__"]
