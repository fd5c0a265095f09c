# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Logging utilities for hh.
"""

import logging
import sys
from typing import Optional

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_OUTPUT = "stderr"

ROOT_LOGGER_NAME = "hh"


def _make_handler(log_output: str) -> logging.Handler:
    if log_output == "stdout":
        return logging.StreamHandler(sys.stdout)
    if log_output == "stderr":
        return logging.StreamHandler(sys.stderr)
    return logging.FileHandler(log_output)


def get_logger(
    name: str = ROOT_LOGGER_NAME,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Get a configured logger.

    Loggers below ``hh`` share the handler of the ``hh`` logger, so only the
    root of the hierarchy gets a handler here.

    Args:
        name: Logger name
        format_string: Custom format string

    Returns:
        Configured logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    if not root.handlers:
        handler = _make_handler(DEFAULT_LOG_OUTPUT)
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_LOG_FORMAT))
        root.addHandler(handler)
        root.propagate = False
        root.setLevel(getattr(logging, DEFAULT_LOG_LEVEL))

    if name == ROOT_LOGGER_NAME:
        return root
    return logging.getLogger(name)


def configure_logging(
    level: str = DEFAULT_LOG_LEVEL,
    output: str = DEFAULT_LOG_OUTPUT,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """Replace the ``hh`` handler with one built from configuration values.

    Raises:
        OSError: If ``output`` is a file that cannot be opened; the current
            handler is left in place.
    """
    root = get_logger()
    handler = _make_handler(output)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_LOG_FORMAT))

    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return root
