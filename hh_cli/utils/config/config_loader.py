# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Configuration file loading utilities.

Provides a three-level resolution chain for locating the config file:
  1. Explicit path (--config)
  2. Environment variable
  3. Default path (~/.hh)

The file is either a JSON object or a list of ``name = value`` bindings
(optionally nested in ``group { ... }`` blocks), for example::

    hdfs.user = "alice"
    namenode {
      host = "nn1"
      port = 8020
    }
"""

import json
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

HH_CONFIG_ENV = "HH_CONFIG_FILE"
HH_WORKDIR_ENV = "HH_WORKDIR_FILE"

DEFAULT_HH_CONF = ".hh"
DEFAULT_HH_WORKDIR = ".hhwd"


def default_home() -> Path:
    return Path.home()


def resolve_config_path(
    explicit_path: Optional[str],
    env_var: str,
    default_filename: str,
) -> Optional[Path]:
    """Resolve a config file path using the three-level chain.

    Resolution order:
      1. ``explicit_path`` (if provided and exists)
      2. Path from environment variable ``env_var``
      3. ``~/<default_filename>``

    Returns:
        Path to the config file, or None if not found at any level.
    """
    # Level 1: explicit path
    if explicit_path:
        p = Path(explicit_path).expanduser()
        if p.exists():
            return p
        return None

    # Level 2: environment variable
    env_val = os.environ.get(env_var)
    if env_val:
        p = Path(env_val).expanduser()
        if p.exists():
            return p
        return None

    # Level 3: home directory
    p = default_home() / default_filename
    if p.exists():
        return p

    return None


def resolve_workdir_path() -> Path:
    """Location of the persisted working directory; it need not exist yet."""
    env_val = os.environ.get(HH_WORKDIR_ENV)
    if env_val:
        return Path(env_val).expanduser()
    return default_home() / DEFAULT_HH_WORKDIR


def _parse_json(text: str, path: Path) -> Dict[str, Any]:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}") from e


_NAME = r"[A-Za-z_][A-Za-z0-9_\-]*(?:\.[A-Za-z_][A-Za-z0-9_\-]*)*"
_BINDING_RE = re.compile(rf"^({_NAME})\s*=\s*(.*)$")
_GROUP_RE = re.compile(rf"^({_NAME})\s*\{{$")
_STRING_RE = re.compile(r'"(?:[^"\\]|\\.)*"')
_INT_RE = re.compile(r"-?\d+")
_FLOAT_RE = re.compile(r"-?\d+\.\d+")
_BOOLEANS = {"true": True, "on": True, "false": False, "off": False}


def _parse_value(raw: str, location: str) -> Any:
    string = _STRING_RE.match(raw)
    if string:
        token, rest = string.group(0), raw[string.end():].strip()
        if rest and not rest.startswith("#"):
            raise ValueError(f"{location}: unexpected text after value: {rest!r}")
        return json.loads(token, strict=False)

    token = raw.partition("#")[0].strip()
    if token in _BOOLEANS:
        return _BOOLEANS[token]
    if _INT_RE.fullmatch(token):
        return int(token)
    if _FLOAT_RE.fullmatch(token):
        return float(token)
    raise ValueError(f"{location}: unsupported value {token!r}")


def parse_key_value_config(text: str, source: str = "<config>") -> Dict[str, Any]:
    """Parse ``name = value`` bindings into a flat dotted-key dictionary.

    Values are double-quoted strings, integers, floats or booleans
    (``true``/``false``/``on``/``off``). ``#`` starts a comment. A line
    ``group {`` prefixes the following names with ``group.`` up to the
    matching ``}``.

    Raises:
        ValueError: On any line that is not a binding, a group or a comment.
    """
    values: Dict[str, Any] = {}
    groups: List[str] = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        location = f"{source}:{lineno}"
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if stripped == "}":
            if not groups:
                raise ValueError(f"{location}: unmatched '}}'")
            groups.pop()
            continue

        group = _GROUP_RE.match(stripped)
        if group:
            groups.append(group.group(1))
            continue

        binding = _BINDING_RE.match(stripped)
        if binding is None:
            raise ValueError(f"{location}: expected 'name = value', got {stripped!r}")
        name = ".".join([*groups, binding.group(1)])
        values[name] = _parse_value(binding.group(2), location)

    if groups:
        raise ValueError(f"{source}: group '{groups[-1]}' is not closed")
    return values


def load_config_file(path: Path) -> Dict[str, Any]:
    """Load the hh config file in either of its formats.

    A file whose first non-blank character is ``{`` is read as JSON, anything
    else as ``name = value`` bindings.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    if text.lstrip().startswith("{"):
        return _parse_json(text, path)
    return parse_key_value_config(text, str(path))


def flatten_config(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Flatten nested objects into dotted keys.

    ``{"namenode": {"host": "nn"}}`` and ``{"namenode.host": "nn"}`` both
    become ``{"namenode.host": "nn"}``.
    """
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(flatten_config(value, prefix=f"{full_key}."))
        else:
            flat[full_key] = value
    return flat
