"""Config types for the environ keys a request reader consults.

Config loading path:
  YAML file → load_environ_keys() → dict → parse_environ_keys() → EnvironKeys

| Field           | Default key                  |
|-----------------|------------------------------|
| method_override | HTTP_X_HTTP_METHOD_OVERRIDE  |
| method          | REQUEST_METHOD               |
| request_uri     | REQUEST_URI                  |
| requested_with  | HTTP_X_REQUESTED_WITH        |
| environment     | ABC_ENV                      |
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EnvironKeys:
    """Names of the environ entries read by CoreRequest."""

    method_override: str = "HTTP_X_HTTP_METHOD_OVERRIDE"
    method: str = "REQUEST_METHOD"
    request_uri: str = "REQUEST_URI"
    requested_with: str = "HTTP_X_REQUESTED_WITH"
    environment: str = "ABC_ENV"


_FIELD_NAMES = frozenset(f.name for f in fields(EnvironKeys))

# Optional wrapper section in YAML files.
_SECTION = "environ_keys"


class ConfigParseError(Exception):
    """Error parsing a config dict into EnvironKeys."""


def parse_environ_keys(data: dict[str, Any]) -> EnvironKeys:
    """Parse a dict into EnvironKeys.

    Missing fields keep their defaults.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    unknown = sorted(str(k) for k in data if k not in _FIELD_NAMES)
    if unknown:
        msg = f"unknown environ key field(s): {', '.join(unknown)}"
        raise ConfigParseError(msg)

    for name, value in data.items():
        if not isinstance(value, str):
            msg = f"'{name}' must be a string, got {type(value).__name__}"
            raise ConfigParseError(msg)
        if not value:
            msg = f"'{name}' must not be empty"
            raise ConfigParseError(msg)

    return EnvironKeys(**data)


def load_environ_keys(path: str | Path) -> EnvironKeys:
    """Load EnvironKeys from a YAML file.

    The document may hold the fields at top level or under an
    ``environ_keys`` section. An empty document yields the defaults.

    Raises:
        ConfigParseError: If the YAML is invalid or has the wrong shape.
    """
    path = Path(path)
    try:
        with path.open() as f:
            doc = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"invalid YAML in {path}: {e}"
        raise ConfigParseError(msg) from e

    if doc is None:
        doc = {}
    if isinstance(doc, dict) and _SECTION in doc:
        doc = doc[_SECTION] or {}

    keys = parse_environ_keys(doc)
    logger.debug("Loaded environ keys from %s: %r", path, keys)
    return keys
