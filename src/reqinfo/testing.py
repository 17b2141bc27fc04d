"""Test utilities for reqinfo.

Builds synthetic request environments so tests and examples do not need a
running WSGI server. Every argument left as None means the key is absent.

>>> from reqinfo.testing import make_request
>>> make_request(method="put", uri="/items/1").is_put
True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from reqinfo._config import EnvironKeys
from reqinfo._request import AJAX_MARKER, CoreRequest

if TYPE_CHECKING:
    from collections.abc import Mapping


def make_environ(
    *,
    method: str | None = None,
    method_override: str | None = None,
    uri: str | None = None,
    requested_with: str | None = None,
    ajax: bool = False,
    environment: str | None = None,
    extra: Mapping[str, str] | None = None,
    keys: EnvironKeys | None = None,
) -> dict[str, str]:
    """Build an environ dict keyed by ``keys`` (defaults to EnvironKeys())."""
    keys = keys or EnvironKeys()
    if ajax and requested_with is None:
        requested_with = AJAX_MARKER

    environ = dict(extra or {})
    for key, value in (
        (keys.method, method),
        (keys.method_override, method_override),
        (keys.request_uri, uri),
        (keys.requested_with, requested_with),
        (keys.environment, environment),
    ):
        if value is not None:
            environ[key] = value
    return environ


def make_request(
    *,
    method: str | None = None,
    method_override: str | None = None,
    uri: str | None = None,
    requested_with: str | None = None,
    ajax: bool = False,
    environment: str | None = None,
    extra: Mapping[str, str] | None = None,
    keys: EnvironKeys | None = None,
) -> CoreRequest:
    """Build a CoreRequest over a synthetic environ."""
    environ = make_environ(
        method=method,
        method_override=method_override,
        uri=uri,
        requested_with=requested_with,
        ajax=ajax,
        environment=environment,
        extra=extra,
        keys=keys,
    )
    return CoreRequest.from_mapping(environ, keys)
