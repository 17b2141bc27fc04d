"""CoreRequest: normalized access to HTTP request metadata.

Every query is a pure read of a RequestEnviron snapshot:

- method resolves the method-override header, then the transport method,
  then falls back to GET
- request_uri returns the request-target, with any leading
  ``http(s)://host`` prefix removed from absolute-form targets
- is_ajax, is_<method> and is_env_<name> are equality checks on top

The URI prefix pattern is compiled with ``google-re2`` for linear-time
matching.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import re2

from reqinfo._config import EnvironKeys
from reqinfo._environ import RequestEnviron

logger = logging.getLogger(__name__)

DEFAULT_METHOD = "GET"
AJAX_MARKER = "XMLHttpRequest"
ENV_DEV = "dev"
ENV_PROD = "prod"

# Scheme and authority of an absolute-form request-target.
_ABSOLUTE_URI_PREFIX = re2.compile(r"(?i)^(http|https)://[^/]+")


class RequestError(Exception):
    """Base error for request metadata lookups."""


class MissingFieldError(RequestError):
    """A required environ entry is absent.

    Signals a misconfigured or non-HTTP execution context.
    """

    def __init__(self, key: str, msg: str) -> None:
        super().__init__(msg)
        self.key = key


@dataclass(frozen=True, slots=True)
class CoreRequest:
    """Request Info Reader over an immutable environ snapshot.

    >>> req = CoreRequest.from_mapping({"REQUEST_METHOD": "post", "REQUEST_URI": "/a?b=1"})
    >>> req.method, req.request_uri, req.is_post
    ('POST', '/a?b=1', True)
    """

    environ: RequestEnviron = field(default_factory=RequestEnviron)
    keys: EnvironKeys = field(default_factory=EnvironKeys)

    @classmethod
    def from_mapping(
        cls, environ: Mapping[str, str], keys: EnvironKeys | None = None
    ) -> CoreRequest:
        """Snapshot a plain mapping of server variables."""
        return cls(RequestEnviron(environ), keys or EnvironKeys())

    @classmethod
    def from_wsgi(
        cls,
        environ: Mapping[str, Any],
        process_env: Mapping[str, str] | None = None,
        keys: EnvironKeys | None = None,
    ) -> CoreRequest:
        """Snapshot a WSGI environ. See RequestEnviron.from_wsgi."""
        keys = keys or EnvironKeys()
        return cls(RequestEnviron.from_wsgi(environ, process_env=process_env, keys=keys), keys)

    @property
    def method(self) -> str:
        """Effective HTTP method, uppercased."""
        override = self.environ.get(self.keys.method_override)
        if override is not None:
            return override.upper()

        method = self.environ.get(self.keys.method)
        if method is not None:
            return method.upper()

        return DEFAULT_METHOD

    @property
    def request_uri(self) -> str:
        """Requested path including the query part, if any.

        Raises:
            MissingFieldError: If the environ has no request-target entry.
        """
        request_uri = self.environ.get(self.keys.request_uri)
        if request_uri is None:
            logger.debug("No %s in request environ", self.keys.request_uri)
            msg = f"unable to resolve requested URI: '{self.keys.request_uri}' not set"
            raise MissingFieldError(self.keys.request_uri, msg)

        if request_uri and not request_uri.startswith("/"):
            request_uri = _ABSOLUTE_URI_PREFIX.sub("", request_uri, count=1)

        return request_uri

    @property
    def is_ajax(self) -> bool:
        """True for XMLHttpRequest requests."""
        return self.environ.get(self.keys.requested_with) == AJAX_MARKER

    def is_method(self, name: str, /) -> bool:
        return self.method == name.upper()

    @property
    def is_get(self) -> bool:
        return self.is_method("GET")

    @property
    def is_head(self) -> bool:
        return self.is_method("HEAD")

    @property
    def is_post(self) -> bool:
        return self.is_method("POST")

    @property
    def is_put(self) -> bool:
        return self.is_method("PUT")

    @property
    def is_patch(self) -> bool:
        return self.is_method("PATCH")

    @property
    def is_delete(self) -> bool:
        return self.is_method("DELETE")

    @property
    def is_options(self) -> bool:
        return self.is_method("OPTIONS")

    @property
    def is_env_dev(self) -> bool:
        """True in a development environment."""
        return self.environ.get(self.keys.environment) == ENV_DEV

    @property
    def is_env_prod(self) -> bool:
        """True in a production environment."""
        return self.environ.get(self.keys.environment) == ENV_PROD
