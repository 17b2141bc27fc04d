"""RequestEnviron: immutable snapshot of one request's server variables.

The snapshot is taken once at request start and passed explicitly to the
reader, in place of process-wide server globals.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from reqinfo._config import EnvironKeys

if TYPE_CHECKING:
    from reqinfo._types import Environ

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RequestEnviron(Mapping[str, str]):
    """Read-only copy of a request's environment mapping.

    The input mapping is copied at construction, so later changes to the
    source are not visible through the snapshot.
    """

    data: Environ = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def __getitem__(self, key: str) -> str:
        return self.data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, key: object) -> bool:
        return key in self.data

    @classmethod
    def from_wsgi(
        cls,
        environ: Mapping[str, Any],
        *,
        process_env: Mapping[str, str] | None = None,
        keys: EnvironKeys | None = None,
    ) -> RequestEnviron:
        """Build a snapshot from a WSGI environ dict.

        Non-string entries (``wsgi.input``, ``wsgi.errors``, ...) are dropped.
        WSGI servers are not required to provide the raw request-target, so
        when it is missing it is rebuilt from ``RAW_URI`` or from
        ``SCRIPT_NAME``, ``PATH_INFO`` and ``QUERY_STRING``. The
        environment-name variable is taken from ``process_env`` (default
        ``os.environ``) when the WSGI environ does not carry it.
        """
        keys = keys or EnvironKeys()
        values = {
            k: v for k, v in environ.items() if isinstance(k, str) and isinstance(v, str)
        }

        if keys.request_uri not in values:
            request_uri = _wsgi_request_uri(values)
            if request_uri is not None:
                logger.debug("Rebuilt %s from WSGI environ: %r", keys.request_uri, request_uri)
                values[keys.request_uri] = request_uri

        if keys.environment not in values:
            env = os.environ if process_env is None else process_env
            env_name = env.get(keys.environment)
            if env_name is not None:
                logger.debug("Took %s from process environment", keys.environment)
                values[keys.environment] = env_name

        return cls(values)


def _wsgi_request_uri(values: Mapping[str, str]) -> str | None:
    """Rebuild the request-target from standard WSGI/CGI variables."""
    raw_uri = values.get("RAW_URI")
    if raw_uri is not None:
        return raw_uri

    if "PATH_INFO" not in values and "SCRIPT_NAME" not in values:
        return None

    uri = values.get("SCRIPT_NAME", "") + values.get("PATH_INFO", "")
    query_string = values.get("QUERY_STRING", "")
    if query_string:
        uri += "?" + query_string
    return uri
