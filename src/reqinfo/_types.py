"""Core protocol and type aliases for reqinfo.

- Environ is the per-request key/value table (CGI/WSGI server variables)
- Request is the query port consumed by routing and dispatch code
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, TypeAlias, runtime_checkable

# Server variable table: string keys to string values.
Environ: TypeAlias = Mapping[str, str]


@runtime_checkable
class Request(Protocol):
    """Read-only queries about the current HTTP request.

    Implementations answer every query from an environment snapshot and
    never mutate it.
    """

    @property
    def method(self) -> str: ...

    @property
    def request_uri(self) -> str: ...

    @property
    def is_ajax(self) -> bool: ...

    def is_method(self, name: str, /) -> bool: ...

    @property
    def is_get(self) -> bool: ...

    @property
    def is_head(self) -> bool: ...

    @property
    def is_post(self) -> bool: ...

    @property
    def is_put(self) -> bool: ...

    @property
    def is_patch(self) -> bool: ...

    @property
    def is_delete(self) -> bool: ...

    @property
    def is_options(self) -> bool: ...

    @property
    def is_env_dev(self) -> bool: ...

    @property
    def is_env_prod(self) -> bool: ...
