"""reqinfo: normalized HTTP request metadata over an explicit environ snapshot.

All public types are exported from this module for flat imports:

    from reqinfo import CoreRequest, RequestEnviron, EnvironKeys
"""

__version__ = "0.1.0"

from reqinfo._config import (
    ConfigParseError,
    EnvironKeys,
    load_environ_keys,
    parse_environ_keys,
)
from reqinfo._environ import RequestEnviron
from reqinfo._request import (
    AJAX_MARKER,
    DEFAULT_METHOD,
    ENV_DEV,
    ENV_PROD,
    CoreRequest,
    MissingFieldError,
    RequestError,
)
from reqinfo._types import Environ, Request

__all__ = [
    # Protocols
    "Environ",
    "Request",
    # Reader
    "CoreRequest",
    "RequestEnviron",
    "DEFAULT_METHOD",
    "AJAX_MARKER",
    "ENV_DEV",
    "ENV_PROD",
    # Errors
    "RequestError",
    "MissingFieldError",
    # Config
    "EnvironKeys",
    "ConfigParseError",
    "parse_environ_keys",
    "load_environ_keys",
]
