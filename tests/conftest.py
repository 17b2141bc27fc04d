"""Shared fixtures for reqinfo tests."""

from __future__ import annotations

from typing import Any

import pytest

from reqinfo import CoreRequest


@pytest.fixture
def wsgi_environ() -> dict[str, Any]:
    """A minimal WSGI environ as a server would hand it to an application."""
    return {
        "REQUEST_METHOD": "GET",
        "SCRIPT_NAME": "",
        "PATH_INFO": "/reports/42",
        "QUERY_STRING": "page=2",
        "SERVER_NAME": "localhost",
        "SERVER_PORT": "8000",
        "SERVER_PROTOCOL": "HTTP/1.1",
        "wsgi.version": (1, 0),
        "wsgi.url_scheme": "http",
        "wsgi.multithread": False,
    }


@pytest.fixture
def empty_request() -> CoreRequest:
    return CoreRequest.from_mapping({})
