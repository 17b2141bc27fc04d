"""Tests for RequestEnviron (reqinfo._environ)."""

from typing import Any

import pytest

from reqinfo import EnvironKeys, RequestEnviron


class TestRequestEnviron:
    def test_mapping_interface(self) -> None:
        env = RequestEnviron({"A": "1", "B": "2"})
        assert env["A"] == "1"
        assert env.get("C") is None
        assert "B" in env
        assert "C" not in env
        assert len(env) == 2
        assert sorted(env) == ["A", "B"]
        assert dict(env.items()) == {"A": "1", "B": "2"}

    def test_copies_source(self) -> None:
        source = {"A": "1"}
        env = RequestEnviron(source)
        source["A"] = "2"
        source["B"] = "3"
        assert env["A"] == "1"
        assert "B" not in env

    def test_read_only(self) -> None:
        env = RequestEnviron({"A": "1"})
        with pytest.raises(TypeError):
            env.data["A"] = "2"  # type: ignore[index]
        with pytest.raises(AttributeError):
            env.data = {}  # type: ignore[misc]

    def test_equality(self) -> None:
        assert RequestEnviron({"A": "1"}) == RequestEnviron({"A": "1"})
        assert RequestEnviron({"A": "1"}) != RequestEnviron({"A": "2"})

    def test_empty_default(self) -> None:
        assert len(RequestEnviron()) == 0


class TestFromWsgi:
    def test_drops_non_string_entries(self, wsgi_environ: dict[str, Any]) -> None:
        env = RequestEnviron.from_wsgi(wsgi_environ, process_env={})
        assert "wsgi.version" not in env
        assert "wsgi.multithread" not in env
        assert env["wsgi.url_scheme"] == "http"
        assert env["REQUEST_METHOD"] == "GET"

    def test_builds_request_uri_from_path_and_query(
        self, wsgi_environ: dict[str, Any]
    ) -> None:
        env = RequestEnviron.from_wsgi(wsgi_environ, process_env={})
        assert env["REQUEST_URI"] == "/reports/42?page=2"

    def test_includes_script_name(self, wsgi_environ: dict[str, Any]) -> None:
        wsgi_environ["SCRIPT_NAME"] = "/app"
        wsgi_environ["QUERY_STRING"] = ""
        env = RequestEnviron.from_wsgi(wsgi_environ, process_env={})
        assert env["REQUEST_URI"] == "/app/reports/42"

    def test_prefers_raw_uri(self, wsgi_environ: dict[str, Any]) -> None:
        wsgi_environ["RAW_URI"] = "/reports/42?page=2&raw=%2F"
        env = RequestEnviron.from_wsgi(wsgi_environ, process_env={})
        assert env["REQUEST_URI"] == "/reports/42?page=2&raw=%2F"

    def test_keeps_existing_request_uri(self, wsgi_environ: dict[str, Any]) -> None:
        wsgi_environ["REQUEST_URI"] = "/original"
        env = RequestEnviron.from_wsgi(wsgi_environ, process_env={})
        assert env["REQUEST_URI"] == "/original"

    def test_no_path_variables_leaves_uri_missing(self) -> None:
        env = RequestEnviron.from_wsgi({"REQUEST_METHOD": "GET"}, process_env={})
        assert "REQUEST_URI" not in env

    def test_environment_from_process_env(self, wsgi_environ: dict[str, Any]) -> None:
        env = RequestEnviron.from_wsgi(wsgi_environ, process_env={"ABC_ENV": "prod"})
        assert env["ABC_ENV"] == "prod"

    def test_environment_in_wsgi_wins(self, wsgi_environ: dict[str, Any]) -> None:
        wsgi_environ["ABC_ENV"] = "dev"
        env = RequestEnviron.from_wsgi(wsgi_environ, process_env={"ABC_ENV": "prod"})
        assert env["ABC_ENV"] == "dev"

    def test_environment_defaults_to_os_environ(
        self, wsgi_environ: dict[str, Any], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ABC_ENV", "dev")
        env = RequestEnviron.from_wsgi(wsgi_environ)
        assert env["ABC_ENV"] == "dev"

    def test_environment_absent_everywhere(self, wsgi_environ: dict[str, Any]) -> None:
        env = RequestEnviron.from_wsgi(wsgi_environ, process_env={})
        assert "ABC_ENV" not in env

    def test_custom_keys(self, wsgi_environ: dict[str, Any]) -> None:
        keys = EnvironKeys(request_uri="X_TARGET", environment="APP_ENV")
        env = RequestEnviron.from_wsgi(
            wsgi_environ, process_env={"APP_ENV": "dev"}, keys=keys
        )
        assert env["X_TARGET"] == "/reports/42?page=2"
        assert env["APP_ENV"] == "dev"
        assert "REQUEST_URI" not in env
