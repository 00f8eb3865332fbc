"""End-to-end tests: argv in, exit status and streams out.

Every scenario runs the real command tree, binder, invoker, projector and
renderer against ``example-service-v1``; only the HTTP transport is
replaced by the :class:`FakeServer` from conftest.
"""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import yaml

from watsoncli import __version__

EXAMPLE_URL = "https://example.test/api"

THINGS = {
    "things": [{"id": "a", "name": "A"}, {"id": "b", "name": "B"}],
    "total": 2,
}


# ---------------------------------------------------------------------------
# Value results
# ---------------------------------------------------------------------------


class TestValueResults:
    def test_table_explodes_list(self, run_cli, fake_server) -> None:
        code, out, err = run_cli("example-service-v1", "list-things")
        assert code == 0, err
        assert err == ""
        assert out.splitlines() == ["Total\tId\tName", "2\ta\tA", "2\tb\tB"]
        assert fake_server.last.method == "GET"
        assert str(fake_server.last.url) == f"{EXAMPLE_URL}/v1/things"

    def test_json_output(self, run_cli, fake_server) -> None:
        code, out, _ = run_cli("example-service-v1", "list-things", "--output", "json")
        assert code == 0
        assert json.loads(out) == THINGS
        assert out.startswith('{\n  "things"')

    def test_yaml_output_case_insensitive(self, run_cli, fake_server) -> None:
        code, out, _ = run_cli("example-service-v1", "list-things", "--output", "YAML")
        assert code == 0
        assert yaml.safe_load(out) == THINGS
        assert out.splitlines()[0] == "things:"

    def test_alias(self, run_cli, fake_server) -> None:
        code, _, _ = run_cli("ex-v1", "list-things", "--output", "json")
        assert code == 0
        assert len(fake_server.requests) == 1

    def test_output_format_from_environment(self, run_cli, fake_server, monkeypatch) -> None:
        monkeypatch.setenv("WATSON_OUTPUT", "json")
        code, out, _ = run_cli("example-service-v1", "list-things")
        assert code == 0
        assert json.loads(out) == THINGS

    def test_empty_result(self, run_cli, fake_server) -> None:
        fake_server.respond(lambda request: httpx.Response(204))
        code, out, _ = run_cli("example-service-v1", "list-things")
        assert code == 0
        assert out == "Nothing to show.\n"


# ---------------------------------------------------------------------------
# Only supplied flags reach the request
# ---------------------------------------------------------------------------


class TestOnlySupplied:
    def test_body_contains_only_supplied_fields(self, run_cli, fake_server) -> None:
        code, _, err = run_cli("example-service-v1", "create-thing", "--name", "lamp")
        assert code == 0, err
        assert fake_server.last_json() == {"name": "lamp"}
        assert "dry_run" not in fake_server.last.url.params

    def test_two_supplied_fields(self, run_cli, fake_server) -> None:
        code, _, _ = run_cli(
            "example-service-v1", "create-thing", "--name", "X", "--description", "Y"
        )
        assert code == 0
        assert fake_server.last_json() == {"name": "X", "description": "Y"}

    def test_list_and_bool_flags(self, run_cli, fake_server) -> None:
        code, _, err = run_cli(
            "example-service-v1", "create-thing",
            "--name", "lamp",
            "--tags", "red,blue", "--tags", "new",
            "--dry_run",
        )
        assert code == 0, err
        assert fake_server.last_json() == {"name": "lamp", "tags": ["red", "blue", "new"]}
        assert fake_server.last.url.params["dry_run"] == "true"

    def test_explicit_false_is_sent(self, run_cli, fake_server) -> None:
        code, _, _ = run_cli(
            "example-service-v1", "create-thing", "--name", "lamp", "--no-dry_run"
        )
        assert code == 0
        assert fake_server.last.url.params["dry_run"] == "false"

    def test_empty_string_is_sent(self, run_cli, fake_server) -> None:
        code, _, _ = run_cli(
            "example-service-v1", "create-thing", "--name", "lamp", "--description", ""
        )
        assert code == 0
        assert fake_server.last_json() == {"name": "lamp", "description": ""}


# ---------------------------------------------------------------------------
# Multipart, no-content and binary operations
# ---------------------------------------------------------------------------


class TestOperationKinds:
    def test_multipart_upload(self, run_cli, fake_server, isolated_env: Path) -> None:
        (isolated_env / "doc.txt").write_text("Hello world")
        code, _, err = run_cli(
            "example-service-v1", "translate-document",
            "--file", "doc.txt",
            "--filename", "report.txt",
            "--model_id", "en-es",
            "--output", "json",
        )
        assert code == 0, err
        request = fake_server.last
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        assert b'name="file"; filename="report.txt"' in request.content
        assert b"Hello world" in request.content
        assert b'name="model_id"' in request.content
        assert b"en-es" in request.content
        assert b'name="filename"' not in request.content

    def test_missing_upload_file(self, run_cli, fake_server) -> None:
        code, out, err = run_cli(
            "example-service-v1", "translate-document", "--file", "missing.txt"
        )
        assert code == 1
        assert out == ""
        assert err.startswith("FAILED: file: cannot open missing.txt")
        assert fake_server.requests == []

    def test_delete_prints_ok(self, run_cli, fake_server) -> None:
        fake_server.respond(lambda request: httpx.Response(204))
        code, out, _ = run_cli("example-service-v1", "delete-thing", "--thing_id", "a")
        assert code == 0
        assert out == "OK\n"
        assert fake_server.last.method == "DELETE"
        assert fake_server.last.url.path == "/api/v1/things/a"

    def test_synthesize_to_file(self, run_cli, fake_server, isolated_env: Path) -> None:
        fake_server.respond(lambda request: httpx.Response(200, content=b"RIFF-audio"))
        code, out, err = run_cli(
            "example-service-v1", "synthesize", "--text", "Hello", "--output_file", "hello.wav"
        )
        assert code == 0, err
        assert (isolated_env / "hello.wav").read_bytes() == b"RIFF-audio"
        assert out.splitlines() == ["OK", "Output written to hello.wav"]
        assert fake_server.last.headers["Accept"] == "audio/wav"
        assert fake_server.last_json() == {"text": "Hello"}

    def test_synthesize_error_leaves_no_file(
        self, run_cli, fake_server, isolated_env: Path
    ) -> None:
        fake_server.respond_json({"error": "Voice not found"}, 404)
        code, out, err = run_cli(
            "example-service-v1", "synthesize", "--text", "Hello", "--output_file", "hello.wav"
        )
        assert code == 1
        assert out == ""
        assert err == "FAILED: remote: HTTP 404: Voice not found\n"
        assert not (isolated_env / "hello.wav").exists()

    def test_synthesize_requires_output_file(self, run_cli, fake_server) -> None:
        code, out, err = run_cli("example-service-v1", "synthesize", "--text", "Hello")
        assert code == 1
        assert out == ""
        assert err.startswith("FAILED: usage: ")
        assert "--output_file" in err
        assert fake_server.requests == []


# ---------------------------------------------------------------------------
# JMESPath projection
# ---------------------------------------------------------------------------


class TestQuery:
    def test_projection_json(self, run_cli, fake_server) -> None:
        code, out, _ = run_cli(
            "example-service-v1", "query", "--jmes_query", "things[].id", "--output", "json"
        )
        assert code == 0
        assert json.loads(out) == ["a", "b"]

    def test_single_value_table(self, run_cli, fake_server) -> None:
        code, out, _ = run_cli("example-service-v1", "query", "--jmes_query", "things[0].name")
        assert code == 0
        assert out.splitlines() == ["name", "A"]

    def test_fallback_header_is_last_segment(self, run_cli, fake_server) -> None:
        fake_server.respond_json({"result": {"languages": ["en", "es"]}})
        code, out, _ = run_cli("example-service-v1", "query", "-q", "result.languages")
        assert code == 0
        assert out.splitlines() == ["languages", "en", "es"]

    def test_projection_to_nothing(self, run_cli, fake_server) -> None:
        code, out, _ = run_cli("example-service-v1", "query", "-q", "missing")
        assert code == 0
        assert out == "Nothing to show.\n"

    def test_bad_expression_fails_before_request(self, run_cli, fake_server) -> None:
        code, out, err = run_cli("example-service-v1", "query", "-q", "things[")
        assert code == 1
        assert out == ""
        assert err.startswith("FAILED: jmes_query: ")
        assert err.count("\n") == 1
        assert fake_server.requests == []


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFailures:
    def test_remote_error(self, run_cli, fake_server) -> None:
        fake_server.respond_json({"error": "Thing not found", "code": 404}, 404)
        code, out, err = run_cli("example-service-v1", "list-things")
        assert code == 1
        assert out == ""
        assert err == "FAILED: remote: HTTP 404: Thing not found\n"

    def test_missing_required_flag(self, run_cli, fake_server) -> None:
        code, out, err = run_cli("example-service-v1", "create-thing")
        assert code == 1
        assert out == ""
        assert err.startswith("FAILED: usage: ")
        assert "--name" in err
        assert fake_server.requests == []

    def test_unknown_operation(self, run_cli, fake_server) -> None:
        code, _, err = run_cli("example-service-v1", "no-such-op")
        assert code == 1
        assert err.startswith("FAILED: usage: ")

    def test_unknown_service(self, run_cli, fake_server) -> None:
        code, _, err = run_cli("no-such-service", "list")
        assert code == 1
        assert err.startswith("FAILED: usage: ")

    def test_unknown_output_format(self, run_cli, fake_server) -> None:
        code, _, err = run_cli("example-service-v1", "list-things", "--output", "xml")
        assert code == 1
        assert err.startswith("FAILED: usage: ")
        assert fake_server.requests == []

    def test_missing_credentials(self, run_cli, isolated_env: Path) -> None:
        code, out, err = run_cli("example-service-v1", "list-things")
        assert code == 1
        assert out == ""
        assert err.startswith("FAILED: auth: ")
        assert err.count("\n") == 1

    def test_transport_failure(self, run_cli, fake_server) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        fake_server.respond(refuse)
        code, _, err = run_cli("example-service-v1", "list-things")
        assert code == 1
        assert err.startswith("FAILED: remote: ")
        assert "connection refused" in err


# ---------------------------------------------------------------------------
# Help and version
# ---------------------------------------------------------------------------


class TestHelp:
    def test_version(self, run_cli) -> None:
        code, out, _ = run_cli("--version")
        assert code == 0
        assert out == f"watson {__version__}\n"

    def test_root_help(self, run_cli) -> None:
        code, out, _ = run_cli("--help")
        assert code == 0
        assert "example-service-v1" in out

    def test_no_arguments_shows_help(self, run_cli) -> None:
        code, out, _ = run_cli()
        assert code == 0
        assert "example-service-v1" in out

    def test_operation_help(self, run_cli) -> None:
        code, out, _ = run_cli("example-service-v1", "create-thing", "--help")
        assert code == 0
        assert "--name" in out
        assert "--jmes_query" in out
        assert "service default: false" in out
