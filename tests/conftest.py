"""Shared test fixtures for watsoncli.

Provides an isolated environment (no real credentials, config or working
directory leak into tests), a synthetic ``example-service-v1`` service
used by the end-to-end tests, and a fake HTTP server built on
:class:`httpx.MockTransport`. These fixtures are automatically discovered
by pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional

import httpx
import pytest

from watsoncli.models import FlagKind, FlagSpec, ParameterLocation, ResultKind, ServiceSpec
from watsoncli.output import reset_output
from watsoncli.services.common import (
    BINARY,
    DELETE,
    GET,
    POST,
    file_path,
    operation,
    string,
)

EXAMPLE_URL = "https://example.test/api"

THINGS = {
    "things": [{"id": "a", "name": "A"}, {"id": "b", "name": "B"}],
    "total": 2,
}


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When pytest's capture swaps those streams between
    tests the cached references become stale, so a fresh manager is
    created on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration and credentials to a temporary directory.

    Points HOME and XDG_CONFIG_HOME into tmp_path, clears every variable
    the tool reads, and changes the working directory to tmp_path so that
    no ``ibm-credentials.env`` file is picked up by accident.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for var in [
        "IBM_CREDENTIALS_FILE",
        "VCAP_SERVICES",
        "WATSON_OUTPUT",
        "WATSON_CONFIG",
        "NO_COLOR",
    ]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Synthetic service
# ---------------------------------------------------------------------------


def build_example_service() -> ServiceSpec:
    """A small service covering value, body, file and binary operations."""
    return ServiceSpec(
        tag="example-service-v1",
        aliases=("ex-v1",),
        credential_name="example_service",
        default_url=EXAMPLE_URL,
        short_help="Example service",
        operations=(
            operation(
                "list-things",
                "List things",
                method=GET,
                path="/v1/things",
            ),
            operation(
                "create-thing",
                "Create a thing",
                method=POST,
                path="/v1/things",
                flags=(
                    string("name", "Name of the thing.", required=True),
                    string("description", "Description of the thing."),
                    FlagSpec(
                        name="tags",
                        kind=FlagKind.STRING_LIST,
                        help="Tags of the thing.",
                    ),
                    FlagSpec(
                        name="dry_run",
                        kind=FlagKind.BOOL,
                        help="Validate only.",
                        location=ParameterLocation.QUERY,
                        default_value=False,
                    ),
                ),
            ),
            operation(
                "translate-document",
                "Translate a document",
                method=POST,
                path="/v1/documents",
                multipart=True,
                flags=(
                    file_path(
                        "file",
                        "The document to translate.",
                        required=True,
                        filename_flag="filename",
                    ),
                    string("filename", "Name of the uploaded file."),
                    string("model_id", "Translation model."),
                ),
            ),
            operation(
                "query",
                "Query things",
                method=GET,
                path="/v1/things",
            ),
            operation(
                "delete-thing",
                "Delete a thing",
                method=DELETE,
                path="/v1/things/{thing_id}",
                result=ResultKind.NONE,
                flags=(string("thing_id", "ID of the thing.", required=True),),
            ),
            operation(
                "synthesize",
                "Synthesize audio",
                method=POST,
                path="/v1/synthesize",
                result=BINARY,
                accept="audio/wav",
                flags=(string("text", "Text to speak.", required=True),),
            ),
        ),
    )


@pytest.fixture
def example_service() -> ServiceSpec:
    """The synthetic ``example-service-v1`` descriptor."""
    return build_example_service()


@pytest.fixture
def example_app(example_service: ServiceSpec):
    """A root application exposing only ``example-service-v1``."""
    from watsoncli.app import create_app

    return create_app(services=[example_service])


# ---------------------------------------------------------------------------
# Fake server
# ---------------------------------------------------------------------------


class FakeServer:
    """Records requests and answers them through a handler.

    Attributes:
        requests: Every request received, in order.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._handler: Callable[[httpx.Request], httpx.Response] = self._default

    @staticmethod
    def _default(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=THINGS)

    def respond(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        """Replace the response handler."""
        self._handler = handler

    def respond_json(self, data: Any, status_code: int = 200) -> None:
        """Answer every request with *data* as JSON."""
        self._handler = lambda request: httpx.Response(status_code, json=data)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self._handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def fake_server(isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> FakeServer:
    """Route every service call through a :class:`FakeServer`.

    Credentials for ``example_service`` are set to ``noAuth`` so that no
    token exchange happens.
    """
    from watsoncli import pipeline
    from watsoncli.client.sync_client import SyncClient

    server = FakeServer()
    monkeypatch.setenv("EXAMPLE_SERVICE_AUTH_TYPE", "noAuth")

    def make_client(resolved: Any) -> SyncClient:
        return SyncClient(
            resolved.base_url,
            auth_result=resolved.auth_result,
            transport=server.transport(),
        )

    monkeypatch.setattr(pipeline, "make_client", make_client)
    return server


@pytest.fixture
def run_cli(example_app, capsys: pytest.CaptureFixture[str]):
    """Run the example application and capture its streams.

    Returns a callable ``run_cli(*argv) -> (exit_code, stdout, stderr)``.
    """
    from watsoncli.app import run

    def _run(*argv: str, application: Optional[Any] = None) -> tuple[int, str, str]:
        code = run(list(argv), application or example_app)
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run
