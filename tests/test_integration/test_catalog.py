"""Catalog-wide end-to-end tests: every bundled operation, required flags only.

Each operation of every registered service is run through the real
command tree with nothing but its required flags, against the
:class:`FakeServer` from conftest. The request must carry exactly those
fields, and leaving any one of them out must fail before anything is sent.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from watsoncli.app import app
from watsoncli.invoker import header_name
from watsoncli.models import (
    FlagKind,
    FlagSpec,
    OperationSpec,
    ParameterLocation,
    ResultKind,
    ServiceSpec,
)
from watsoncli.services.registry import all_services

_PART_NAME_RE = re.compile(rb'; name="([^"]+)"')

# Headers that the operation or the HTTP client set on their own.
_IMPLICIT_HEADERS = frozenset({"Content-Type", "Accept"})

_SCALAR_VALUES = {
    FlagKind.STRING: "x",
    FlagKind.INT64: "1",
    FlagKind.FLOAT32: "0.5",
    FlagKind.FLOAT64: "0.5",
    FlagKind.STRING_LIST: "x",
    FlagKind.JSON_OBJECT: "{}",
    FlagKind.DATE: "2020-01-02",
    FlagKind.DATETIME: "2020-01-02T03:04:05Z",
}

OPERATIONS = [
    pytest.param(service, op, id=f"{service.tag}:{op.name}")
    for service in all_services()
    for op in service.operations
]

REQUIRED_FLAGS = [
    pytest.param(service, op, flag, id=f"{service.tag}:{op.name}:{flag.name}")
    for service in all_services()
    for op in service.operations
    for flag in op.flags
    if flag.required
]


@pytest.fixture
def catalog_server(fake_server, monkeypatch: pytest.MonkeyPatch):
    """The fake server, with every bundled service set to ``noAuth``."""
    for service in all_services():
        monkeypatch.setenv(f"{service.credential_name.upper()}_AUTH_TYPE", "noAuth")
    return fake_server


def _flag_argv(flag: FlagSpec, upload: Path) -> list[str]:
    if flag.kind == FlagKind.BOOL:
        return [f"--{flag.name}"]
    if flag.kind == FlagKind.FILE_PATH:
        value = str(upload)
    elif flag.kind == FlagKind.FILE_WITH_METADATA_LIST:
        value = json.dumps([{"data": str(upload)}])
    elif flag.kind == FlagKind.FILE_MAP:
        value = json.dumps({"a": str(upload)})
    else:
        value = _SCALAR_VALUES[flag.kind]
    return [f"--{flag.name}", value]


def _argv(service: ServiceSpec, op: OperationSpec, workdir: Path, skip: str = "") -> list[str]:
    upload = workdir / "upload.bin"
    upload.write_bytes(b"payload")
    argv = [service.tag, op.name]
    for flag in op.flags:
        if flag.required and flag.name != skip:
            argv.extend(_flag_argv(flag, upload))
    if op.result_kind == ResultKind.BINARY_STREAM:
        argv.extend(["--output_file", str(workdir / "result.bin")])
    return argv


def _part_names(flag: FlagSpec) -> set[str]:
    if flag.kind == FlagKind.FILE_MAP:
        return {f"a_{flag.field_name}"}
    return {flag.field_name}


def _required(op: OperationSpec, *locations: ParameterLocation) -> set[str]:
    names: set[str] = set()
    for flag in op.flags:
        if flag.required and flag.location in locations:
            names |= _part_names(flag)
    return names


# ---------------------------------------------------------------------------
# Required flags only
# ---------------------------------------------------------------------------


class TestRequiredFlagsOnly:
    @pytest.mark.parametrize("service, op", OPERATIONS)
    def test_request_carries_only_required_fields(
        self, service: ServiceSpec, op: OperationSpec, run_cli, catalog_server, isolated_env: Path
    ) -> None:
        code, _, err = run_cli(*_argv(service, op, isolated_env), application=app)
        assert code == 0, err
        assert len(catalog_server.requests) == 1

        request = catalog_server.last
        assert request.method == op.method.value.upper()
        assert "{" not in request.url.path

        assert set(request.url.params.keys()) == _required(op, ParameterLocation.QUERY)

        content_type = request.headers.get("Content-Type", "")
        supplies_root = any(
            f.required and f.location == ParameterLocation.BODY_ROOT for f in op.flags
        )
        if content_type.startswith("application/json") and not supplies_root:
            body = json.loads(request.content)
            assert set(body) <= _required(op, ParameterLocation.BODY)
        elif content_type.startswith("multipart/form-data"):
            parts = {name.decode() for name in _PART_NAME_RE.findall(request.content)}
            assert parts <= _required(op, ParameterLocation.FORM, ParameterLocation.FILE)

        for flag in op.flags:
            if flag.required or flag.location != ParameterLocation.HEADER:
                continue
            name = header_name(flag)
            if name not in _IMPLICIT_HEADERS:
                assert name not in request.headers, f"--{flag.name} was not supplied"


# ---------------------------------------------------------------------------
# Missing required flags
# ---------------------------------------------------------------------------


class TestMissingRequiredFlag:
    @pytest.mark.parametrize("service, op, flag", REQUIRED_FLAGS)
    def test_missing_flag_is_named(
        self,
        service: ServiceSpec,
        op: OperationSpec,
        flag: FlagSpec,
        run_cli,
        catalog_server,
        isolated_env: Path,
    ) -> None:
        argv = _argv(service, op, isolated_env, skip=flag.name)
        code, out, err = run_cli(*argv, application=app)
        assert code == 1
        assert out == ""
        assert err.startswith("FAILED: usage: ")
        assert f"--{flag.name}" in err
        assert catalog_server.requests == []


# ---------------------------------------------------------------------------
# Raw-body uploads
# ---------------------------------------------------------------------------


class TestRawBodyUpload:
    def test_recognize_sends_audio_file_as_body(
        self, run_cli, catalog_server, isolated_env: Path
    ) -> None:
        (isolated_env / "hello.flac").write_bytes(b"fLaC-audio")
        code, _, err = run_cli(
            "stt-v1", "recognize",
            "--audio", "hello.flac",
            "--content_type", "audio/flac",
            "--timestamps",
            application=app,
        )
        assert code == 0, err
        request = catalog_server.last
        assert request.method == "POST"
        assert request.url.path == "/speech-to-text/api/v1/recognize"
        assert request.content == b"fLaC-audio"
        assert request.headers["Content-Type"] == "audio/flac"
        assert dict(request.url.params) == {"timestamps": "true"}

    def test_add_grammar_requires_content_type(self, run_cli, catalog_server) -> None:
        code, out, err = run_cli(
            "stt-v1", "add-grammar",
            "--customization_id", "c1",
            "--grammar_name", "g",
            "--grammar_file", "grammar.abnf",
            application=app,
        )
        assert code == 1
        assert out == ""
        assert "--content_type" in err
        assert catalog_server.requests == []
