"""Tests for watsoncli.invoker -- request assembly and result shaping."""

from __future__ import annotations

import datetime
import json
from io import BytesIO
from typing import Any

import httpx
import pytest

from watsoncli.binder import FileAttachment
from watsoncli.client.sync_client import SyncClient
from watsoncli.exceptions import RemoteCallError, UsageError
from watsoncli.invoker import (
    InvocationResult,
    encode_scalar,
    header_name,
    invoke,
    invoke_http,
    prepare_request,
)
from watsoncli.models import FlagSpec, ParameterLocation, ResultKind
from watsoncli.output import OutputFormat, OutputManager, set_output
from watsoncli.services.common import (
    BINARY,
    BODY_ROOT,
    DELETE,
    GET,
    HEADER,
    NONE,
    POST,
    PUT,
    QUERY,
    RAW_BODY,
    boolean,
    file_list,
    file_map,
    file_path,
    int64,
    json_value,
    operation,
    string,
    string_list,
)

BASE_URL = "https://example.test/api"


@pytest.fixture(autouse=True)
def _quiet_output() -> None:
    set_output(OutputManager(format=OutputFormat.PLAIN, no_color=True))


def _client(handler) -> SyncClient:
    return SyncClient(BASE_URL, transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# Value encoding
# ---------------------------------------------------------------------------


class TestEncodeScalar:
    def test_bool(self) -> None:
        assert encode_scalar(True) == "true"
        assert encode_scalar(False) == "false"

    def test_list_comma_joined(self) -> None:
        assert encode_scalar(["a", "b"]) == "a,b"

    def test_date(self) -> None:
        assert encode_scalar(datetime.date(2019, 8, 1)) == "2019-08-01"

    def test_utc_datetime_uses_z(self) -> None:
        value = datetime.datetime(2019, 8, 1, 12, 0, tzinfo=datetime.timezone.utc)
        assert encode_scalar(value) == "2019-08-01T12:00:00Z"

    def test_number(self) -> None:
        assert encode_scalar(5) == "5"


class TestHeaderName:
    def test_from_flag_name(self) -> None:
        assert header_name(FlagSpec(name="accept_language")) == "Accept-Language"

    def test_long_name(self) -> None:
        flag = FlagSpec(name="x_watson_logging_opt_out")
        assert header_name(flag) == "X-Watson-Logging-Opt-Out"

    def test_wire_name_wins(self) -> None:
        assert header_name(FlagSpec(name="ct", wire_name="Content-Type")) == "Content-Type"


# ---------------------------------------------------------------------------
# Request assembly
# ---------------------------------------------------------------------------


class TestPrepareRequest:
    def test_path_placeholder_percent_encoded(self) -> None:
        op = operation(
            "get-model",
            "Get",
            method=GET,
            path="/v3/models/{model_id}",
            flags=(string("model_id", required=True),),
        )
        request = prepare_request(op, {"model_id": "en/es x"})
        assert request.path == "/v3/models/en%2Fes%20x"
        assert request.method == "GET"

    def test_missing_path_value(self) -> None:
        op = operation(
            "get-model",
            "Get",
            path="/v3/models/{model_id}",
            flags=(string("model_id", required=True),),
        )
        with pytest.raises(UsageError, match="model_id"):
            prepare_request(op, {})

    def test_query_for_get_defaults(self) -> None:
        op = operation(
            "list",
            "List",
            method=GET,
            path="/v1/things",
            flags=(int64("page_limit"), boolean("export"), string_list("ids")),
        )
        request = prepare_request(op, {"page_limit": 5, "export": True, "ids": ["a", "b"]})
        assert request.params == {"page_limit": "5", "export": "true", "ids": "a,b"}
        assert request.json_body is None

    def test_unsupplied_flags_absent(self) -> None:
        op = operation(
            "create",
            "Create",
            method=POST,
            path="/v1/things",
            flags=(string("name"), string("description"), string("language")),
        )
        request = prepare_request(op, {"name": "X"})
        assert request.json_body == {"name": "X"}
        assert request.params == {}

    def test_body_wire_name(self) -> None:
        op = operation(
            "update",
            "Update",
            method=POST,
            path="/v1/things",
            flags=(string("new_name", wire_name="name"),),
        )
        assert prepare_request(op, {"new_name": "Y"}).json_body == {"name": "Y"}

    def test_body_nested_json(self) -> None:
        op = operation(
            "update",
            "Update",
            method=PUT,
            path="/v1/things",
            flags=(json_value("metadata"),),
        )
        request = prepare_request(op, {"metadata": {"a": [1, 2]}})
        assert request.method == "PUT"
        assert request.json_body == {"metadata": {"a": [1, 2]}}

    def test_explicit_query_on_post(self) -> None:
        op = operation(
            "create",
            "Create",
            method=POST,
            path="/v1/things",
            flags=(string("name"), boolean("dry_run", location=QUERY)),
        )
        request = prepare_request(op, {"name": "X", "dry_run": False})
        assert request.params == {"dry_run": "false"}
        assert request.json_body == {"name": "X"}

    def test_header_location(self) -> None:
        op = operation(
            "analyze",
            "Analyze",
            method=POST,
            path="/v3/tone",
            flags=(string("content_language", location=HEADER),),
        )
        request = prepare_request(op, {"content_language": "en"})
        assert request.headers == {"Content-Language": "en"}

    def test_body_root(self) -> None:
        op = operation(
            "profile",
            "Profile",
            method=POST,
            path="/v3/profile",
            flags=(json_value("content", location=BODY_ROOT),),
        )
        request = prepare_request(op, {"content": {"contentItems": []}})
        assert request.json_body == {"contentItems": []}

    def test_raw_body_with_content_type(self) -> None:
        op = operation(
            "profile",
            "Profile",
            method=POST,
            path="/v3/profile",
            content_type="text/plain",
            flags=(string("body", location=RAW_BODY),),
        )
        request = prepare_request(op, {"body": "Some text"})
        assert request.content == b"Some text"
        assert request.headers["Content-Type"] == "text/plain"

    def test_raw_body_content_type_header_flag_wins(self) -> None:
        op = operation(
            "profile",
            "Profile",
            method=POST,
            path="/v3/profile",
            content_type="text/plain",
            flags=(
                string("body", location=RAW_BODY),
                string("content_type", location=HEADER),
            ),
        )
        request = prepare_request(op, {"body": "<p>x</p>", "content_type": "text/html"})
        assert request.headers["Content-Type"] == "text/html"

    def test_fixed_accept(self) -> None:
        op = operation("synthesize", "Synthesize", method=POST, path="/v1/synthesize",
                       accept="audio/wav", result=BINARY)
        assert prepare_request(op, {}).headers == {"Accept": "audio/wav"}

    def test_form_and_file_parts(self) -> None:
        op = operation(
            "translate-document",
            "Translate",
            method=POST,
            path="/v3/documents",
            multipart=True,
            flags=(
                file_path("file", filename_flag="filename", content_type_flag="file_content_type"),
                string("filename"),
                string("file_content_type"),
                string("model_id"),
            ),
        )
        handle = BytesIO(b"doc")
        request = prepare_request(
            op,
            {
                "file": handle,
                "filename": "doc.txt",
                "file_content_type": "text/plain",
                "model_id": "en-es",
            },
        )
        assert request.files == [
            ("file", ("doc.txt", handle, "text/plain")),
            ("model_id", (None, b"en-es")),
        ]
        assert request.json_body is None

    def test_file_name_falls_back_to_handle_name(self, tmp_path) -> None:
        src = tmp_path / "speech.wav"
        src.write_bytes(b"RIFF")
        op = operation("recognize", "Recognize", method=POST, path="/v1/recognize",
                       multipart=True, flags=(file_path("audio"),))
        with open(src, "rb") as handle:
            request = prepare_request(op, {"audio": handle})
        assert request.files[0][1][0] == "speech.wav"

    def test_file_list_repeats_field(self) -> None:
        op = operation("classify", "Classify", method=POST, path="/v4/analyze",
                       multipart=True, flags=(file_list("images_file"),))
        a = FileAttachment(handle=BytesIO(b"A"), filename="a.jpg", content_type="image/jpeg")
        b = FileAttachment(handle=BytesIO(b"B"), filename="b.jpg")
        request = prepare_request(op, {"images_file": [a, b]})
        assert request.files == [
            ("images_file", ("a.jpg", a.handle, "image/jpeg")),
            ("images_file", ("b.jpg", b.handle, None)),
        ]

    def test_file_map_prefixes_names(self) -> None:
        op = operation("create-classifier", "Create", method=POST, path="/v3/classifiers",
                       multipart=True, flags=(file_map("positive_examples"),))
        dog = FileAttachment(handle=BytesIO(b"PK"), filename="dogs.zip")
        request = prepare_request(op, {"positive_examples": {"dog": dog}})
        assert request.files == [("dog_positive_examples", ("dogs.zip", dog.handle, None))]


# ---------------------------------------------------------------------------
# Invocation
# ---------------------------------------------------------------------------


class TestInvokeHttp:
    def test_value_result(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"models": []})

        op = operation("list-models", "List", path="/v3/models", flags=(string("source"),))
        with _client(handler) as client:
            result = invoke_http(op, {"source": "en"}, client)
        assert result == InvocationResult(kind=ResultKind.VALUE, value={"models": []})
        assert str(seen[0].url) == f"{BASE_URL}/v3/models?source=en"
        assert seen[0].headers["Accept"] == "application/json"

    def test_json_body_sent(self) -> None:
        seen: list[Any] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(json.loads(request.content))
            return httpx.Response(201, json={"id": "1"})

        op = operation("create", "Create", method=POST, path="/v1/things",
                       flags=(string("name"), string("description")))
        with _client(handler) as client:
            invoke_http(op, {"name": "X"}, client)
        assert seen == [{"name": "X"}]

    def test_none_result(self) -> None:
        op = operation("delete", "Delete", method=DELETE, path="/v1/things/{id}",
                       result=NONE, flags=(string("id", required=True),))
        with _client(lambda r: httpx.Response(200, json={})) as client:
            result = invoke_http(op, {"id": "1"}, client)
        assert result.kind == ResultKind.NONE
        assert result.value is None

    def test_binary_stream(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["Accept"] == "audio/wav"
            return httpx.Response(200, content=b"RIFF....", headers={"content-type": "audio/wav"})

        op = operation("synthesize", "Synthesize", method=POST, path="/v1/synthesize",
                       result=BINARY, accept="audio/wav", flags=(string("text"),))
        with _client(handler) as client:
            result = invoke_http(op, {"text": "hi"}, client)
            assert result.kind == ResultKind.BINARY_STREAM
            assert b"".join(result.stream or ()) == b"RIFF...."

    def test_remote_error(self) -> None:
        op = operation("get", "Get", path="/v3/models/{model_id}",
                       flags=(string("model_id", required=True),))
        handler = lambda r: httpx.Response(404, json={"error": "Model not found", "code": 404})
        with _client(handler) as client, pytest.raises(RemoteCallError) as exc_info:
            invoke_http(op, {"model_id": "xx"}, client)
        assert exc_info.value.status_code == 404
        assert exc_info.value.failure_line() == "FAILED: remote: HTTP 404: Model not found"


class TestInvokeDispatch:
    def test_custom_invoker_used(self) -> None:
        calls: list[Any] = []

        def custom(operation, options, client):
            calls.append(options)
            return InvocationResult(kind=ResultKind.VALUE, value="custom")

        op = operation("special", "Special", path="/v1/special", invoker=custom)
        with _client(lambda r: httpx.Response(500)) as client:
            result = invoke(op, {"a": 1}, client)
        assert result.value == "custom"
        assert calls == [{"a": 1}]

    def test_generic_invoker_by_default(self) -> None:
        op = operation("list", "List", path="/v1/things")
        with _client(lambda r: httpx.Response(200, json=[1])) as client:
            assert invoke(op, {}, client).value == [1]


def test_flag_location_resolution() -> None:
    op = operation(
        "update",
        "Update",
        method=POST,
        path="/v1/things/{thing_id}",
        flags=(string("thing_id", required=True), string("name")),
    )
    locations = {f.name: f.location for f in op.flags}
    assert locations == {"thing_id": ParameterLocation.PATH, "name": ParameterLocation.BODY}
