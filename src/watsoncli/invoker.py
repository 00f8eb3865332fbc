"""Generic HTTP invoker: turn bound options into one service request.

Every operation descriptor carries an HTTP method, a URL template and a
:class:`~watsoncli.models.ParameterLocation` for each flag. The
:func:`invoke_http` function walks the *supplied* options only and places
each value:

==============  ==========================================================
Location        Placement
==============  ==========================================================
``path``        substituted into ``{placeholder}``, percent-encoded
``query``       query parameter; lists joined with commas
``header``      request header (``accept_language`` -> ``Accept-Language``)
``body``        field of a JSON object body
``body-root``   the whole JSON body
``raw-body``    text or file body sent with the operation's content type
``form``        multipart text part
``file``        multipart file part
==============  ==========================================================

Operations may substitute their own invoker through
:attr:`~watsoncli.models.OperationSpec.invoker`; :func:`invoke` picks the
right one.
"""

from __future__ import annotations

import dataclasses
import datetime
import json
import os
from collections.abc import Iterator, Mapping
from typing import Any, Optional
from urllib.parse import quote

from watsoncli.binder import FileAttachment
from watsoncli.client.response import extract_response_data
from watsoncli.client.sync_client import SyncClient
from watsoncli.exceptions import UsageError
from watsoncli.models import FlagKind, FlagSpec, OperationSpec, ParameterLocation, ResultKind
from watsoncli.renderer import to_builtin


@dataclasses.dataclass
class InvocationResult:
    """What an invoker hands back to the pipeline.

    Exactly one of the payload attributes is meaningful, depending on
    ``kind``: ``value`` for :attr:`ResultKind.VALUE`, ``stream`` for
    :attr:`ResultKind.BINARY_STREAM`, neither for :attr:`ResultKind.NONE`.
    The stream can be consumed once.
    """

    kind: ResultKind
    value: Any = None
    stream: Optional[Iterator[bytes]] = None


@dataclasses.dataclass
class PreparedRequest:
    """Request parts assembled from the bound options."""

    method: str
    path: str
    params: dict[str, Any] = dataclasses.field(default_factory=dict)
    headers: dict[str, str] = dataclasses.field(default_factory=dict)
    json_body: Any = None
    content: Any = None
    files: list[tuple[str, Any]] = dataclasses.field(default_factory=list)

    def as_kwargs(self) -> dict[str, Any]:
        return {
            "params": self.params,
            "headers": self.headers,
            "json_body": self.json_body,
            "content": self.content,
            "files": self.files or None,
        }


# ---------------------------------------------------------------------------
# Value encoding
# ---------------------------------------------------------------------------


def header_name(flag: FlagSpec) -> str:
    """HTTP header name for a header flag."""
    if flag.wire_name:
        return flag.wire_name
    return "-".join(part.capitalize() for part in flag.name.split("_"))


def _datetime_text(value: datetime.datetime) -> str:
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def encode_scalar(value: Any) -> str:
    """Encode a bound value for the query string, a header or a form part."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime.datetime):
        return _datetime_text(value)
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(encode_scalar(item) for item in value)
    if isinstance(value, (dict,)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def encode_json(value: Any) -> Any:
    """Encode a bound value as a JSON-compatible tree."""
    if isinstance(value, datetime.datetime):
        return _datetime_text(value)
    if isinstance(value, dict):
        return {k: encode_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode_json(v) for v in value]
    return to_builtin(value)


def _file_part(
    flag: FlagSpec, value: Any, options: Mapping[str, Any]
) -> list[tuple[str, Any]]:
    field = flag.field_name
    if isinstance(value, FileAttachment):
        return [(field, (value.filename, value.handle, value.content_type))]
    if flag.kind == FlagKind.FILE_WITH_METADATA_LIST:
        return [(field, (a.filename, a.handle, a.content_type)) for a in value]
    if flag.kind == FlagKind.FILE_MAP:
        return [
            (f"{name}_{field}", (a.filename, a.handle, a.content_type))
            for name, a in value.items()
        ]
    if flag.kind == FlagKind.FILE_PATH:
        filename = options.get(flag.filename_flag) if flag.filename_flag else None
        if not filename:
            filename = os.path.basename(getattr(value, "name", "") or field)
        content_type = options.get(flag.content_type_flag) if flag.content_type_flag else None
        return [(field, (filename, value, content_type))]
    # Text supplied for a file part is uploaded as its content.
    return [(field, (field, encode_scalar(value).encode("utf-8"), None))]


# ---------------------------------------------------------------------------
# Request assembly
# ---------------------------------------------------------------------------


def prepare_request(operation: OperationSpec, options: Mapping[str, Any]) -> PreparedRequest:
    """Assemble the request for *operation* from its supplied *options*.

    Raises:
        UsageError: If a path placeholder has no supplied value.
    """
    sibling_flags = {
        name
        for flag in operation.flags
        for name in (flag.filename_flag, flag.content_type_flag)
        if name
    }

    path = operation.path
    request = PreparedRequest(method=operation.method.value.upper(), path=path)
    body: dict[str, Any] = {}
    body_root: Any = None
    has_body_root = False

    for flag in operation.flags:
        if flag.name not in options or flag.name in sibling_flags:
            continue
        value = options[flag.name]
        location = flag.location

        if location == ParameterLocation.PATH:
            path = path.replace(
                "{" + flag.field_name + "}", quote(encode_scalar(value), safe="")
            )
        elif location == ParameterLocation.QUERY:
            request.params[flag.field_name] = encode_scalar(value)
        elif location == ParameterLocation.HEADER:
            request.headers[header_name(flag)] = encode_scalar(value)
        elif location == ParameterLocation.BODY:
            body[flag.field_name] = encode_json(value)
        elif location == ParameterLocation.BODY_ROOT:
            body_root = encode_json(value)
            has_body_root = True
        elif location == ParameterLocation.RAW_BODY:
            request.content = value.encode("utf-8") if isinstance(value, str) else value
        elif location == ParameterLocation.FORM:
            request.files.append((flag.field_name, (None, encode_scalar(value).encode("utf-8"))))
        elif location == ParameterLocation.FILE:
            request.files.extend(_file_part(flag, value, options))

    missing = operation.path_placeholders and [
        name for name in operation.path_placeholders if "{" + name + "}" in path
    ]
    if missing:
        raise UsageError(f"missing value for path parameter '{missing[0]}'")
    request.path = path

    if has_body_root:
        request.json_body = body_root
    elif body:
        request.json_body = body

    if request.content is not None and operation.content_type:
        request.headers.setdefault("Content-Type", operation.content_type)
    if operation.accept:
        request.headers.setdefault("Accept", operation.accept)
    return request


# ---------------------------------------------------------------------------
# Invocation
# ---------------------------------------------------------------------------


def invoke_http(
    operation: OperationSpec,
    options: Mapping[str, Any],
    client: SyncClient,
) -> InvocationResult:
    """Perform *operation* over HTTP and shape the result by its kind.

    Args:
        operation: The descriptor of the operation.
        options: Supplied flag values, decoded by the binder.
        client: An open :class:`~watsoncli.client.sync_client.SyncClient`.

    Returns:
        An :class:`InvocationResult`. Binary results carry a lazy stream
        that must be consumed while *client* and the binding are open.

    Raises:
        RemoteCallError: On error statuses and transport failures.
    """
    request = prepare_request(operation, options)

    if operation.result_kind == ResultKind.BINARY_STREAM:
        stream = client.stream(request.method, request.path, **request.as_kwargs())
        return InvocationResult(kind=ResultKind.BINARY_STREAM, stream=stream)

    response = client.request(request.method, request.path, **request.as_kwargs())
    if operation.result_kind == ResultKind.NONE:
        return InvocationResult(kind=ResultKind.NONE)
    return InvocationResult(kind=ResultKind.VALUE, value=extract_response_data(response))


def invoke(
    operation: OperationSpec,
    options: Mapping[str, Any],
    client: SyncClient,
) -> InvocationResult:
    """Dispatch to the operation's own invoker, or the generic HTTP one."""
    invoker = operation.invoker or invoke_http
    return invoker(operation, options, client)
