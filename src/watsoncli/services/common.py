"""Builders shared by the service descriptor modules.

The service modules describe their operations as literal tables. These
helpers keep those tables short: one constructor per flag kind, the
``--version`` flag every versioned service carries, and :func:`operation`,
which places the flags of multipart operations and appends the version
flag.

Example::

    from functools import partial

    _op = partial(operation, versioned=True)

    _op(
        "get-model",
        "Get model details",
        method=GET,
        path="/v3/models/{model_id}",
        flags=(string("model_id", "Model ID of the model to get.", required=True),),
    )
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any, Callable, Optional

from watsoncli.models import (
    FlagKind,
    FlagSpec,
    HTTPMethod,
    OperationSpec,
    ParameterLocation,
    ResultKind,
)

GET = HTTPMethod.GET
POST = HTTPMethod.POST
PUT = HTTPMethod.PUT
DELETE = HTTPMethod.DELETE

QUERY = ParameterLocation.QUERY
HEADER = ParameterLocation.HEADER
BODY = ParameterLocation.BODY
BODY_ROOT = ParameterLocation.BODY_ROOT
RAW_BODY = ParameterLocation.RAW_BODY
FORM = ParameterLocation.FORM

NONE = ResultKind.NONE
BINARY = ResultKind.BINARY_STREAM

VERSION_HELP = 'The API version date to use with the service, in "YYYY-MM-DD" format.'


def _flag_builder(kind: FlagKind) -> Callable[..., FlagSpec]:
    def build(name: str, help: str = "", **kwargs: Any) -> FlagSpec:
        return FlagSpec(name=name, kind=kind, help=help, **kwargs)

    build.__name__ = kind.name.lower()
    build.__doc__ = f"Build a ``{kind.value}`` flag."
    return build


string = _flag_builder(FlagKind.STRING)
int64 = _flag_builder(FlagKind.INT64)
float32 = _flag_builder(FlagKind.FLOAT32)
float64 = _flag_builder(FlagKind.FLOAT64)
boolean = _flag_builder(FlagKind.BOOL)
string_list = _flag_builder(FlagKind.STRING_LIST)
json_value = _flag_builder(FlagKind.JSON_OBJECT)
file_path = _flag_builder(FlagKind.FILE_PATH)
file_list = _flag_builder(FlagKind.FILE_WITH_METADATA_LIST)
file_map = _flag_builder(FlagKind.FILE_MAP)
date = _flag_builder(FlagKind.DATE)
date_time = _flag_builder(FlagKind.DATETIME)


def version_flag() -> FlagSpec:
    """The required ``--version``/``-v`` query flag of versioned services."""
    return FlagSpec(
        name="version",
        short="v",
        help=VERSION_HELP,
        required=True,
        location=ParameterLocation.QUERY,
    )


_PLACEHOLDER_RE = re.compile(r"\{([a-zA-Z0-9_]+)\}")


def _multipart_location(flag: FlagSpec, placeholders: set[str]) -> FlagSpec:
    if flag.location is not None or flag.field_name in placeholders:
        return flag
    location = ParameterLocation.FILE if flag.kind.opens_files else ParameterLocation.FORM
    return flag.model_copy(update={"location": location})


def operation(
    name: str,
    short_help: str,
    long_help: str = "",
    *,
    method: HTTPMethod = GET,
    path: str,
    flags: Iterable[FlagSpec] = (),
    result: ResultKind = ResultKind.VALUE,
    multipart: bool = False,
    versioned: bool = False,
    content_type: Optional[str] = None,
    accept: Optional[str] = None,
    invoker: Optional[Callable[..., Any]] = None,
) -> OperationSpec:
    """Build an :class:`~watsoncli.models.OperationSpec`.

    Args:
        multipart: Send the request as ``multipart/form-data``. Flags
            without an explicit location become file parts when they name
            files and text parts otherwise.
        versioned: Append the required ``--version`` query flag.

    Other arguments map one to one onto the descriptor fields.
    """
    flag_list = list(flags)
    if multipart:
        placeholders = set(_PLACEHOLDER_RE.findall(path))
        flag_list = [_multipart_location(flag, placeholders) for flag in flag_list]
    if versioned:
        flag_list.append(version_flag())
    return OperationSpec(
        name=name,
        short_help=short_help,
        long_help=long_help,
        method=method,
        path=path,
        flags=tuple(flag_list),
        result_kind=result,
        content_type=content_type,
        accept=accept,
        invoker=invoker,
    )
