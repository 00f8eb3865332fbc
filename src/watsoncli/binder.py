"""Bind parsed command-line flags to an operation's request options.

The binder is where the "only send what the user typed" rule lives:

1. :func:`collect_supplied` asks click where every parameter value came
   from and keeps only those the user actually supplied. Defaults never
   make it into the options, so the remote side applies *its* defaults.
2. :func:`bind` decodes each supplied value according to its
   :class:`~watsoncli.models.FlagKind` -- JSON flags are parsed, file flags
   opened, dates and instants parsed, lists split -- and returns a
   :class:`Binding` owning every file handle it opened.

Example::

    with bind(operation, {"name": "X", "metadata": '{"a": 1}'}) as binding:
        binding.options   # {"name": "X", "metadata": {"a": 1}}
"""

from __future__ import annotations

import dataclasses
import datetime
import json
import os
import re
from collections.abc import Mapping
from contextlib import ExitStack
from typing import IO, Any, Callable, Optional

import click
from click.core import ParameterSource

from watsoncli.exceptions import FileAccessError, InputDecodeError, TimeParseError
from watsoncli.models import FlagKind, FlagSpec, OperationSpec

_SUPPLIED_SOURCES = (
    ParameterSource.COMMANDLINE,
    ParameterSource.ENVIRONMENT,
    ParameterSource.PROMPT,
)


@dataclasses.dataclass
class FileAttachment:
    """An opened file together with the metadata it is uploaded with."""

    handle: IO[bytes]
    filename: Optional[str] = None
    content_type: Optional[str] = None


class Binding:
    """Request options for one invocation and the file handles they own.

    Use as a context manager: every handle opened while binding is closed
    on exit, whether the invoker succeeded or raised.

    Attributes:
        options: Flag name to decoded value, for supplied flags only.
    """

    def __init__(self) -> None:
        self.options: dict[str, Any] = {}
        self._stack = ExitStack()

    def __enter__(self) -> Binding:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Release every file handle owned by this binding."""
        self._stack.close()

    def open_file(self, path: str, flag_name: str) -> IO[bytes]:
        """Open *path* for binary reading and take ownership of the handle."""
        fh = _open_for_read(path, flag_name)
        return self._stack.enter_context(fh)

    def adopt(self, stack: ExitStack) -> None:
        """Take ownership of the callbacks registered on *stack*."""
        self._stack.push(stack.pop_all())


# ---------------------------------------------------------------------------
# Supplied-flag detection
# ---------------------------------------------------------------------------


def collect_supplied(
    ctx: click.Context,
    param_names: Mapping[str, str],
    values: Mapping[str, Any],
) -> dict[str, Any]:
    """Return the values of the flags the user explicitly supplied.

    Args:
        ctx: The click context of the running command.
        param_names: Flag name to Python parameter name.
        values: Python parameter name to parsed value.

    Returns:
        Flag name to raw parsed value, in flag declaration order, for every
        flag whose value came from the command line (or the environment),
        never from a default.
    """
    supplied: dict[str, Any] = {}
    for flag_name, py_name in param_names.items():
        if ctx.get_parameter_source(py_name) in _SUPPLIED_SOURCES:
            supplied[flag_name] = values[py_name]
    return supplied


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _open_for_read(path: str, flag_name: str) -> IO[bytes]:
    try:
        return open(os.path.expanduser(path), "rb")
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise FileAccessError(f"cannot open {path}: {reason}", source=flag_name) from exc


def _decode_json(flag: FlagSpec, raw: Any) -> Any:
    if not isinstance(raw, str):
        return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InputDecodeError(f"invalid JSON: {exc}", source=flag.name) from exc


def split_list(raw: Any) -> list[str]:
    """Split repeated and comma-separated occurrences into one ordered list.

    Empty items (for example after a trailing comma) are dropped.
    """
    occurrences = [raw] if isinstance(raw, str) else list(raw or ())
    items: list[str] = []
    for occurrence in occurrences:
        items.extend(part for part in str(occurrence).split(",") if part)
    return items


_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_DATETIME_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})?",
    re.ASCII,
)


def parse_date(flag: FlagSpec, raw: str) -> datetime.date:
    """Parse a ``YYYY-MM-DD`` calendar date."""
    message = f"invalid date {raw!r}, expected YYYY-MM-DD"
    if not _DATE_RE.fullmatch(raw):
        raise TimeParseError(message, source=flag.name)
    try:
        return datetime.date.fromisoformat(raw)
    except ValueError as exc:
        raise TimeParseError(message, source=flag.name) from exc


def parse_datetime(flag: FlagSpec, raw: str) -> datetime.datetime:
    """Parse an RFC 3339 instant such as ``2019-08-01T12:00:00Z``.

    Seconds are mandatory. Values without an offset are taken to be UTC.
    """
    message = f"invalid datetime {raw!r}, expected YYYY-MM-DDThh:mm:ssZ"
    text = raw.strip()
    if not _DATETIME_RE.fullmatch(text):
        raise TimeParseError(message, source=flag.name)
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        value = datetime.datetime.fromisoformat(text.replace("t", "T"))
    except ValueError as exc:
        raise TimeParseError(message, source=flag.name) from exc
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return value


def _bind_file_list(binding: Binding, flag: FlagSpec, raw: Any) -> list[FileAttachment]:
    entries = _decode_json(flag, raw)
    if not isinstance(entries, list):
        raise InputDecodeError(
            "expected a JSON array of {data, filename, content_type} objects",
            source=flag.name,
        )

    attachments: list[FileAttachment] = []
    with ExitStack() as local:
        for entry in entries:
            if not isinstance(entry, dict) or not isinstance(entry.get("data"), str):
                raise InputDecodeError(
                    "every element needs a 'data' file path", source=flag.name
                )
            fh = local.enter_context(_open_for_read(entry["data"], flag.name))
            attachments.append(
                FileAttachment(
                    handle=fh,
                    filename=entry.get("filename") or os.path.basename(entry["data"]),
                    content_type=entry.get("content_type"),
                )
            )
        binding.adopt(local)
    return attachments


def _bind_file_map(binding: Binding, flag: FlagSpec, raw: Any) -> dict[str, FileAttachment]:
    entries = _decode_json(flag, raw)
    if not isinstance(entries, dict) or not all(isinstance(v, str) for v in entries.values()):
        raise InputDecodeError(
            "expected a JSON object mapping names to file paths", source=flag.name
        )

    attachments: dict[str, FileAttachment] = {}
    with ExitStack() as local:
        for name, path in entries.items():
            fh = local.enter_context(_open_for_read(path, flag.name))
            attachments[name] = FileAttachment(handle=fh, filename=os.path.basename(path))
        binding.adopt(local)
    return attachments


_Decoder = Callable[[Binding, FlagSpec, Any], Any]

_DECODERS: dict[FlagKind, _Decoder] = {
    FlagKind.STRING: lambda b, f, raw: raw,
    FlagKind.INT64: lambda b, f, raw: int(raw),
    FlagKind.FLOAT32: lambda b, f, raw: float(raw),
    FlagKind.FLOAT64: lambda b, f, raw: float(raw),
    FlagKind.BOOL: lambda b, f, raw: bool(raw),
    FlagKind.STRING_LIST: lambda b, f, raw: split_list(raw),
    FlagKind.JSON_OBJECT: lambda b, f, raw: _decode_json(f, raw),
    FlagKind.FILE_PATH: lambda b, f, raw: b.open_file(raw, f.name),
    FlagKind.FILE_WITH_METADATA_LIST: _bind_file_list,
    FlagKind.FILE_MAP: _bind_file_map,
    FlagKind.DATE: lambda b, f, raw: parse_date(f, raw),
    FlagKind.DATETIME: lambda b, f, raw: parse_datetime(f, raw),
}


def bind(operation: OperationSpec, supplied: Mapping[str, Any]) -> Binding:
    """Decode the supplied flag values of *operation* into request options.

    Args:
        operation: The operation being invoked.
        supplied: Flag name to raw value, as returned by
            :func:`collect_supplied`.

    Returns:
        A :class:`Binding` whose ``options`` hold exactly the supplied
        flags. If decoding any flag fails, every handle opened so far is
        released before the error propagates.

    Raises:
        InputDecodeError: For malformed JSON or list values.
        FileAccessError: When a file flag names a file that cannot be opened.
        TimeParseError: For malformed dates and instants.
    """
    binding = Binding()
    try:
        for flag in operation.flags:
            if flag.name not in supplied:
                continue
            raw = supplied[flag.name]
            binding.options[flag.name] = _DECODERS[flag.kind](binding, flag, raw)
    except BaseException:
        binding.close()
        raise
    return binding
