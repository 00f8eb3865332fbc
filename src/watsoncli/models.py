"""Canonical Pydantic models shared across all watsoncli modules.

This is the single source of truth for data shapes in the project. The
models fall into three groups:

**Descriptor models** -- the static operation catalog, built once at import
time by the :mod:`watsoncli.services` modules and never mutated:
    :class:`FlagKind`, :class:`ParameterLocation`, :class:`ResultKind`,
    :class:`HTTPMethod`, :class:`FlagSpec`, :class:`OperationSpec`, and
    :class:`ServiceSpec`.

**Configuration models** -- the optional read-only config file and the
per-service credential set resolved from the environment:
    :class:`OutputConfig`, :class:`RequestConfig`, :class:`GlobalConfig`,
    and :class:`ServiceCredentials`.

**Invocation models** -- per-invocation state passed explicitly from the
dispatcher through the pipeline:
    :class:`OutputChoice` and :class:`InvocationContext`.

Descriptor models are frozen so that the catalog is read-only after
construction.
"""

from __future__ import annotations

import enum
import re
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# --- Descriptor enums ---


class FlagKind(str, enum.Enum):
    """Shapes of flag payloads recognised by the argument binder."""

    STRING = "string"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOL = "bool"
    STRING_LIST = "string-list"
    JSON_OBJECT = "json-object"
    FILE_PATH = "file-path"
    FILE_WITH_METADATA_LIST = "file-with-metadata-list"
    FILE_MAP = "file-map"
    DATE = "date"
    DATETIME = "datetime"

    @property
    def opens_files(self) -> bool:
        """Whether binding this kind opens one or more file handles."""
        return self in (
            FlagKind.FILE_PATH,
            FlagKind.FILE_WITH_METADATA_LIST,
            FlagKind.FILE_MAP,
        )


class ParameterLocation(str, enum.Enum):
    """Where the generic HTTP invoker places a bound flag value."""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    BODY = "body"
    BODY_ROOT = "body-root"
    RAW_BODY = "raw-body"
    FORM = "form"
    FILE = "file"


class ResultKind(str, enum.Enum):
    """Shape of what an operation's invoker returns."""

    VALUE = "value"
    BINARY_STREAM = "binary-stream"
    NONE = "none"


class HTTPMethod(str, enum.Enum):
    """HTTP methods used by the remote services."""

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"
    HEAD = "head"


_PLACEHOLDER_RE = re.compile(r"\{([a-zA-Z0-9_]+)\}")

_BODYLESS_METHODS = (HTTPMethod.GET, HTTPMethod.DELETE, HTTPMethod.HEAD)


# --- Descriptor models ---


class FlagSpec(BaseModel):
    """One command-line flag of one operation.

    ``default_value`` documents the remote side's default and is shown in
    help text only. It is never transmitted: the binder sends a field only
    when the user supplied the flag.

    Example::

        FlagSpec(
            name="model_id",
            kind=FlagKind.STRING,
            help="The model to use for translation.",
            location=ParameterLocation.BODY,
        )
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Long flag name, used as --<name>")
    kind: FlagKind = FlagKind.STRING
    help: str = ""
    required: bool = False
    short: Optional[str] = Field(
        default=None, description="Single-letter short form, used as -<short>"
    )
    default_value: Any = Field(
        default=None, description="Remote default, displayed in help only"
    )
    location: Optional[ParameterLocation] = Field(
        default=None,
        description="Request placement; resolved from the operation when omitted",
    )
    wire_name: Optional[str] = Field(
        default=None, description="Request field name when it differs from name"
    )
    filename_flag: Optional[str] = Field(
        default=None, description="Sibling flag naming the uploaded file"
    )
    content_type_flag: Optional[str] = Field(
        default=None, description="Sibling flag giving the upload's content type"
    )

    @property
    def field_name(self) -> str:
        """The name under which the value is sent to the remote service."""
        return self.wire_name or self.name


class OperationSpec(BaseModel):
    """Immutable descriptor of one remote operation.

    Flags without an explicit :class:`ParameterLocation` are resolved when
    the descriptor is built: names that appear as ``{placeholders}`` in
    ``path`` go to the path, remaining flags of body-less methods go to the
    query string, and everything else becomes a JSON body field.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    short_help: str
    long_help: str = ""
    flags: tuple[FlagSpec, ...] = ()
    result_kind: ResultKind = ResultKind.VALUE
    method: HTTPMethod = HTTPMethod.GET
    path: str = "/"
    content_type: Optional[str] = Field(
        default=None, description="Content type of a raw-body request"
    )
    accept: Optional[str] = Field(
        default=None, description="Fixed Accept header sent with the request"
    )
    invoker: Optional[Callable[..., Any]] = Field(
        default=None,
        exclude=True,
        description="Operation-specific invoker; the generic HTTP invoker when None",
    )

    @model_validator(mode="before")
    @classmethod
    def _resolve_locations(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        flags = data.get("flags") or ()
        path = data.get("path", "/")
        method = HTTPMethod(data.get("method", HTTPMethod.GET))
        placeholders = set(_PLACEHOLDER_RE.findall(path))

        resolved: list[FlagSpec] = []
        for flag in flags:
            if isinstance(flag, dict):
                flag = FlagSpec.model_validate(flag)
            if flag.location is None:
                if flag.field_name in placeholders:
                    location = ParameterLocation.PATH
                elif method in _BODYLESS_METHODS:
                    location = ParameterLocation.QUERY
                else:
                    location = ParameterLocation.BODY
                flag = flag.model_copy(update={"location": location})
            resolved.append(flag)
        return {**data, "flags": tuple(resolved)}

    @property
    def path_placeholders(self) -> list[str]:
        """Names of the ``{placeholders}`` in :attr:`path`, in order."""
        return _PLACEHOLDER_RE.findall(self.path)

    @property
    def is_multipart(self) -> bool:
        """Whether the request is sent as ``multipart/form-data``."""
        return any(
            f.location in (ParameterLocation.FILE, ParameterLocation.FORM)
            for f in self.flags
        )

    def get_flag(self, name: str) -> Optional[FlagSpec]:
        """Return the flag called *name*, or ``None``."""
        for flag in self.flags:
            if flag.name == name:
                return flag
        return None


class ServiceSpec(BaseModel):
    """Immutable descriptor of one remote service and its operations."""

    model_config = ConfigDict(frozen=True)

    tag: str = Field(description="Command name, e.g. language-translator-v3")
    aliases: tuple[str, ...] = ()
    credential_name: str = Field(
        description="Environment namespace, e.g. language_translator"
    )
    default_url: str
    short_help: str
    long_help: str = ""
    version_required: bool = Field(
        default=False, description="Every operation carries a required --version query flag"
    )
    operations: tuple[OperationSpec, ...] = ()

    def get_operation(self, name: str) -> Optional[OperationSpec]:
        """Return the operation called *name*, or ``None``."""
        for operation in self.operations:
            if operation.name == name:
                return operation
        return None


# --- Configuration models ---


class ServiceCredentials(BaseModel):
    """Credential set for one service, resolved from the environment.

    Populated by :func:`~watsoncli.auth.credentials.load_service_credentials`
    from the credentials file, environment variables or ``VCAP_SERVICES``.
    The ``auth_type`` selects the authenticator plugin.
    """

    model_config = ConfigDict(extra="allow")

    auth_type: str = Field(
        default="iam",
        description="Authenticator: iam, basic, bearerToken, noAuth, cp4d",
    )
    apikey: Optional[str] = None
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    bearer_token: Optional[str] = None
    auth_url: Optional[str] = None
    disable_ssl: bool = False
    source: str = Field(
        default="environment", description="Where the credential set was found"
    )


class OutputConfig(BaseModel):
    """Default output preferences stored in :class:`GlobalConfig`."""

    format: str = Field(default="table", description="Default --output: table, json, yaml")


class RequestConfig(BaseModel):
    """HTTP request settings applied to every service call."""

    timeout: Optional[float] = Field(
        default=None, description="Request timeout in seconds; None blocks indefinitely"
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")


class GlobalConfig(BaseModel):
    """User-wide configuration read from ``~/.config/watson/config.json``.

    Loaded by :func:`~watsoncli.config.load_global_config`. The file is
    optional and never written by the tool.
    """

    output: OutputConfig = Field(default_factory=OutputConfig)
    request: RequestConfig = Field(default_factory=RequestConfig)


# --- Invocation models ---


class OutputChoice(str, enum.Enum):
    """Values accepted by the ``--output`` framework flag."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


class InvocationContext(BaseModel):
    """Per-invocation framework settings passed from the dispatcher.

    Replaces process-wide bindings for the output format, JMESPath query
    and output file so that every stage receives them explicitly.
    """

    output_format: OutputChoice = OutputChoice.TABLE
    jmes_query: Optional[str] = None
    output_file: Optional[str] = None
    verbose: bool = False
