"""Build the Typer command tree from the operation registry.

Every service becomes a sub-application named after its tag (with its
aliases registered as hidden duplicates) and every operation a leaf
command under it::

    watson language-translator-v3 translate --text hi --model_id en-es

**Algorithm summary**

1. For each :class:`~watsoncli.models.ServiceSpec`, create a
   :class:`typer.Typer` sub-app with ``no_args_is_help``.
2. For each :class:`~watsoncli.models.OperationSpec`, map its flags to
   Typer options via :func:`~watsoncli.generator.param_mapper.map_flag_to_typer`
   and append the framework options (``--output``, ``--jmes_query``, and
   ``--output_file`` for binary results).
3. Generate a function with exactly that signature, so that Typer can read
   it with :mod:`inspect`, and register it as the leaf command.
4. At runtime, the generated function hands its click context and raw
   values to a dispatcher that keeps the supplied flags only and calls
   :func:`~watsoncli.pipeline.run_operation`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable, Optional

import click
import typer

from watsoncli.binder import collect_supplied
from watsoncli.config import load_global_config, resolve_output_format
from watsoncli.generator.param_mapper import map_flag_to_typer, sanitize_param_name
from watsoncli.models import (
    InvocationContext,
    OperationSpec,
    OutputChoice,
    ResultKind,
    ServiceSpec,
)

# Names of the framework parameters in generated signatures. Flag names
# are sanitised into lowercase identifiers, so the ``wx_`` prefix keeps
# the two sets apart.
_CTX_PARAM = "wx_ctx"
_OUTPUT_PARAM = "wx_output"
_QUERY_PARAM = "wx_jmes_query"
_OUTPUT_FILE_PARAM = "wx_output_file"

RunCallback = Callable[[ServiceSpec, OperationSpec, Mapping[str, Any], InvocationContext], Any]


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def register_services(
    root: typer.Typer,
    services: Iterable[ServiceSpec],
    run_callback: Optional[RunCallback] = None,
) -> None:
    """Attach one sub-app per service to *root*.

    Args:
        root: The top-level :class:`typer.Typer` application.
        services: Service descriptors, in the order they should be listed.
        run_callback: Called when a generated command runs, with the
            service, the operation, the supplied flag values and the
            :class:`~watsoncli.models.InvocationContext`. Defaults to
            :func:`watsoncli.pipeline.run_operation`.
    """
    for service in services:
        sub = build_service_app(service, run_callback)
        root.add_typer(sub, name=service.tag, help=service.short_help)
        for alias in service.aliases:
            root.add_typer(sub, name=alias, help=service.short_help, hidden=True)


def build_service_app(
    service: ServiceSpec,
    run_callback: Optional[RunCallback] = None,
) -> typer.Typer:
    """Build the :class:`typer.Typer` sub-app holding *service*'s operations."""
    sub = typer.Typer(
        name=service.tag,
        help=service.long_help or service.short_help,
        short_help=service.short_help,
        no_args_is_help=True,
        rich_markup_mode=None,
    )
    for operation in service.operations:
        cmd_fn = _build_command_function(service, operation, run_callback)
        sub.command(
            name=operation.name,
            help=_build_help_text(operation),
            short_help=operation.short_help,
        )(cmd_fn)
    return sub


# ---------------------------------------------------------------------------
# Framework options
# ---------------------------------------------------------------------------


def _framework_descriptors(operation: OperationSpec) -> list[dict[str, Any]]:
    descriptors: list[dict[str, Any]] = [
        {
            "name": _OUTPUT_PARAM,
            "type": Optional[OutputChoice],
            "default": typer.Option(
                None,
                "--output",
                help="Output format: table, json or yaml. [default: table]",
                case_sensitive=False,
                show_default=False,
            ),
        },
        {
            "name": _QUERY_PARAM,
            "type": Optional[str],
            "default": typer.Option(
                None,
                "--jmes_query",
                "-q",
                help="JMESPath expression applied to the result before output.",
                show_default=False,
            ),
        },
    ]
    if operation.result_kind == ResultKind.BINARY_STREAM:
        descriptors.append({
            "name": _OUTPUT_FILE_PARAM,
            "type": str,
            "default": typer.Option(
                ...,
                "--output_file",
                help="File the binary result is written to.",
                metavar="FILE",
            ),
        })
    return descriptors


# ---------------------------------------------------------------------------
# Dynamic command function builder
# ---------------------------------------------------------------------------


def _build_command_function(
    service: ServiceSpec,
    operation: OperationSpec,
    run_callback: Optional[RunCallback],
) -> Callable[..., Any]:
    """Dynamically generate a Typer-compatible function for *operation*.

    The function source is built as a string, compiled, and executed into
    a namespace so that :mod:`inspect` (which Typer relies on) can read its
    signature. When invoked, the generated function collects its parameter
    values and delegates to the dispatcher built by :func:`_make_dispatch`.
    """
    flag_descriptors = [map_flag_to_typer(flag) for flag in operation.flags]
    framework = _framework_descriptors(operation)

    func_name = f"_cmd_{_slugify(service.tag)}_{_slugify(operation.name)}"

    namespace: dict[str, Any] = {"_Context": typer.Context}
    sig_parts: list[str] = [f"{_CTX_PARAM}: _Context"]

    for idx, desc in enumerate(flag_descriptors + framework):
        sentinel = f"_default_opt_{idx}"
        namespace[sentinel] = desc["default"]
        ann = f"_ann_opt_{idx}"
        namespace[ann] = desc["type"]
        sig_parts.append(f"{desc['name']}: {ann} = {sentinel}")

    sig = ", ".join(sig_parts)

    body_lines = ["    _wx_values = {}"]
    for desc in flag_descriptors:
        body_lines.append(f"    _wx_values[{desc['name']!r}] = {desc['name']}")

    framework_names = {d["name"] for d in framework}
    output_arg = _OUTPUT_PARAM if _OUTPUT_PARAM in framework_names else "None"
    query_arg = _QUERY_PARAM if _QUERY_PARAM in framework_names else "None"
    file_arg = _OUTPUT_FILE_PARAM if _OUTPUT_FILE_PARAM in framework_names else "None"
    body_lines.append(
        f"    return _dispatch({_CTX_PARAM}, _wx_values, {output_arg}, {query_arg}, {file_arg})"
    )

    func_body = "\n".join(body_lines)
    source = f"def {func_name}({sig}):\n{func_body}\n"

    param_names = {desc["flag_name"]: desc["name"] for desc in flag_descriptors}
    namespace["_dispatch"] = _make_dispatch(service, operation, param_names, run_callback)

    code = compile(source, f"<watson:{service.tag}:{operation.name}>", "exec")
    exec(code, namespace)  # noqa: S102 -- controlled code generation
    fn = namespace[func_name]

    fn.__doc__ = _build_help_text(operation)
    fn.__name__ = func_name
    fn.__qualname__ = func_name

    return fn


# ---------------------------------------------------------------------------
# Dispatch helper
# ---------------------------------------------------------------------------


def _make_dispatch(
    service: ServiceSpec,
    operation: OperationSpec,
    param_names: Mapping[str, str],
    run_callback: Optional[RunCallback],
) -> Callable[..., Any]:
    """Return the function generated commands call with their raw values.

    The dispatcher keeps the flags the user supplied, resolves the output
    format, and hands everything to *run_callback*.
    """

    def _dispatch(
        ctx: click.Context,
        values: Mapping[str, Any],
        output_format: Optional[OutputChoice],
        jmes_query: Optional[str],
        output_file: Optional[str],
    ) -> Any:
        from watsoncli.output import get_output

        supplied = collect_supplied(ctx, param_names, values)
        config = load_global_config()
        context = InvocationContext(
            output_format=resolve_output_format(
                output_format.value if output_format is not None else None, config
            ),
            jmes_query=jmes_query,
            output_file=output_file,
            verbose=get_output().is_verbose,
        )

        if run_callback is not None:
            return run_callback(service, operation, supplied, context)

        from watsoncli.pipeline import run_operation

        return run_operation(service, operation, supplied, context, config)

    return _dispatch


# ---------------------------------------------------------------------------
# Help text helpers
# ---------------------------------------------------------------------------


def _build_help_text(operation: OperationSpec) -> str:
    """Build the ``--help`` text for a generated command."""
    parts = [operation.short_help]
    if operation.long_help and operation.long_help != operation.short_help:
        parts.append(operation.long_help)
    return "\n\n".join(p for p in parts if p)


def _slugify(text: str) -> str:
    """Turn a service tag or operation name into an identifier fragment."""
    return sanitize_param_name(text).strip("_") or "cmd"
