"""Run one operation end to end.

:func:`run_operation` is what every generated command calls. The stages
run strictly in order:

1. **Resolve auth** -- credentials and endpoint for the service.
2. **Bind** -- decode the supplied flags, opening any files.
3. **Invoke** -- perform the call through the operation's invoker.
4. **Project** -- apply ``--jmes_query`` (value results only).
5. **Render** -- print the value, copy the byte stream to
   ``--output_file``, or acknowledge with ``OK``.

Any stage may raise a :class:`~watsoncli.exceptions.WatsonCLIError`;
nothing is printed to stdout before the render stage.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from watsoncli.auth.resolver import ResolvedAuth, resolve_auth
from watsoncli.binder import bind
from watsoncli.client.sync_client import SyncClient
from watsoncli.config import load_global_config
from watsoncli.exceptions import UsageError
from watsoncli.invoker import invoke
from watsoncli.models import GlobalConfig, InvocationContext, OperationSpec, ResultKind, ServiceSpec
from watsoncli.output import get_output
from watsoncli.query import compile_query, last_query_segment, project
from watsoncli.renderer import acknowledge, render, to_builtin, write_stream


def make_client(resolved: ResolvedAuth) -> SyncClient:
    """Create the HTTP client for a resolved service endpoint."""
    return SyncClient(
        resolved.base_url,
        auth_result=resolved.auth_result,
        timeout=resolved.timeout,
        verify=resolved.verify_ssl,
    )


def run_operation(
    service: ServiceSpec,
    operation: OperationSpec,
    supplied: Mapping[str, Any],
    context: InvocationContext,
    config: Optional[GlobalConfig] = None,
) -> None:
    """Execute *operation* of *service* with the user's supplied flags.

    Args:
        service: The service descriptor.
        operation: The operation descriptor.
        supplied: Flag name to raw parsed value, for supplied flags only.
        context: Framework settings for this invocation.
        config: The loaded global configuration; read from disk when
            ``None``.

    Raises:
        WatsonCLIError: From whichever stage failed.
    """
    output = get_output()
    config = config or load_global_config()

    if operation.result_kind == ResultKind.BINARY_STREAM and not context.output_file:
        raise UsageError("missing required flag --output_file", source="output_file")
    if context.jmes_query:
        compile_query(context.jmes_query)

    resolved = resolve_auth(service, config)

    with bind(operation, supplied) as binding:
        output.debug(
            f"{service.tag} {operation.name}: supplied flags "
            f"{', '.join(binding.options) or '(none)'}"
        )
        with make_client(resolved) as client:
            result = invoke(operation, binding.options, client)

            if result.kind == ResultKind.BINARY_STREAM:
                written = write_stream(result.stream or iter(()), context.output_file or "")
                output.debug(f"Wrote {written} bytes to {context.output_file}")
                return

    if result.kind == ResultKind.NONE:
        acknowledge()
        return

    tree = project(to_builtin(result.value), context.jmes_query)
    render(tree, context.output_format, last_query_segment(context.jmes_query))
