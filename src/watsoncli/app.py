"""Typer application factory and CLI entry point for watson.

This module wires together the top-level Typer application and one
sub-application per service in the operation registry::

    watson <service> <operation> [flags]

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It runs the click command in non-standalone mode so
that every failure -- usage errors from the option parser included -- is
reported the same way: a single ``FAILED: <source>: <message>`` line on
stderr and exit status 1. Success exits 0; there are no other exit codes.

See Also:
    :mod:`watsoncli.generator.command_tree`: Builds the service commands.
    :mod:`watsoncli.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Iterable, Sequence
from typing import Optional

import click
import typer
from click.exceptions import NoArgsIsHelpError

from watsoncli import __version__
from watsoncli.exceptions import WatsonCLIError
from watsoncli.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from watsoncli.models import ServiceSpec
from watsoncli.output import OutputManager, failure, get_output, set_output

INTERRUPTED_LINE = "FAILED: interrupted"


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"watson {__version__}")
        raise typer.Exit()


def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Print debug diagnostics to stderr."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~watsoncli.output.OutputManager` and,
    with ``--verbose``, routes the package's log records to stderr.
    """
    set_output(OutputManager(verbose=verbose))
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("watsoncli")
    if not verbose:
        logger.setLevel(logging.WARNING)
        return
    logger.setLevel(logging.DEBUG)
    if not any(getattr(h, "_watson", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[debug] %(name)s: %(message)s"))
        handler._watson = True  # type: ignore[attr-defined]
        logger.addHandler(handler)


def create_app(services: Optional[Iterable[ServiceSpec]] = None) -> typer.Typer:
    """Create the root application with a command group per service.

    Args:
        services: Service descriptors to expose. Defaults to every
            service in :mod:`watsoncli.services.registry`.

    Returns:
        The configured :class:`typer.Typer` application.
    """
    from watsoncli.generator import register_services
    from watsoncli.services.registry import all_services

    root = typer.Typer(
        name="watson",
        help="Command-line client for the IBM Watson services.",
        no_args_is_help=True,
        add_completion=False,
        rich_markup_mode=None,
    )
    root.callback()(main_callback)
    register_services(root, all_services() if services is None else services)
    return root


app = create_app()


def _one_line(text: str) -> str:
    return " ".join(text.split())


def run(argv: Optional[Sequence[str]] = None, application: Optional[typer.Typer] = None) -> int:
    """Run the CLI once and return its exit status (0 or 1).

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when
            ``None``.
        application: The Typer app to run; the module-level :data:`app`
            when ``None``.
    """
    set_output(OutputManager())
    command = typer.main.get_command(application or app)
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        rv = command.main(args=args, prog_name="watson", standalone_mode=False)
    except NoArgsIsHelpError as exc:
        get_output().print_data(exc.ctx.get_help() if exc.ctx else exc.format_message())
        return EXIT_SUCCESS
    except click.exceptions.Abort:
        failure(INTERRUPTED_LINE)
        return EXIT_FAILURE
    except click.ClickException as exc:
        failure(f"FAILED: usage: {_one_line(exc.format_message())}")
        return EXIT_FAILURE
    except WatsonCLIError as exc:
        failure(_one_line(exc.failure_line()))
        return exc.exit_code
    except KeyboardInterrupt:
        failure(INTERRUPTED_LINE)
        return EXIT_FAILURE
    except Exception as exc:
        get_output().debug(traceback.format_exc())
        failure(_one_line(f"FAILED: watson: unexpected error: {exc!r}"))
        return EXIT_FAILURE

    return EXIT_SUCCESS if rv in (None, EXIT_SUCCESS) else EXIT_FAILURE


def main() -> None:
    """CLI entry point invoked by the ``watson`` console script.

    Raises:
        SystemExit: Always, with status 0 on success and 1 on any failure.
    """
    sys.exit(run())
