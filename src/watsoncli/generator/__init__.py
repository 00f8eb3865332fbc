"""Command tree generation for watsoncli.

Turns the operation registry into a nested :class:`typer.Typer`
application: one sub-app per service and one generated command per
operation, whose options mirror the operation's flags.

Public API:
    :func:`register_services` -- attach every service to a root app.
    :func:`build_service_app` -- build the sub-app of one service.
    :func:`map_flag_to_typer` -- convert one flag to a Typer option descriptor.
"""

from watsoncli.generator.command_tree import build_service_app, register_services
from watsoncli.generator.param_mapper import map_flag_to_typer

__all__ = ["build_service_app", "register_services", "map_flag_to_typer"]
