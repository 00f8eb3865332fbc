"""The operation registry: every service the ``watson`` command exposes.

Services are collected from their descriptor modules, validated once, and
looked up by tag or alias::

    >>> get_service("lt-v3").tag
    'language-translator-v3'

Validation guards the catalog against mistakes that would otherwise only
surface when a particular command runs: clashing names, path placeholders
without a flag, dangling sibling references and so on. A broken catalog
raises :class:`~watsoncli.exceptions.RegistryError`.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from typing import Optional

from watsoncli.exceptions import RegistryError
from watsoncli.models import (
    FlagKind,
    OperationSpec,
    ParameterLocation,
    ResultKind,
    ServiceSpec,
)

# Option names owned by the command framework.
RESERVED_FLAGS = frozenset({"output", "jmes_query", "output_file", "help"})
RESERVED_SHORTS = frozenset({"q", "h"})

_MULTIPART_LOCATIONS = (ParameterLocation.FILE, ParameterLocation.FORM)
_BODY_LOCATIONS = (
    ParameterLocation.BODY,
    ParameterLocation.BODY_ROOT,
    ParameterLocation.RAW_BODY,
)


def _fail(service: ServiceSpec, operation: Optional[OperationSpec], message: str) -> None:
    where = service.tag if operation is None else f"{service.tag} {operation.name}"
    raise RegistryError(f"{where}: {message}")


def validate_operation(service: ServiceSpec, operation: OperationSpec) -> None:
    """Check one operation descriptor.

    Raises:
        RegistryError: On the first problem found.
    """
    names: set[str] = set()
    shorts: set[str] = set()
    for flag in operation.flags:
        if flag.name in names:
            _fail(service, operation, f"duplicate flag --{flag.name}")
        if flag.name in RESERVED_FLAGS:
            _fail(service, operation, f"flag --{flag.name} clashes with a framework option")
        names.add(flag.name)
        if flag.short:
            if flag.short in RESERVED_SHORTS or flag.short in shorts:
                _fail(service, operation, f"short flag -{flag.short} is already taken")
            shorts.add(flag.short)

    for placeholder in operation.path_placeholders:
        owners = [
            f for f in operation.flags
            if f.location == ParameterLocation.PATH and f.field_name == placeholder
        ]
        if not owners:
            _fail(service, operation, f"no flag fills path parameter {{{placeholder}}}")
        if not all(f.required for f in owners):
            _fail(service, operation, f"path flag --{owners[0].name} must be required")

    for flag in operation.flags:
        for sibling in (flag.filename_flag, flag.content_type_flag):
            if sibling and sibling not in names:
                _fail(service, operation, f"--{flag.name} refers to unknown flag --{sibling}")
        if flag.kind in (FlagKind.FILE_WITH_METADATA_LIST, FlagKind.FILE_MAP) and (
            flag.location != ParameterLocation.FILE
        ):
            _fail(service, operation, f"--{flag.name} can only be sent as file parts")

    if service.version_required:
        version = operation.get_flag("version")
        if version is None or not version.required or version.location != ParameterLocation.QUERY:
            _fail(service, operation, "needs a required --version query flag")

    locations = {flag.location for flag in operation.flags}
    if locations & set(_MULTIPART_LOCATIONS) and locations & set(_BODY_LOCATIONS):
        _fail(service, operation, "multipart parts cannot be mixed with a request body")

    if operation.result_kind == ResultKind.BINARY_STREAM and operation.invoker is not None:
        if not getattr(operation.invoker, "streams", False):
            _fail(service, operation, "binary results need an invoker that streams")


def validate_services(services: Iterable[ServiceSpec]) -> tuple[ServiceSpec, ...]:
    """Validate *services* as one catalog and return them as a tuple.

    Raises:
        RegistryError: On the first problem found.
    """
    catalog = tuple(services)
    command_names: set[str] = set()
    for service in catalog:
        for name in (service.tag, *service.aliases):
            if name in command_names:
                _fail(service, None, f"command name {name!r} is used twice")
            command_names.add(name)

        operation_names: set[str] = set()
        for operation in service.operations:
            if operation.name in operation_names:
                _fail(service, operation, "duplicate operation name")
            operation_names.add(operation.name)
            validate_operation(service, operation)
    return catalog


@lru_cache(maxsize=None)
def all_services() -> tuple[ServiceSpec, ...]:
    """Every registered service, in the order they are listed in help."""
    from watsoncli.services import (
        assistant_v1,
        assistant_v2,
        compare_comply_v1,
        discovery_v1,
        language_translator_v3,
        natural_language_classifier_v1,
        natural_language_understanding_v1,
        personality_insights_v3,
        speech_to_text_v1,
        text_to_speech_v1,
        tone_analyzer_v3,
        visual_recognition_v3,
        visual_recognition_v4,
    )

    return validate_services(
        module.SERVICE
        for module in (
            assistant_v1,
            assistant_v2,
            compare_comply_v1,
            discovery_v1,
            language_translator_v3,
            natural_language_classifier_v1,
            natural_language_understanding_v1,
            personality_insights_v3,
            speech_to_text_v1,
            text_to_speech_v1,
            tone_analyzer_v3,
            visual_recognition_v3,
            visual_recognition_v4,
        )
    )


def get_service(name: str) -> Optional[ServiceSpec]:
    """Look a service up by tag or alias."""
    for service in all_services():
        if name == service.tag or name in service.aliases:
            return service
    return None


def get_operation(service_name: str, operation_name: str) -> Optional[OperationSpec]:
    """Look an operation up by service tag (or alias) and operation name."""
    service = get_service(service_name)
    return service.get_operation(operation_name) if service else None
