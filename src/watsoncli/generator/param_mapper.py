"""Map operation flags to Typer CLI options.

This module bridges the operation descriptors and Typer's CLI interface.
It converts :class:`~watsoncli.models.FlagSpec` models into descriptor
dictionaries that :func:`~watsoncli.generator.command_tree._build_command_function`
uses to construct dynamically generated function signatures.

**Mapping rules:**

* Every flag becomes a ``--<name>`` option, plus ``-<short>`` when the
  flag declares a short form. Names keep their underscores
  (``--model_id``).
* Every option defaults to ``None``. Whether the user supplied a flag is
  later read from click's parameter source, so remote defaults are never
  sent on the user's behalf.
* Required flags use ``...`` (Typer's "required" sentinel), so the option
  parser rejects a missing flag before anything else runs.
* Booleans become ``--<name>/--no-<name>`` switches; string lists become
  repeatable options; JSON, file, date and datetime flags are taken as
  text and decoded by the :mod:`~watsoncli.binder`.
* **Parameter names** are sanitised to valid Python identifiers via
  :func:`sanitize_param_name` (keyword escaping, etc.).
"""

from __future__ import annotations

import keyword
import re
from typing import Any, List, Optional

import typer

from watsoncli.models import FlagKind, FlagSpec


# ---------------------------------------------------------------------------
# Type mapping
# ---------------------------------------------------------------------------

_TYPE_MAP: dict[FlagKind, Any] = {
    FlagKind.STRING: str,
    FlagKind.INT64: int,
    FlagKind.FLOAT32: float,
    FlagKind.FLOAT64: float,
    FlagKind.BOOL: bool,
    FlagKind.STRING_LIST: List[str],
    FlagKind.JSON_OBJECT: str,
    FlagKind.FILE_PATH: str,
    FlagKind.FILE_WITH_METADATA_LIST: str,
    FlagKind.FILE_MAP: str,
    FlagKind.DATE: str,
    FlagKind.DATETIME: str,
}

_METAVARS: dict[FlagKind, str] = {
    FlagKind.STRING_LIST: "LIST",
    FlagKind.JSON_OBJECT: "JSON",
    FlagKind.FILE_PATH: "FILE",
    FlagKind.FILE_WITH_METADATA_LIST: "JSON",
    FlagKind.FILE_MAP: "JSON",
    FlagKind.DATE: "YYYY-MM-DD",
    FlagKind.DATETIME: "YYYY-MM-DDThh:mm:ssZ",
}


def flag_kind_to_python(kind: FlagKind) -> Any:
    """Map a :class:`~watsoncli.models.FlagKind` to the type Typer parses.

    Example::

        >>> flag_kind_to_python(FlagKind.INT64)
        <class 'int'>
        >>> flag_kind_to_python(FlagKind.JSON_OBJECT)
        <class 'str'>  # decoded by the binder
    """
    return _TYPE_MAP.get(kind, str)


# ---------------------------------------------------------------------------
# Name sanitisation
# ---------------------------------------------------------------------------

# Matches any character that is not alphanumeric or underscore.
_INVALID_IDENT_RE = re.compile(r"[^a-zA-Z0-9_]")


def sanitize_param_name(name: str) -> str:
    """Convert a flag name to a valid Python identifier.

    1. The string is lowercased.
    2. Hyphens and dots are replaced with underscores.
    3. Any remaining non-alphanumeric/non-underscore characters are replaced.
    4. Consecutive and leading/trailing underscores are collapsed.
    5. An empty result defaults to ``"param"``.
    6. A leading digit gets an underscore prefix.
    7. Python keywords get a trailing underscore per PEP 8 convention
       (e.g., ``"return"`` becomes ``"return_"``).

    Example::

        >>> sanitize_param_name("model_id")
        'model_id'
        >>> sanitize_param_name("return")
        'return_'
    """
    result = name.lower()
    result = result.replace("-", "_").replace(".", "_")
    result = _INVALID_IDENT_RE.sub("_", result)
    result = re.sub(r"_+", "_", result).strip("_")
    if not result:
        result = "param"
    if result[0].isdigit():
        result = f"_{result}"
    if keyword.iskeyword(result):
        result = f"{result}_"
    return result


# ---------------------------------------------------------------------------
# Flag mapping
# ---------------------------------------------------------------------------


def build_help_text(flag: FlagSpec) -> str:
    """Help line for *flag*, with the remote default when one is documented."""
    help_text = flag.help or ""
    if flag.default_value is not None:
        default = flag.default_value
        if isinstance(default, bool):
            default = "true" if default else "false"
        hint = f"[service default: {default}]"
        help_text = f"{help_text}  {hint}" if help_text else hint
    return help_text


def map_flag_to_typer(flag: FlagSpec) -> dict[str, Any]:
    """Map a single :class:`~watsoncli.models.FlagSpec` to a Typer descriptor dict.

    Args:
        flag: The flag to map.

    Returns:
        A dict with the following keys:

        * ``name`` (``str``) -- Python-safe parameter name.
        * ``flag_name`` (``str``) -- The flag name, used to key the
          request options.
        * ``type`` -- Python type annotation for the parameter.
        * ``default`` -- A :func:`typer.Option` descriptor.
        * ``help`` (``str``) -- Help text for ``--help`` output.
        * ``kind`` (:class:`~watsoncli.models.FlagKind`) -- The payload shape.
    """
    py_name = sanitize_param_name(flag.name)
    py_type = flag_kind_to_python(flag.kind)
    help_text = build_help_text(flag)

    if flag.kind == FlagKind.BOOL:
        decls = [f"--{flag.name}/--no-{flag.name}"]
    else:
        decls = [f"--{flag.name}"]
    if flag.short:
        decls.append(f"-{flag.short}")

    fallback: Any = ... if flag.required else None
    default = typer.Option(
        fallback,
        *decls,
        help=help_text or None,
        metavar=_METAVARS.get(flag.kind),
        show_default=False,
    )

    return {
        "name": py_name,
        "flag_name": flag.name,
        "type": Optional[py_type],
        "default": default,
        "help": help_text,
        "kind": flag.kind,
    }
