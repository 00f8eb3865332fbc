"""Render results to stdout or to the ``--output_file``.

Three presentations are supported for value results:

* ``json`` -- pretty-printed JSON with a two-space indent.
* ``yaml`` -- block-style YAML of the same tree, keys in their original
  order.
* ``table`` -- a table derived by :func:`watsoncli.table.build_table`,
  drawn by the :class:`~watsoncli.output.OutputManager`.

The complete text is produced before anything is written, so a formatting
failure leaves stdout empty. Binary results bypass rendering entirely and
are copied chunk by chunk to the output file by :func:`write_stream`.

See Also:
    :mod:`watsoncli.table` -- the table discovery algorithm.
    :mod:`watsoncli.query` -- projection applied before rendering.
"""

from __future__ import annotations

import dataclasses
import datetime
import enum
import json
from collections.abc import Iterable, Mapping
from decimal import Decimal
from pathlib import Path
from typing import IO, Any, Optional

import yaml
from pydantic import BaseModel

from watsoncli.exceptions import FileAccessError, RenderError
from watsoncli.models import OutputChoice
from watsoncli.output import get_output
from watsoncli.table import NOTHING_TO_SHOW, build_table

OK = "OK"


# ---------------------------------------------------------------------------
# Builtin conversion
# ---------------------------------------------------------------------------


def to_builtin(value: Any) -> Any:
    """Convert *value* into plain dicts, lists and scalars.

    Records become dicts in field order, dates become ISO strings, enum
    members their values, and decimals floats. Values that are already
    builtins pass through unchanged.
    """
    if isinstance(value, BaseModel):
        return to_builtin(value.model_dump(mode="python"))
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_builtin(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        return {str(k): to_builtin(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_builtin(v) for v in value]
    if isinstance(value, enum.Enum):
        return to_builtin(value.value)
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


def render_json(tree: Any) -> str:
    """Return *tree* as JSON indented by two spaces."""
    return json.dumps(to_builtin(tree), indent=2, ensure_ascii=False)


def render_yaml(tree: Any) -> str:
    """Return *tree* as block-style YAML with keys in their original order."""
    return yaml.safe_dump(
        to_builtin(tree),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def render(tree: Any, output_format: OutputChoice, fallback_header: str) -> None:
    """Render a value result to stdout.

    Args:
        tree: The projected value tree.
        output_format: ``table``, ``json`` or ``yaml``.
        fallback_header: Column header for single-column tables.

    Raises:
        RenderError: If the tree cannot be formatted.
    """
    output = get_output()
    try:
        if output_format == OutputChoice.JSON:
            text = render_json(tree)
        elif output_format == OutputChoice.YAML:
            text = render_yaml(tree)
        else:
            table = build_table(tree, fallback_header)
            if table is None:
                output.print_data(NOTHING_TO_SHOW)
            else:
                output.print_table(table.headers, table.rows)
            return
    except (TypeError, ValueError, yaml.YAMLError, RecursionError) as exc:
        raise RenderError(f"cannot format result as {output_format.value}: {exc}") from exc

    output.print_data(text)


def acknowledge() -> None:
    """Print the acknowledgment for operations without a result body."""
    get_output().print_data(OK)


# ---------------------------------------------------------------------------
# Binary results
# ---------------------------------------------------------------------------


def write_stream(chunks: Iterable[bytes], path: str) -> int:
    """Copy a byte stream to *path*, creating or replacing the file.

    The file is opened once the first chunk arrives, so a request that
    fails before sending any bytes leaves no file behind. A failure part
    way through leaves the partially written file in place.

    Args:
        chunks: The byte chunks, consumed once.
        path: Destination file path from ``--output_file``.

    Returns:
        The number of bytes written.

    Raises:
        FileAccessError: If the file cannot be opened or written.
    """
    written = 0
    target = Path(path).expanduser()
    fh: Optional[IO[bytes]] = None
    try:
        for chunk in chunks:
            if fh is None:
                fh = open(target, "wb")
            fh.write(chunk)
            written += len(chunk)
        if fh is None:
            fh = open(target, "wb")
    except OSError as exc:
        raise FileAccessError(f"cannot write {path}: {exc}", source="output_file") from exc
    finally:
        if fh is not None:
            fh.close()

    output = get_output()
    output.print_data(OK)
    output.print_data(f"Output written to {path}")
    return written
