"""Table discovery over arbitrary value trees.

The ``table`` output mode has no per-operation schema. Instead,
:func:`build_table` inspects the (projected) result and derives both the
header row and the body rows from its structure:

1. **Sequence of records** -- header from the first element's fields, one
   row per element.
2. **Sequence of mappings** -- header from the first element's keys, one
   row per element in that key order.
3. **Sequence of scalars** -- a single column headed by the fallback
   header.
4. **List-bearing object** -- a record or mapping with exactly one
   sequence-valued field is "exploded": every element of the sequence
   becomes a row, prefixed with the object's other (non-sequence) values.
5. **Plain record or mapping** -- a single row.
6. **Anything else** -- a single cell headed by the fallback header.

Records are pydantic models and dataclasses, whose fields keep their
declaration order. Mappings keep their insertion order, which is the order
the service sent the keys in.

Example::

    >>> data = build_table({"things": [{"id": "a"}, {"id": "b"}], "total": 2}, "value")
    >>> data.headers
    ['Total', 'Id']
    >>> data.rows
    [['2', 'a'], ['2', 'b']]
"""

from __future__ import annotations

import dataclasses
import datetime
import enum
import re
import typing
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, RootModel

NOTHING_TO_SHOW = "Nothing to show."

NESTED_OBJECT = "<Nested Object>"
ARRAY = "<Array>"
MISSING = "-"


@dataclasses.dataclass
class TableData:
    """Header row and body rows derived from a value tree."""

    headers: list[str]
    rows: list[list[str]]


# ---------------------------------------------------------------------------
# Value classification
# ---------------------------------------------------------------------------


def unwrap(value: Any) -> Any:
    """Follow wrapper layers until a concrete value is reached.

    Root models yield their ``root`` and enum members their ``value``.
    """
    while True:
        if isinstance(value, RootModel):
            value = value.root
        elif isinstance(value, enum.Enum):
            value = value.value
        else:
            return value


def is_record(value: Any) -> bool:
    """Whether *value* is a record: a pydantic model or a dataclass instance."""
    if isinstance(value, BaseModel):
        return not isinstance(value, RootModel)
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def is_sequence(value: Any) -> bool:
    """Whether *value* is an ordered sequence (strings and bytes excluded)."""
    return isinstance(value, (list, tuple))


def _is_structured(value: Any) -> bool:
    return is_record(value) or isinstance(value, Mapping)


def _fields(value: Any) -> list[tuple[str, Any]]:
    """Return ``(name, value)`` pairs of a record or mapping in natural order."""
    if isinstance(value, BaseModel):
        return [(name, getattr(value, name)) for name in type(value).model_fields]
    if isinstance(value, Mapping):
        return [(str(key), item) for key, item in value.items()]
    return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]


def _field_names(value: Any) -> list[str]:
    return [name for name, _ in _fields(value)]


def _get_field(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


# ---------------------------------------------------------------------------
# Cell and header formatting
# ---------------------------------------------------------------------------

_WORD_SPLIT_RE = re.compile(r"[_\-\s]+")


def header_label(name: str) -> str:
    """Render a field name or mapping key as a PascalCase column header.

    ``total`` becomes ``Total`` and ``model_id`` becomes ``ModelId``;
    already-capitalised names are left alone.
    """
    parts = [p for p in _WORD_SPLIT_RE.split(name) if p]
    if not parts:
        return name
    return "".join(p[:1].upper() + p[1:] for p in parts)


def format_float(value: float) -> str:
    """Shortest round-trip decimal, without a trailing ``.0``."""
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_cell(value: Any, field_name: Optional[str] = None) -> str:
    """Format one table cell.

    Args:
        value: The raw value.
        field_name: The field or key the value came from. Fields named
            ``url`` (in any case) always render as ``-``.

    Returns:
        The cell text.
    """
    if field_name is not None and field_name.lower() == "url":
        return MISSING

    value = unwrap(value)
    if value is None:
        return MISSING
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if _is_structured(value):
        return NESTED_OBJECT
    if is_sequence(value):
        return ARRAY if len(value) > 0 else MISSING
    return MISSING


def _record_cells(value: Any) -> list[str]:
    return [format_cell(item, name) for name, item in _fields(value)]


def _keyed_cells(value: Any, keys: list[str]) -> list[str]:
    return [format_cell(_get_field(value, key), key) for key in keys]


# ---------------------------------------------------------------------------
# Sequences (cases 1-3)
# ---------------------------------------------------------------------------


def _element_columns(first: Any, fallback_header: str) -> tuple[list[str], Optional[list[str]]]:
    """Headers and field keys for rows built from sequence elements.

    Returns ``(headers, keys)``; *keys* is ``None`` when elements are scalars
    that occupy a single column.
    """
    first = unwrap(first)
    if _is_structured(first):
        keys = _field_names(first)
        return [header_label(k) for k in keys], keys
    return [fallback_header], None


def _element_row(element: Any, keys: Optional[list[str]]) -> list[str]:
    element = unwrap(element)
    if keys is None:
        return [format_cell(element)]
    if _is_structured(element):
        return _keyed_cells(element, keys)
    return [format_cell(element)] + [MISSING] * (len(keys) - 1)


def _sequence_table(values: Any, fallback_header: str) -> Optional[TableData]:
    if len(values) == 0:
        return None
    headers, keys = _element_columns(values[0], fallback_header)
    rows = [_element_row(element, keys) for element in values]
    return TableData(headers=headers, rows=rows)


# ---------------------------------------------------------------------------
# List-bearing objects (case 4)
# ---------------------------------------------------------------------------


def sequence_field(value: Any) -> Optional[str]:
    """Name of the single sequence-valued field of a record or mapping.

    Returns ``None`` unless there is exactly one such field.
    """
    if not _is_structured(value):
        return None
    names = [name for name, item in _fields(value) if is_sequence(unwrap(item))]
    return names[0] if len(names) == 1 else None


def _declared_element_headers(owner: Any, name: str) -> list[str]:
    """Element headers taken from a field's type annotation.

    Used when the sequence is empty, so no element can be inspected.
    Only ``list[Model]`` style annotations on pydantic models and
    dataclasses carry that information.
    """
    annotation: Any = None
    if isinstance(owner, BaseModel):
        field = type(owner).model_fields.get(name)
        annotation = field.annotation if field is not None else None
    elif dataclasses.is_dataclass(owner):
        try:
            annotation = typing.get_type_hints(type(owner)).get(name)
        except (NameError, TypeError):
            annotation = None
    if annotation is None:
        return []

    candidates = [annotation]
    while candidates:
        current = candidates.pop(0)
        if typing.get_origin(current) is None and isinstance(current, type):
            if issubclass(current, BaseModel) and not issubclass(current, RootModel):
                return [header_label(n) for n in current.model_fields]
            if dataclasses.is_dataclass(current):
                return [header_label(f.name) for f in dataclasses.fields(current)]
        candidates.extend(typing.get_args(current))
    return []


def _exploded_table(value: Any, list_name: str, fallback_header: str) -> TableData:
    outer_headers: list[str] = []
    outer_cells: list[str] = []
    elements: Any = ()
    for name, item in _fields(value):
        if name == list_name:
            elements = unwrap(item)
            continue
        outer_headers.append(header_label(name))
        outer_cells.append(format_cell(item, name))

    if len(elements) == 0:
        element_headers = _declared_element_headers(value, list_name)
        padding = [MISSING] * len(element_headers)
        return TableData(headers=outer_headers + element_headers, rows=[outer_cells + padding])

    element_headers, keys = _element_columns(elements[0], fallback_header)
    rows = [outer_cells + _element_row(element, keys) for element in elements]
    return TableData(headers=outer_headers + element_headers, rows=rows)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def build_table(value: Any, fallback_header: str) -> Optional[TableData]:
    """Derive a table from *value*.

    Args:
        value: The value tree to display.
        fallback_header: Header used for single-column tables of scalars,
            normally the last segment of the JMESPath query.

    Returns:
        The :class:`TableData`, or ``None`` when there is nothing to show
        (an absent value or an empty top-level sequence).
    """
    value = unwrap(value)
    if value is None:
        return None

    if is_sequence(value):
        return _sequence_table(value, fallback_header)

    if _is_structured(value):
        list_name = sequence_field(value)
        if list_name is not None:
            return _exploded_table(value, list_name, fallback_header)
        return TableData(
            headers=[header_label(n) for n in _field_names(value)],
            rows=[_record_cells(value)],
        )

    return TableData(headers=[fallback_header], rows=[[format_cell(value)]])
