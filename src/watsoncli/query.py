"""JMESPath projection of result trees.

:func:`project` applies the optional ``--jmes_query`` expression to a
decoded result before it is rendered. An empty or absent expression is
the identity. :func:`last_query_segment` supplies the fallback column
header for single-column tables.

Example::

    >>> project({"things": [{"name": "A"}]}, "things[0].name")
    'A'
    >>> last_query_segment("things[0].name")
    'name'
"""

from __future__ import annotations

from typing import Any, Optional

import jmespath
from jmespath.exceptions import JMESPathError

from watsoncli.exceptions import QueryCompileError, QueryEvalError

DEFAULT_SEGMENT = "value"


def compile_query(expression: str) -> Any:
    """Compile *expression*, raising :class:`QueryCompileError` on failure."""
    try:
        return jmespath.compile(expression)
    except JMESPathError as exc:
        raise QueryCompileError(f"invalid expression {expression!r}: {exc}") from exc


def project(tree: Any, expression: Optional[str]) -> Any:
    """Apply a JMESPath *expression* to *tree*.

    Args:
        tree: The decoded result (builtins only: dicts, lists, scalars).
        expression: The query, or ``None`` / ``""`` for the identity.

    Returns:
        The projected tree. JMESPath yields ``None`` when the expression
        selects nothing.

    Raises:
        QueryCompileError: If the expression does not compile.
        QueryEvalError: If evaluation fails against *tree* (for example a
            function applied to a value of the wrong type).
    """
    if not expression:
        return tree
    compiled = compile_query(expression)
    try:
        return compiled.search(tree)
    except JMESPathError as exc:
        raise QueryEvalError(f"cannot evaluate {expression!r}: {exc}") from exc
    except (TypeError, ValueError, AttributeError) as exc:
        raise QueryEvalError(f"cannot evaluate {expression!r}: {exc}") from exc


def last_query_segment(expression: Optional[str]) -> str:
    """Return the substring after the final ``.`` of *expression*.

    The whole expression is returned when it contains no dot, and
    ``"value"`` when there is no expression at all.
    """
    if not expression:
        return DEFAULT_SEGMENT
    return expression.split(".")[-1] or DEFAULT_SEGMENT
