"""Path segments and the JSONPath-like expressions generated from them.

A path is the route from the document root to a value: ``str`` segments are
object keys, ``int`` segments are array indices. Expressions are rooted at
``$``; keys render as ``.key`` and indices as ``[index]``::

    generate_path_expression(["orders", 0, "id"])  # "$.orders[0].id"
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

PathSegment = str | int

ROOT = "$"


def _render_segment(segment: Any) -> str:
    # bool MUST be rejected before the int check: bool subclasses int
    if isinstance(segment, bool):
        raise TypeError(f"Unsupported path segment type: {type(segment)!r}")
    if isinstance(segment, int):
        if segment < 0:
            raise ValueError(f"Array index must be non-negative, got {segment}")
        return f"[{segment}]"
    if isinstance(segment, str):
        return f".{segment}"
    raise TypeError(f"Unsupported path segment type: {type(segment)!r}")


def generate_path_expression(path: Any) -> str:
    """Return the path expression for ``path``.

    Args:
        path: Sequence of str/int segments. Anything that is not a list or
              tuple (None included) is treated as the empty path.

    Returns:
        ``"$"`` followed by each rendered segment.

    Raises:
        TypeError:  If a segment is neither str nor int (bool is rejected).
        ValueError: If an int segment is negative.
    """
    if not isinstance(path, (list, tuple)):
        return ROOT
    return ROOT + "".join(_render_segment(segment) for segment in path)


def join_segments(
    path: Sequence[PathSegment], separator: str, root_label: str
) -> str:
    """Join segments for display, or return ``root_label`` for an empty path."""
    if not path:
        return root_label
    return separator.join(str(segment) for segment in path)
