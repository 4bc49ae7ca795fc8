"""TreeNode dataclass plus the NodeKind and ValueType StrEnums.

A built tree is a list of top-level TreeNode objects. Each node is one
addressable position in the source document and carries the path expression
a mapping would use to read it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from json_field_mapper.tree.paths import PathSegment


class NodeKind(StrEnum):
    """The three shapes a tree node can take.

    - SCALAR -> "scalar" : leaf holding a scalar value and its ValueType
    - EMPTY  -> "empty"  : leaf for an empty object {} or array []
    - BRANCH -> "branch" : non-empty object or array with children
    """

    SCALAR = auto()
    EMPTY = auto()
    BRANCH = auto()


class ValueType(StrEnum):
    """Classified type of a JSON value, as shown next to leaf nodes."""

    NULL = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    ARRAY = auto()
    OBJECT = auto()
    UNKNOWN = auto()


@dataclass(slots=True)
class TreeNode:
    """A node in the clickable document tree.

    Attributes:
        id:         Path expression for this node, e.g. "$.orders[0].id".
        label:      Display name: the object key, or "[index]" for elements.
        path:       Segments from the document root to this node.
        kind:       SCALAR, EMPTY or BRANCH (see NodeKind).
        value:      Raw scalar for SCALAR nodes; None otherwise.
        value_type: Classified type for SCALAR nodes; None otherwise.
        children:   Child nodes in document order. Empty for leaves.
    """

    id: str
    label: str
    path: list[PathSegment]
    kind: NodeKind = NodeKind.EMPTY
    value: Any = None
    value_type: ValueType | None = None
    children: list[TreeNode] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        """True iff the node has no children."""
        return not self.children

    @property
    def has_value(self) -> bool:
        """True for scalar leaves; False for empty containers and branches."""
        return self.kind == NodeKind.SCALAR

    def to_dict(self) -> dict[str, Any]:
        """Render the node (recursively) in the camelCase shape UI code reads.

        ``value`` and ``valueType`` are only present on scalar leaves, so an
        empty-container leaf is distinguishable by their absence.
        """
        out: dict[str, Any] = {
            "id": self.id,
            "label": self.label,
            "path": list(self.path),
            "isLeaf": self.is_leaf,
            "children": [child.to_dict() for child in self.children],
        }
        if self.has_value:
            out["value"] = self.value
            out["valueType"] = str(self.value_type)
        return out
