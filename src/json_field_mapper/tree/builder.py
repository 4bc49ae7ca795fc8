"""TreeBuilder: converts a JSON-like document into a clickable node tree.

Only containers produce visible nodes: each object key and each array element
becomes one TreeNode whose ``id`` is the path expression that addresses it.
A bare top-level scalar (or None) has nothing to address and yields ``[]``.

Node shapes:
- scalar values become SCALAR leaves carrying ``value`` and ``value_type``
- empty objects/arrays become EMPTY leaves with neither
- non-empty objects/arrays become BRANCH nodes with children
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from json_field_mapper.config import TreeConfig
from json_field_mapper.tree.nodes import NodeKind, TreeNode, ValueType
from json_field_mapper.tree.paths import (
    PathSegment,
    generate_path_expression,
    join_segments,
)

__all__ = [
    "TreeBuilder",
    "build_tree",
    "classify_value",
    "describe_path",
    "find_node",
    "is_leaf_node",
    "iter_nodes",
]

logger = logging.getLogger(__name__)


def classify_value(value: Any) -> ValueType:
    """Return the ValueType of ``value``.

    bool is checked before int/float because bool subclasses int.
    """
    if value is None:
        return ValueType.NULL
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, (list, tuple)):
        return ValueType.ARRAY
    if isinstance(value, dict):
        return ValueType.OBJECT
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, (int, float)):
        return ValueType.NUMBER
    return ValueType.UNKNOWN


def _is_container(value: Any) -> bool:
    return isinstance(value, (dict, list, tuple))


def _entries(container: Any) -> Iterator[tuple[PathSegment, str, Any]]:
    """Yield (segment, label, child) for each entry of a dict or list."""
    if isinstance(container, dict):
        for key, child in container.items():
            segment = key if isinstance(key, str) else str(key)
            yield segment, segment, child
    else:
        for idx, child in enumerate(container):
            yield idx, f"[{idx}]", child


@dataclass
class TreeBuilder:
    """Builds fresh TreeNode trees from JSON-like documents.

    The builder holds no per-build state; one instance can be reused for any
    number of documents. Each call returns brand new nodes that share nothing
    with the input document's containers.

    Example::

        builder = TreeBuilder()
        nodes = builder.build({"a": 1, "b": [2, 3]})
        [n.id for n in nodes]  # ["$.a", "$.b"]
    """

    config: TreeConfig = field(default_factory=TreeConfig)

    def build(self, document: Any) -> list[TreeNode]:
        """Convert ``document`` into its list of top-level nodes.

        Args:
            document: Any JSON-compatible value. dicts and lists/tuples are
                      expanded; None and bare scalars produce no nodes.

        Returns:
            Top-level nodes in document order.
        """
        if not _is_container(document):
            return []
        nodes = self._build_children(document, [])
        logger.debug("Built tree with %d top-level node(s)", len(nodes))
        return nodes

    def describe(self, node: TreeNode) -> str:
        """Return a human-readable rendering of ``node.path``."""
        return join_segments(
            node.path, self.config.path_separator, self.config.root_label
        )

    def _build_children(
        self, container: Any, parent_path: list[PathSegment]
    ) -> list[TreeNode]:
        return [
            self._build_node(segment, label, child, parent_path)
            for segment, label, child in _entries(container)
        ]

    def _build_node(
        self,
        segment: PathSegment,
        label: str,
        value: Any,
        parent_path: list[PathSegment],
    ) -> TreeNode:
        path = [*parent_path, segment]
        node = TreeNode(id=generate_path_expression(path), label=label, path=path)

        if not _is_container(value):
            node.kind = NodeKind.SCALAR
            node.value = value
            node.value_type = classify_value(value)
            return node

        node.children = self._build_children(value, path)
        node.kind = NodeKind.BRANCH if node.children else NodeKind.EMPTY
        return node


# Module-level builder (stateless, safe to share across calls)
_default_builder = TreeBuilder()


def build_tree(document: Any) -> list[TreeNode]:
    """Build a tree from ``document`` with the default TreeBuilder."""
    return _default_builder.build(document)


def is_leaf_node(node: TreeNode) -> bool:
    """Return True iff ``node`` has no children."""
    return node.is_leaf


def describe_path(node: TreeNode) -> str:
    """Return ``node.path`` joined with " → ", or "Root" for an empty path."""
    return _default_builder.describe(node)


def iter_nodes(nodes: Iterable[TreeNode]) -> Iterator[TreeNode]:
    """Walk a built tree depth-first, yielding each node before its children."""
    for node in nodes:
        yield node
        yield from iter_nodes(node.children)


def find_node(nodes: Iterable[TreeNode], node_id: str) -> TreeNode | None:
    """Return the node whose ``id`` equals ``node_id``, or None."""
    return next((node for node in iter_nodes(nodes) if node.id == node_id), None)
