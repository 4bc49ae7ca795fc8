"""Tree subpackage: JSON document to clickable node tree.

Re-exports the public API for the tree module:
- TreeNode: dataclass representing one addressable position in a document
- NodeKind: StrEnum of node shapes (SCALAR, EMPTY, BRANCH)
- ValueType: StrEnum of classified JSON value types
- TreeBuilder: converts a JSON-like document into a list of TreeNodes
- generate_path_expression: renders a path as "$.key[0].key"
"""

from json_field_mapper.tree.builder import (
    TreeBuilder,
    build_tree,
    classify_value,
    describe_path,
    find_node,
    is_leaf_node,
    iter_nodes,
)
from json_field_mapper.tree.nodes import NodeKind, TreeNode, ValueType
from json_field_mapper.tree.paths import PathSegment, generate_path_expression

__all__ = [
    "NodeKind",
    "PathSegment",
    "TreeBuilder",
    "TreeNode",
    "ValueType",
    "build_tree",
    "classify_value",
    "describe_path",
    "find_node",
    "generate_path_expression",
    "is_leaf_node",
    "iter_nodes",
]
