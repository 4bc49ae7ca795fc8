"""JSON field mapper - map form fields to values picked from a JSON tree."""

from __future__ import annotations

import logging

from json_field_mapper.config import RegistryConfig, TreeConfig
from json_field_mapper.mapping import (
    FieldMapping,
    MappingDescriptor,
    MappingKind,
    MappingRegistry,
    MappingSource,
    MutationOutcome,
)
from json_field_mapper.tree import (
    NodeKind,
    TreeBuilder,
    TreeNode,
    ValueType,
    build_tree,
    describe_path,
    generate_path_expression,
    is_leaf_node,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "FieldMapping",
    "MappingDescriptor",
    "MappingKind",
    "MappingRegistry",
    "MappingSource",
    "MutationOutcome",
    "NodeKind",
    "RegistryConfig",
    "TreeBuilder",
    "TreeConfig",
    "TreeNode",
    "ValueType",
    "build_tree",
    "describe_path",
    "generate_path_expression",
    "is_leaf_node",
]
