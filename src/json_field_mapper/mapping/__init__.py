"""Mapping subpackage: per-session store of form-field mappings.

Re-exports the public API for the mapping module:
- MappingRegistry: active field, field mappings and scratch form data
- MappingDescriptor: immutable description of one field's mapping
- MappingSource: StrEnum of mapping sources (EXPRESSION, FIXED_VALUE)
- FieldMapping / MappingKind: tagged unmapped/expression/fixed view
- MutationOutcome: applied-or-rejected result of a registry mutation
"""

from json_field_mapper.mapping.descriptor import (
    FieldMapping,
    MappingDescriptor,
    MappingKind,
    MappingSource,
    MutationOutcome,
)
from json_field_mapper.mapping.registry import MappingListener, MappingRegistry

__all__ = [
    "FieldMapping",
    "MappingDescriptor",
    "MappingKind",
    "MappingListener",
    "MappingRegistry",
    "MappingSource",
    "MutationOutcome",
]
