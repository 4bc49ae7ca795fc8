"""Mapping descriptors and the result types returned by MappingRegistry.

A MappingDescriptor says where one form field takes its value from: either a
path expression into a source document (EXPRESSION) or a literal
(FIXED_VALUE). Exactly one of ``expression`` / ``fixed_value`` is meaningful,
depending on ``source``.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "FieldMapping",
    "MappingDescriptor",
    "MappingKind",
    "MappingSource",
    "MutationOutcome",
]


class MappingSource(StrEnum):
    """Where a mapped field's value comes from.

    Values are upper-case to match the serialized descriptor format.
    """

    EXPRESSION = "EXPRESSION"
    FIXED_VALUE = "FIXED_VALUE"


class MappingKind(StrEnum):
    """Tag of a resolved FieldMapping."""

    UNMAPPED = auto()
    EXPRESSION = auto()
    FIXED = auto()


@dataclass(frozen=True, slots=True)
class MappingDescriptor:
    """Immutable description of how one form field is mapped.

    Attributes:
        api_name:    Form field name; equals the registry key it is stored under.
        source:      EXPRESSION or FIXED_VALUE.
        expression:  Path expression for EXPRESSION mappings; "" otherwise.
        fixed_value: Literal for FIXED_VALUE mappings; None otherwise.
    """

    api_name: str
    source: MappingSource
    expression: str = ""
    fixed_value: Any = None

    @classmethod
    def for_expression(cls, api_name: str, expression: str) -> MappingDescriptor:
        return cls(
            api_name=api_name, source=MappingSource.EXPRESSION, expression=expression
        )

    @classmethod
    def for_fixed_value(cls, api_name: str, value: Any) -> MappingDescriptor:
        """Build a fixed mapping holding its own deep copy of ``value``."""
        return cls(
            api_name=api_name,
            source=MappingSource.FIXED_VALUE,
            expression="",
            fixed_value=copy.deepcopy(value),
        )

    @property
    def is_fixed(self) -> bool:
        return self.source == MappingSource.FIXED_VALUE

    def to_dict(self) -> dict[str, Any]:
        """Render the descriptor with its serialized camelCase keys.

        Expression mappings omit ``fixedValue`` entirely; fixed mappings
        carry it ahead of an empty ``expression``.
        """
        if self.is_fixed:
            return {
                "apiName": self.api_name,
                "source": str(self.source),
                "fixedValue": copy.deepcopy(self.fixed_value),
                "expression": "",
            }
        return {
            "apiName": self.api_name,
            "source": str(self.source),
            "expression": self.expression,
        }


@dataclass(frozen=True, slots=True)
class FieldMapping:
    """Tagged view of a field's mapping: unmapped, expression, or fixed.

    Unlike ``MappingRegistry.get_field_mapping``, this tells a fixed-value
    mapping apart from a missing one.
    """

    kind: MappingKind
    expression: str = ""
    fixed_value: Any = None

    @classmethod
    def from_descriptor(cls, descriptor: MappingDescriptor | None) -> FieldMapping:
        if descriptor is None:
            return cls(kind=MappingKind.UNMAPPED)
        if descriptor.is_fixed:
            return cls(kind=MappingKind.FIXED, fixed_value=descriptor.fixed_value)
        return cls(kind=MappingKind.EXPRESSION, expression=descriptor.expression)

    @property
    def is_mapped(self) -> bool:
        return self.kind != MappingKind.UNMAPPED


@dataclass(frozen=True, slots=True)
class MutationOutcome:
    """Result of a registry mutation that may be rejected.

    Attributes:
        applied: True when state changed.
        reason:  Why the mutation was rejected; empty when applied.
    """

    applied: bool
    reason: str = ""

    def __bool__(self) -> bool:
        return self.applied
