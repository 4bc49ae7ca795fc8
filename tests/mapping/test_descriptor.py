"""Tests for MappingDescriptor, FieldMapping, MutationOutcome and the enums.

Covers:
- MappingSource values match the serialized format ("EXPRESSION", "FIXED_VALUE")
- Constructor helpers populate exactly one of expression / fixed_value
- to_dict() key sets and ordering for both sources
- FieldMapping tags for missing, expression and fixed descriptors
- Immutability (FrozenInstanceError on assignment)
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_field_mapper.mapping.descriptor import (
    FieldMapping,
    MappingDescriptor,
    MappingKind,
    MappingSource,
    MutationOutcome,
)


class TestMappingSource:
    def test_values_are_upper_case(self) -> None:
        assert MappingSource.EXPRESSION == "EXPRESSION"
        assert MappingSource.FIXED_VALUE == "FIXED_VALUE"

    def test_lookup_by_value(self) -> None:
        assert MappingSource("FIXED_VALUE") is MappingSource.FIXED_VALUE


class TestMappingDescriptor:
    def test_for_expression(self) -> None:
        desc = MappingDescriptor.for_expression("x", "$.a")
        assert desc.api_name == "x"
        assert desc.source == MappingSource.EXPRESSION
        assert desc.expression == "$.a"
        assert desc.fixed_value is None
        assert desc.is_fixed is False

    def test_for_fixed_value(self) -> None:
        desc = MappingDescriptor.for_fixed_value("y", 42)
        assert desc.source == MappingSource.FIXED_VALUE
        assert desc.fixed_value == 42
        assert desc.expression == ""
        assert desc.is_fixed is True

    def test_fixed_value_is_copied(self) -> None:
        literal = {"nested": [1]}
        desc = MappingDescriptor.for_fixed_value("y", literal)
        literal["nested"].append(2)
        assert desc.fixed_value == {"nested": [1]}
        assert desc.fixed_value is not literal

    def test_expression_to_dict(self) -> None:
        desc = MappingDescriptor.for_expression("x", "$.a")
        assert desc.to_dict() == {
            "apiName": "x",
            "source": "EXPRESSION",
            "expression": "$.a",
        }

    def test_fixed_to_dict_key_order(self) -> None:
        desc = MappingDescriptor.for_fixed_value("y", 42)
        out = desc.to_dict()
        assert list(out) == ["apiName", "source", "fixedValue", "expression"]
        assert out["fixedValue"] == 42
        assert out["expression"] == ""

    def test_source_serialized_as_plain_str(self) -> None:
        out = MappingDescriptor.for_expression("x", "$.a").to_dict()
        assert type(out["source"]) is str

    def test_is_frozen(self) -> None:
        desc = MappingDescriptor.for_expression("x", "$.a")
        with pytest.raises(FrozenInstanceError):
            desc.expression = "$.b"  # type: ignore[misc]


class TestFieldMapping:
    def test_missing_is_unmapped(self) -> None:
        mapping = FieldMapping.from_descriptor(None)
        assert mapping.kind == MappingKind.UNMAPPED
        assert mapping.is_mapped is False

    def test_expression(self) -> None:
        mapping = FieldMapping.from_descriptor(
            MappingDescriptor.for_expression("x", "$.a")
        )
        assert mapping.kind == MappingKind.EXPRESSION
        assert mapping.expression == "$.a"
        assert mapping.is_mapped is True

    def test_fixed(self) -> None:
        mapping = FieldMapping.from_descriptor(
            MappingDescriptor.for_fixed_value("y", 0)
        )
        assert mapping.kind == MappingKind.FIXED
        assert mapping.fixed_value == 0
        assert mapping.expression == ""
        assert mapping.is_mapped is True


class TestMutationOutcome:
    def test_applied_is_truthy(self) -> None:
        assert MutationOutcome(applied=True)
        assert MutationOutcome(applied=True).reason == ""

    def test_rejected_is_falsy(self) -> None:
        outcome = MutationOutcome(applied=False, reason="value is None")
        assert not outcome
        assert outcome.reason == "value is None"
