"""Tests for the TreeConfig and RegistryConfig frozen dataclasses.

Covers:
- Default values
- Custom construction
- Immutability (FrozenInstanceError on assignment)
- Validation: non-empty separator, indent >= 0, format_cache_size >= 1
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_field_mapper.config import RegistryConfig, TreeConfig

# ---------------------------------------------------------------------------
# TreeConfig
# ---------------------------------------------------------------------------


class TestTreeConfig:
    def test_defaults(self) -> None:
        config = TreeConfig()
        assert config.path_separator == " → "
        assert config.root_label == "Root"

    def test_custom(self) -> None:
        config = TreeConfig(path_separator=".", root_label="$")
        assert config.path_separator == "."
        assert config.root_label == "$"

    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(ValueError, match="path_separator"):
            TreeConfig(path_separator="")

    def test_frozen(self) -> None:
        config = TreeConfig()
        with pytest.raises(FrozenInstanceError):
            config.root_label = "Top"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# RegistryConfig
# ---------------------------------------------------------------------------


class TestRegistryConfig:
    def test_defaults(self) -> None:
        config = RegistryConfig()
        assert config.indent == 2
        assert config.ensure_ascii is False
        assert config.format_cache_size == 8

    def test_zero_indent_allowed(self) -> None:
        assert RegistryConfig(indent=0).indent == 0

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValueError, match="indent must be >= 0"):
            RegistryConfig(indent=-1)

    def test_zero_cache_size_rejected(self) -> None:
        with pytest.raises(ValueError, match="format_cache_size must be >= 1"):
            RegistryConfig(format_cache_size=0)

    def test_frozen(self) -> None:
        config = RegistryConfig()
        with pytest.raises(FrozenInstanceError):
            config.indent = 4  # type: ignore[misc]

    def test_ensure_ascii_escapes_non_ascii(self) -> None:
        from json_field_mapper import MappingRegistry

        registry = MappingRegistry(config=RegistryConfig(ensure_ascii=True))
        registry.add_mapping("名", "$.a")
        assert "\\u540d" in registry.formatted_mappings
