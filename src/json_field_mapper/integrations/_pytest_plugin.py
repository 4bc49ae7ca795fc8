"""pytest plugin for json-field-mapper.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_field_mapper import MappingRegistry, build_tree
from json_field_mapper.tree import iter_nodes


@pytest.fixture
def mapping_registry() -> MappingRegistry:
    """A fresh MappingRegistry for each test.

    Function-scoped: registries are mutable, so tests never share one.
    """
    return MappingRegistry()


@pytest.fixture(scope="session")
def assert_tree_ids() -> Any:
    """Fixture that returns a callable asserting the node ids of a built tree.

    Usage in tests::

        def test_orders(assert_tree_ids):
            assert_tree_ids({"a": [1]}, ["$.a", "$.a[0]"])

    Returns:
        A callable ``_assert(document, expected_ids) -> None`` that builds the
        tree for ``document`` and raises ``AssertionError`` when its pre-order
        id list differs from ``expected_ids``.
    """

    def _assert(document: Any, expected_ids: list[str]) -> None:
        actual_ids = [node.id for node in iter_nodes(build_tree(document))]
        if actual_ids != list(expected_ids):
            missing = [i for i in expected_ids if i not in actual_ids]
            extra = [i for i in actual_ids if i not in expected_ids]
            raise AssertionError(
                f"Tree ids differ from expected\n"
                f"  actual:   {actual_ids}\n"
                f"  expected: {list(expected_ids)}\n"
                f"  missing:  {missing}\n"
                f"  extra:    {extra}"
            )

    return _assert
