"""MappingRegistry: in-memory store of form-field mappings for one UI session.

Holds three independent pieces of state:
- the active field (which form field currently awaits a mapping target)
- input mappings (field name -> MappingDescriptor)
- form data (field name -> scratch value being edited outside the mapping flow)

Invalid input never raises. Mutations that may be rejected return a
MutationOutcome so callers can tell "applied" from "rejected: reason" while
the registry state stays untouched on rejection.

Each registry instance owns its state exclusively; give every session its own
instance. There is no locking.

Example::

    registry = MappingRegistry()
    registry.add_mapping("customerId", "$.order.customer.id")
    registry.get_field_mapping("customerId")  # "$.order.customer.id"
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from cachetools import LRUCache

from json_field_mapper.config import RegistryConfig
from json_field_mapper.mapping.descriptor import (
    FieldMapping,
    MappingDescriptor,
    MappingSource,
    MutationOutcome,
)

__all__ = ["MappingListener", "MappingRegistry"]

logger = logging.getLogger(__name__)

MappingListener = Callable[["MappingRegistry"], None]

_APPLIED = MutationOutcome(applied=True)


class MappingRegistry:
    """Per-session store of field mappings, form data and the active field.

    Args:
        config: Formatting settings. Defaults to ``RegistryConfig()`` when None.
    """

    def __init__(self, config: RegistryConfig | None = None) -> None:
        self._config = config if config is not None else RegistryConfig()
        self._active_field: Any = None
        self._mappings: dict[str, MappingDescriptor] = {}
        self._form_data: dict[str, Any] = {}
        self._listeners: list[MappingListener] = []
        # Bumped on every applied mapping change; keys the formatted-view cache.
        self._revision = 0
        self._format_cache: LRUCache[tuple[int, int], str] = LRUCache(
            maxsize=self._config.format_cache_size
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def active_field(self) -> Any:
        """The caller-defined field info awaiting a mapping, or None."""
        return self._active_field

    @property
    def input_mappings(self) -> Mapping[str, MappingDescriptor]:
        """Read-only view of field name -> MappingDescriptor."""
        return MappingProxyType(self._mappings)

    @property
    def form_data(self) -> Mapping[str, Any]:
        """Read-only view of field name -> scratch value."""
        return MappingProxyType(self._form_data)

    @property
    def revision(self) -> int:
        """Number of applied mapping changes since construction."""
        return self._revision

    # ------------------------------------------------------------------
    # Active field
    # ------------------------------------------------------------------

    def set_active_field(self, field_info: Any) -> None:
        """Replace the active field. ``field_info`` is opaque and not validated."""
        self._active_field = field_info

    def clear_active_field(self) -> None:
        self._active_field = None

    # ------------------------------------------------------------------
    # Mappings
    # ------------------------------------------------------------------

    def add_mapping(
        self,
        field_name: str | None,
        value: Any,
        *,
        source: MappingSource | str = MappingSource.EXPRESSION,
    ) -> MutationOutcome:
        """Store a mapping for ``field_name``, replacing any previous one.

        Args:
            field_name: Form field to map. Empty or None is rejected.
            value:      Path expression (default) or literal (FIXED_VALUE).
                        None is rejected; expression mappings also reject
                        anything but a non-empty str. Fixed literals are
                        deep-copied so later caller mutations do not leak in.
            source:     FIXED_VALUE stores ``value`` as a literal; any other
                        value stores it as an expression.

        Returns:
            MutationOutcome; the registry is unchanged when not applied.
        """
        if not field_name:
            return self._reject("add", field_name, "field name is empty")
        if value is None:
            return self._reject("add", field_name, "value is None")

        if source == MappingSource.FIXED_VALUE:
            descriptor = MappingDescriptor.for_fixed_value(field_name, value)
        else:
            if not isinstance(value, str):
                return self._reject("add", field_name, "expression is not a string")
            if not value:
                return self._reject("add", field_name, "expression is empty")
            descriptor = MappingDescriptor.for_expression(field_name, value)

        self._mappings[field_name] = descriptor
        logger.debug("Mapped field %r (%s)", field_name, descriptor.source)
        self._changed()
        return _APPLIED

    def remove_mapping(self, field_name: str) -> MutationOutcome:
        """Delete the mapping for ``field_name`` if there is one."""
        if field_name not in self._mappings:
            return self._reject("remove", field_name, "field is not mapped")
        del self._mappings[field_name]
        logger.debug("Unmapped field %r", field_name)
        self._changed()
        return _APPLIED

    def get_field_mapping(self, field_name: str) -> str:
        """Return the field's expression, or "" when it has none.

        A fixed-value mapping also yields "", so this cannot tell a fixed
        mapping from a missing one; use ``resolve_field_mapping`` for that.
        """
        descriptor = self._mappings.get(field_name)
        if descriptor is None:
            return ""
        return descriptor.expression or ""

    def resolve_field_mapping(self, field_name: str) -> FieldMapping:
        """Return the field's mapping as an unmapped/expression/fixed variant."""
        return FieldMapping.from_descriptor(self._mappings.get(field_name))

    # ------------------------------------------------------------------
    # Form data
    # ------------------------------------------------------------------

    def update_form_data(self, field_name: str, value: Any) -> None:
        """Set the scratch value for ``field_name``. No validation."""
        self._form_data[field_name] = value

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def mappings_as_dict(self) -> dict[str, dict[str, Any]]:
        """Return every descriptor in its serialized form, keyed by field name."""
        return {name: desc.to_dict() for name, desc in self._mappings.items()}

    def format_mappings(self, indent: int | None = None) -> str:
        """Return the pretty-printed JSON rendering of all mappings.

        The result is memoized per (revision, indent); it is only recomputed
        after the mapping set changes. Values that are not JSON-serializable
        are rendered with ``str()``.

        Args:
            indent: Override for ``config.indent``.
        """
        if indent is None:
            indent = self._config.indent
        key = (self._revision, indent)
        cached = self._format_cache.get(key)
        if cached is not None:
            return cached

        text = json.dumps(
            self.mappings_as_dict(),
            indent=indent,
            ensure_ascii=self._config.ensure_ascii,
            default=str,
        )
        self._format_cache[key] = text
        return text

    @property
    def formatted_mappings(self) -> str:
        """Pretty-printed JSON of the whole mapping set, for display only."""
        return self.format_mappings()

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: MappingListener) -> Callable[[], None]:
        """Call ``listener(registry)`` after every applied mapping change.

        Returns:
            A callable that removes the listener. Calling it twice is harmless.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _changed(self) -> None:
        self._revision += 1
        for listener in list(self._listeners):
            listener(self)

    def _reject(self, op: str, field_name: Any, reason: str) -> MutationOutcome:
        logger.debug("Ignored %s for field %r: %s", op, field_name, reason)
        return MutationOutcome(applied=False, reason=reason)
