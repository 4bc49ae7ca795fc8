"""TreeConfig and RegistryConfig: display and formatting settings.

Both are frozen (immutable) dataclasses validated on construction, so a bad
setting fails where it is created rather than on first use.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["RegistryConfig", "TreeConfig"]


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Immutable settings for the tree builder's presentation helpers.

    Attributes:
        path_separator: Joins path segments in ``describe_path`` output.
        root_label:     Description returned for the empty (root) path.
    """

    path_separator: str = " → "
    root_label: str = "Root"

    def __post_init__(self) -> None:
        if not self.path_separator:
            msg = "path_separator must be a non-empty string"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Immutable settings for a MappingRegistry.

    Attributes:
        indent: Indentation of the ``formatted_mappings`` view (>= 0).
        ensure_ascii: When True, non-ASCII characters in the formatted view are
            escaped. Default False keeps them verbatim.
        format_cache_size: How many formatted revisions to keep memoized (>= 1).
    """

    indent: int = 2
    ensure_ascii: bool = False
    format_cache_size: int = 8

    def __post_init__(self) -> None:
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if self.format_cache_size < 1:
            msg = f"format_cache_size must be >= 1, got {self.format_cache_size}"
            raise ValueError(msg)
