"""Shared typing constructs for nestpath.

Defines the path segment variants, the path and value aliases, and the
predicates that decide whether a value is a container or a terminal.
"""

from nestpath.types.base import (
    Indexed,
    Named,
    NestedKey,
    NestedValue,
    PathSegments,
    is_container,
    is_mapping,
    is_sequence,
    is_terminal,
)

__all__ = [
    # Segments
    "Named",
    "Indexed",
    # Aliases
    "NestedKey",
    "NestedValue",
    "PathSegments",
    # Predicates
    "is_mapping",
    "is_sequence",
    "is_container",
    "is_terminal",
]
