"""Path segment types and container predicates."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Tuple, Union

#: Any JSON-like value: a mapping, a sequence, or a terminal.
NestedValue = Any


@dataclass(frozen=True)
class Named:
    """Key into a mapping from string to value.

    Attributes:
        name: Mapping key.
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(
                f"Named key must be a string, got {type(self.name).__name__}"
            )

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Indexed:
    """Index into an ordered sequence.

    Attributes:
        index: Non-negative position in the sequence.
    """

    index: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a valid position
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError(
                f"Indexed key must be an integer, got {type(self.index).__name__}"
            )
        if self.index < 0:
            raise ValueError(f"Indexed key must be non-negative, got {self.index}")

    def __str__(self) -> str:
        return str(self.index)


#: One step of a path.
NestedKey = Union[Named, Indexed]

#: Full route from the root to one terminal value; segment 0 applies first.
PathSegments = Tuple[NestedKey, ...]


def is_mapping(value: Any) -> bool:
    """Return True if ``value`` is descended into by key."""
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """Return True if ``value`` is descended into by index.

    Only lists and tuples count; strings and bytes are terminals.
    """
    return isinstance(value, (list, tuple))


def is_container(value: Any) -> bool:
    """Return True for mappings and sequences."""
    return is_mapping(value) or is_sequence(value)


def is_terminal(value: Any) -> bool:
    """Return True for anything that is neither a mapping nor a sequence."""
    return not is_container(value)
