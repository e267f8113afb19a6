"""In-place assignment and deep merging of nested values."""

from __future__ import annotations

import copy
from collections.abc import MutableMapping, MutableSequence
from typing import Any, Iterable, Optional, Tuple

from nestpath.errors import IndexOutOfBounds, PathNotFound
from nestpath.logging import get_logger
from nestpath.resolve import step
from nestpath.types.base import (
    Indexed,
    Named,
    NestedKey,
    PathSegments,
    is_mapping,
    is_sequence,
)

logger = get_logger(__name__)

__all__ = [
    "set_value",
    "merge",
    "merge_two",
]


def set_value(
    root: Any,
    path: Iterable[NestedKey],
    value: Any,
    create_missing: bool = True,
) -> None:
    """Assign ``value`` at ``path`` inside ``root``, in place.

    The final key of a mapping is inserted or overwritten. Intermediate
    mappings are created for missing keys when ``create_missing`` is set, and
    removed again if the assignment then fails. Lists are never extended.

    Args:
        root: Mutable nested structure.
        path: Non-empty path to the slot to assign.
        value: Value to store.
        create_missing: Create intermediate dicts for missing mapping keys.

    Raises:
        ValueError: If ``path`` is empty.
        PathNotFound: If a key is missing (and not created) or a segment meets
            the wrong kind of container.
        IndexOutOfBounds: If an index is past the end of its list.
        TypeError: If the container to modify is immutable.
    """
    segments: PathSegments = tuple(path)
    if not segments:
        raise ValueError("Cannot assign to the empty path; replace the root instead")

    # First intermediate mapping created by this call; removed again on failure
    created: Optional[Tuple[Any, str]] = None
    try:
        parent = root
        walked: PathSegments = ()
        for segment in segments[:-1]:
            if (
                create_missing
                and isinstance(segment, Named)
                and is_mapping(parent)
                and segment.name not in parent
            ):
                _require_mutable(parent, MutableMapping, walked)
                parent[segment.name] = {}
                if created is None:
                    created = (parent, segment.name)
                logger.debug("Created intermediate mapping at %r", walked + (segment,))
            parent = step(parent, segment, walked)
            walked = walked + (segment,)
        _assign(parent, segments[-1], walked, value)
    except Exception:
        if created is not None:
            owner, key = created
            del owner[key]
        raise


def _assign(parent: Any, last: NestedKey, walked: PathSegments, value: Any) -> None:
    reached = walked + (last,)
    if isinstance(last, Named):
        if not is_mapping(parent):
            raise PathNotFound(
                reached, f"expected a mapping, found {type(parent).__name__}"
            )
        _require_mutable(parent, MutableMapping, walked)
        parent[last.name] = value
    elif isinstance(last, Indexed):
        if not is_sequence(parent):
            raise PathNotFound(
                reached, f"expected a sequence, found {type(parent).__name__}"
            )
        if last.index >= len(parent):
            raise IndexOutOfBounds(reached, len(parent))
        _require_mutable(parent, MutableSequence, walked)
        parent[last.index] = value
    else:
        raise TypeError(f"Unsupported path segment: {last!r}")


def _require_mutable(container: Any, kind: type, where: PathSegments) -> None:
    if not isinstance(container, kind):
        raise TypeError(
            f"Cannot modify immutable {type(container).__name__} at {where!r}"
        )


def _merge_pair(base: Any, incoming: Any) -> Any:
    if is_mapping(base) and is_mapping(incoming):
        merged = dict(base)
        for key, value in incoming.items():
            if key in merged:
                merged[key] = _merge_pair(merged[key], value)
            else:
                merged[key] = copy.deepcopy(value)
        return merged
    return copy.deepcopy(incoming)


def merge(values: Iterable[Any]) -> Any:
    """Deep-merge values from left to right.

    Mappings merge key by key, recursively. For lists and terminals the later
    value replaces the earlier one. Inputs are not modified.

    Args:
        values: Values to merge, lowest precedence first.

    Returns:
        Merged value; ``None`` for no input, a deep copy for a single input.
    """
    items = list(values)
    if not items:
        return None
    result = copy.deepcopy(items[0])
    for item in items[1:]:
        result = _merge_pair(result, item)
    return result


def merge_two(base: Any, override: Any) -> Any:
    """Deep-merge ``override`` onto ``base``."""
    return merge([base, override])
