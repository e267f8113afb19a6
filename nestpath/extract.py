"""Leaf path extraction for nested mapping/sequence values.

Walks a JSON-like value depth first and produces one path per terminal value.
Mappings contribute :class:`Named` segments in iteration order (insertion
order for ``dict``, sorted order when ``sort_keys`` is set); sequences
contribute :class:`Indexed` segments in ascending order. Empty containers
contribute nothing, and a terminal root yields the single empty path.

The walk assumes a tree. Cyclic input never terminates on its own: it either
hits ``max_depth`` (raising :class:`DepthExceeded`) or the interpreter's
recursion limit. Nesting depth is likewise bounded by the recursion limit
when no ``max_depth`` is given.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple

from nestpath.config import PATH_CONFIG
from nestpath.errors import DepthExceeded
from nestpath.logging import get_logger
from nestpath.types.base import (
    Indexed,
    Named,
    PathSegments,
    is_mapping,
    is_sequence,
)

logger = get_logger(__name__)


def _walk(
    value: Any,
    prefix: PathSegments,
    max_depth: Optional[int],
    sort_keys: bool,
) -> Iterator[Tuple[PathSegments, Any]]:
    if is_mapping(value):
        if not value:
            return
        if max_depth is not None and len(prefix) >= max_depth:
            raise DepthExceeded(prefix, max_depth)
        for key in value:
            if not isinstance(key, str):
                raise TypeError(
                    f"Mapping keys must be strings, got {type(key).__name__} "
                    f"key {key!r} under {prefix!r}"
                )
        items = value.items()
        if sort_keys:
            items = sorted(items, key=lambda item: item[0])
        for key, child in items:
            yield from _walk(child, prefix + (Named(key),), max_depth, sort_keys)
    elif is_sequence(value):
        if not value:
            return
        if max_depth is not None and len(prefix) >= max_depth:
            raise DepthExceeded(prefix, max_depth)
        for index, child in enumerate(value):
            yield from _walk(child, prefix + (Indexed(index),), max_depth, sort_keys)
    else:
        yield prefix, value


def iter_leaves(
    value: Any,
    max_depth: Optional[int] = None,
    sort_keys: Optional[bool] = None,
) -> Iterator[Tuple[PathSegments, Any]]:
    """Yield ``(path, terminal)`` pairs in extraction order.

    Args:
        value: Root of the nested structure.
        max_depth: Longest allowed path; defaults to ``PATH_CONFIG.max_depth``.
        sort_keys: Visit mapping keys sorted; defaults to ``PATH_CONFIG.sort_keys``.

    Yields:
        Each path together with the terminal value it reaches.

    Raises:
        DepthExceeded: If a non-empty container sits at ``max_depth``.
        TypeError: If a mapping has a non-string key.
        ValueError: If ``max_depth`` is negative or not an integer.
    """
    limit = PATH_CONFIG.effective_max_depth(max_depth)
    ordered = PATH_CONFIG.effective_sort_keys(sort_keys)
    return _walk(value, (), limit, ordered)


def iter_paths(
    value: Any,
    max_depth: Optional[int] = None,
    sort_keys: Optional[bool] = None,
) -> Iterator[PathSegments]:
    """Yield the path to every terminal value, lazily.

    Same ordering and errors as :func:`iter_leaves`; an invalid ``max_depth``
    raises at call time.
    """
    leaves = iter_leaves(value, max_depth=max_depth, sort_keys=sort_keys)
    return (path for path, _ in leaves)


def extract_paths(
    value: Any,
    max_depth: Optional[int] = None,
    sort_keys: Optional[bool] = None,
) -> List[PathSegments]:
    """Return the path to every terminal value reachable from ``value``.

    Example:
        >>> extract_paths({"a": {"b": 1}, "c": [2]})
        [(Named(name='a'), Named(name='b')), (Named(name='c'), Indexed(index=0))]

    Args:
        value: Root of the nested structure.
        max_depth: Longest allowed path; defaults to ``PATH_CONFIG.max_depth``.
        sort_keys: Visit mapping keys sorted; defaults to ``PATH_CONFIG.sort_keys``.

    Returns:
        A new list of paths, one per terminal, in depth-first order.

    Raises:
        DepthExceeded: If a non-empty container sits at ``max_depth``.
        TypeError: If a mapping has a non-string key.
    """
    paths = list(iter_paths(value, max_depth=max_depth, sort_keys=sort_keys))
    logger.debug("Extracted %d leaf paths", len(paths))
    return paths


def count_leaves(value: Any) -> int:
    """Return the number of terminal values reachable from ``value``."""
    return sum(1 for _ in iter_leaves(value, max_depth=None, sort_keys=False))
