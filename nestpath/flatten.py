"""Conversion between nested values and flat dotted-key records.

``flatten`` is what a table or form consumer needs: one column or field per
leaf, keyed by its dotted path. ``unflatten`` rebuilds the nested value; it
reads all-digit segments as list indices, so mapping keys made only of digits,
tuples, and empty containers do not survive a round trip.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from nestpath.config import PATH_CONFIG
from nestpath.extract import iter_leaves
from nestpath.keys import parse_dotted, to_dotted
from nestpath.logging import get_logger
from nestpath.types.base import Indexed, Named, PathSegments

logger = get_logger(__name__)

__all__ = [
    "flatten",
    "unflatten",
]


class _Leaf:
    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value


def flatten(
    value: Any,
    sep: Optional[str] = None,
    max_depth: Optional[int] = None,
    sort_keys: Optional[bool] = None,
) -> Dict[str, Any]:
    """Map each leaf's dotted path to the leaf value.

    Args:
        value: Root of the nested structure.
        sep: Separator; defaults to ``PATH_CONFIG.separator``.
        max_depth: Longest allowed path; defaults to ``PATH_CONFIG.max_depth``.
        sort_keys: Visit mapping keys sorted; defaults to ``PATH_CONFIG.sort_keys``.

    Returns:
        Dict in extraction order. A terminal root yields ``{"": value}``.

    Raises:
        ValueError: If two different paths render to the same dotted key
            (for example ``{"a.b": 1, "a": {"b": 2}}``).
    """
    record: Dict[str, Any] = {}
    for path, leaf in iter_leaves(value, max_depth=max_depth, sort_keys=sort_keys):
        key = to_dotted(path, sep)
        if key in record:
            raise ValueError(f"Dotted key '{key}' is produced by more than one path")
        record[key] = leaf
    logger.debug("Flattened value into %d columns", len(record))
    return record


def _insert(
    tree: Dict[Any, Any], path: PathSegments, leaf: Any, dotted: str
) -> None:
    node = tree
    for segment in path[:-1]:
        child = node.setdefault(segment, {})
        if isinstance(child, _Leaf):
            raise ValueError(f"Entry '{dotted}' descends through a leaf value")
        node = child
    last = path[-1]
    if last in node:
        raise ValueError(f"Entry '{dotted}' conflicts with another entry")
    node[last] = _Leaf(leaf)


def _build(node: Any, dotted: str, sep: str) -> Any:
    if isinstance(node, _Leaf):
        return node.value

    kinds = {type(segment) for segment in node}
    if kinds == {Named}:
        return {
            segment.name: _build(child, _child_label(dotted, segment, sep), sep)
            for segment, child in node.items()
        }
    if kinds == {Indexed}:
        count = len(node)
        if {segment.index for segment in node} != set(range(count)):
            raise ValueError(
                f"List at '{dotted or '<root>'}' has non-contiguous indices"
            )
        return [
            _build(node[Indexed(i)], _child_label(dotted, Indexed(i), sep), sep)
            for i in range(count)
        ]
    raise ValueError(
        f"Entries under '{dotted or '<root>'}' mix list indices and mapping keys"
    )


def _child_label(parent: str, segment: Any, sep: str) -> str:
    return f"{parent}{sep}{segment}" if parent else str(segment)


def unflatten(record: Mapping[str, Any], sep: Optional[str] = None) -> Any:
    """Rebuild a nested value from a dotted-key record.

    Args:
        record: Mapping of dotted path to leaf value.
        sep: Separator; defaults to ``PATH_CONFIG.separator``.

    Returns:
        The nested value. An empty record yields ``{}``; ``{"": x}`` yields ``x``.

    Raises:
        ValueError: On conflicting entries, mixed keys/indices under one
            parent, or list indices with gaps.
        PathSyntaxError: If a key has an empty segment.
    """
    if "" in record:
        if len(record) != 1:
            raise ValueError("Root entry '' cannot be combined with other entries")
        return record[""]

    separator = PATH_CONFIG.effective_separator(sep)
    tree: Dict[Any, Any] = {}
    for dotted, leaf in record.items():
        _insert(tree, parse_dotted(dotted, separator), leaf, dotted)
    if not tree:
        return {}
    return _build(tree, "", separator)
