"""Leaf-level comparison of two nested values.

Used for partial updates: only the paths whose terminal values differ need to
be sent. Two leaves are equal when they are the same object, or have the same
type and compare equal, so ``1``, ``1.0`` and ``True`` are all distinct.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional

from nestpath.extract import iter_leaves
from nestpath.keys import to_dotted
from nestpath.logging import get_logger
from nestpath.types.base import PathSegments

logger = get_logger(__name__)

ChangeKind = Literal["added", "removed", "changed"]

__all__ = [
    "ChangeKind",
    "PathChange",
    "diff_paths",
    "changed_paths",
]


@dataclass(frozen=True)
class PathChange:
    """One leaf that differs between two values.

    Attributes:
        path: Path of the leaf.
        kind: ``added`` (only in new), ``removed`` (only in old) or ``changed``.
        old: Previous terminal value (None when added).
        new: Current terminal value (None when removed).
    """

    path: PathSegments
    kind: ChangeKind
    old: Any = None
    new: Any = None

    @property
    def dotted(self) -> str:
        """Path rendered with the configured separator."""
        return to_dotted(self.path)


def _same_leaf(left: Any, right: Any) -> bool:
    return left is right or (type(left) is type(right) and left == right)


def diff_paths(
    old: Any, new: Any, sort_keys: Optional[bool] = None
) -> List[PathChange]:
    """Compare the leaves of ``old`` and ``new``.

    Args:
        old: Previous value.
        new: Current value.
        sort_keys: Visit mapping keys sorted; defaults to ``PATH_CONFIG.sort_keys``.

    Returns:
        Changed and removed leaves in the extraction order of ``old``,
        followed by added leaves in the extraction order of ``new``.
    """
    old_leaves: Dict[PathSegments, Any] = dict(iter_leaves(old, sort_keys=sort_keys))
    new_leaves: Dict[PathSegments, Any] = dict(iter_leaves(new, sort_keys=sort_keys))

    changes: List[PathChange] = []
    for path, before in old_leaves.items():
        if path not in new_leaves:
            changes.append(PathChange(path, "removed", old=before))
            continue
        after = new_leaves[path]
        if not _same_leaf(before, after):
            changes.append(PathChange(path, "changed", old=before, new=after))
    for path, after in new_leaves.items():
        if path not in old_leaves:
            changes.append(PathChange(path, "added", new=after))

    logger.debug(
        "Compared %d old and %d new leaves: %d differences",
        len(old_leaves),
        len(new_leaves),
        len(changes),
    )
    return changes


def changed_paths(old: Any, new: Any) -> List[PathSegments]:
    """Return only the paths reported by :func:`diff_paths`."""
    return [change.path for change in diff_paths(old, new)]
