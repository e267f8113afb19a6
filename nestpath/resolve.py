"""Resolve paths back into the values they address.

Provides segment-by-segment lookup for :class:`PathSegments` and for dotted
strings. Every path produced by :func:`nestpath.extract.extract_paths` for a
root resolves against that root to a terminal value.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from nestpath.config import PATH_CONFIG
from nestpath.errors import (
    IndexOutOfBounds,
    NestPathError,
    PathNotFound,
    PathSyntaxError,
)
from nestpath.keys import is_index_token
from nestpath.types.base import (
    Indexed,
    Named,
    NestedKey,
    PathSegments,
    is_mapping,
    is_sequence,
)

__all__ = [
    "resolve",
    "try_resolve",
    "has_path",
    "resolve_dotted",
    "step",
]


def _kind(value: Any) -> str:
    return type(value).__name__


def step(current: Any, segment: NestedKey, prefix: PathSegments = ()) -> Any:
    """Apply one segment to ``current``.

    Args:
        current: Value to descend into.
        segment: Segment to apply.
        prefix: Path already walked, used in error messages.

    Returns:
        The child value.

    Raises:
        PathNotFound: Key missing, or the container kind does not match.
        IndexOutOfBounds: Index past the end of the sequence.
        TypeError: If ``segment`` is not a Named/Indexed segment.
    """
    reached = prefix + (segment,)
    if isinstance(segment, Named):
        if not is_mapping(current):
            raise PathNotFound(reached, f"expected a mapping, found {_kind(current)}")
        if segment.name not in current:
            raise PathNotFound(reached)
        return current[segment.name]
    if isinstance(segment, Indexed):
        if not is_sequence(current):
            raise PathNotFound(reached, f"expected a sequence, found {_kind(current)}")
        if segment.index >= len(current):
            raise IndexOutOfBounds(reached, len(current))
        return current[segment.index]
    raise TypeError(f"Unsupported path segment: {segment!r}")


def resolve(root: Any, path: Iterable[NestedKey]) -> Any:
    """Return the value at ``path`` inside ``root``.

    The empty path resolves to ``root`` itself.

    Raises:
        PathNotFound: If a key is missing or a segment meets the wrong container.
        IndexOutOfBounds: If an index is past the end of its sequence.
    """
    current = root
    walked: PathSegments = ()
    for segment in path:
        current = step(current, segment, walked)
        walked = walked + (segment,)
    return current


def try_resolve(root: Any, path: Iterable[NestedKey], default: Any = None) -> Any:
    """Like :func:`resolve`, but return ``default`` when the path is missing."""
    try:
        return resolve(root, path)
    except NestPathError:
        return default


def has_path(root: Any, path: Iterable[NestedKey]) -> bool:
    """Return True if ``path`` resolves inside ``root``."""
    try:
        resolve(root, path)
    except NestPathError:
        return False
    return True


def resolve_dotted(root: Any, dotted: str, sep: Optional[str] = None) -> Any:
    """Resolve a dotted string such as ``"user.hobbies.0"``.

    Each token is read according to the container it meets: a mapping looks it
    up as a key (so ``"2024"`` can be a mapping key), a sequence requires a
    decimal index.

    Args:
        root: Value to walk.
        dotted: Dotted path; ``""`` resolves to ``root``.
        sep: Separator; defaults to ``PATH_CONFIG.separator``.

    Raises:
        PathSyntaxError: If the string has an empty segment.
        PathNotFound: If a token cannot be applied.
        IndexOutOfBounds: If an index is past the end of its sequence.
    """
    separator = PATH_CONFIG.effective_separator(sep)
    if dotted == "":
        return root

    current = root
    walked: PathSegments = ()
    for position, token in enumerate(dotted.split(separator)):
        if token == "":
            raise PathSyntaxError(dotted, f"empty segment at position {position}")
        if is_sequence(current):
            if not is_index_token(token):
                raise PathNotFound(
                    walked + (Named(token),), "sequence segment must be an index"
                )
            segment: NestedKey = Indexed(int(token))
        else:
            segment = Named(token)
        current = step(current, segment, walked)
        walked = walked + (segment,)
    return current
