"""Dotted-string rendering of paths.

``(Named("user"), Named("hobbies"), Indexed(0))`` renders as
``"user.hobbies.0"``. Parsing is the inverse for the common case: a segment
made only of ASCII digits becomes an :class:`Indexed`, anything else a
:class:`Named`. Names that contain the separator or consist only of digits do
not survive the round trip; use :func:`nestpath.resolve.resolve_dotted` to
interpret digits against the actual container instead.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from nestpath.config import PATH_CONFIG
from nestpath.errors import PathSyntaxError
from nestpath.types.base import Indexed, Named, NestedKey, PathSegments

_INDEX_PATTERN = re.compile(r"[0-9]+")

__all__ = [
    "to_dotted",
    "parse_dotted",
    "segment_from_token",
    "is_index_token",
]


def to_dotted(path: Iterable[NestedKey], sep: Optional[str] = None) -> str:
    """Join path segments into a dotted string.

    Args:
        path: Segments to render.
        sep: Separator; defaults to ``PATH_CONFIG.separator``.

    Returns:
        Dotted string; the empty path renders as ``""``.
    """
    separator = PATH_CONFIG.effective_separator(sep)
    return separator.join(str(segment) for segment in path)


def is_index_token(token: str) -> bool:
    """Return True if ``token`` is made only of ASCII digits."""
    return _INDEX_PATTERN.fullmatch(token) is not None


def segment_from_token(token: str) -> NestedKey:
    """Convert one dotted-path token into a segment."""
    if is_index_token(token):
        return Indexed(int(token))
    return Named(token)


def parse_dotted(text: str, sep: Optional[str] = None) -> PathSegments:
    """Split a dotted string into path segments.

    Args:
        text: Dotted path such as ``"user.hobbies.0"``.
        sep: Separator; defaults to ``PATH_CONFIG.separator``.

    Returns:
        Tuple of segments; ``""`` parses to the empty path.

    Raises:
        PathSyntaxError: If any segment is empty.
    """
    separator = PATH_CONFIG.effective_separator(sep)
    if text == "":
        return ()
    tokens = text.split(separator)
    for position, token in enumerate(tokens):
        if token == "":
            raise PathSyntaxError(text, f"empty segment at position {position}")
    return tuple(segment_from_token(token) for token in tokens)
