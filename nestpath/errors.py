"""Exceptions raised by nestpath operations.

Each error also derives from the closest built-in exception, so callers that
only know about ``KeyError`` or ``IndexError`` still catch them.
"""

from __future__ import annotations

from typing import Optional

from nestpath.types.base import PathSegments


def _render(path: PathSegments) -> str:
    if not path:
        return "<root>"
    return ".".join(str(segment) for segment in path)


class NestPathError(Exception):
    """Base class for all nestpath errors."""


class DepthExceeded(NestPathError, RecursionError):
    """Nesting goes deeper than the configured maximum.

    Attributes:
        path: Partial path reached when the limit was hit.
        max_depth: The limit that was exceeded.
    """

    def __init__(self, path: PathSegments, max_depth: int) -> None:
        self.path = path
        self.max_depth = max_depth
        super().__init__(
            f"Maximum depth {max_depth} exceeded at '{_render(path)}'"
        )


class PathNotFound(NestPathError, KeyError):
    """A path segment does not exist in the value being walked.

    Attributes:
        path: Path prefix up to and including the failing segment.
    """

    def __init__(self, path: PathSegments, reason: Optional[str] = None) -> None:
        self.path = path
        message = f"Path '{_render(path)}' not found"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class IndexOutOfBounds(NestPathError, IndexError):
    """A sequence index is past the end of the sequence.

    Attributes:
        path: Path prefix up to and including the failing index.
        length: Length of the sequence that was indexed.
    """

    def __init__(self, path: PathSegments, length: int) -> None:
        self.path = path
        self.length = length
        super().__init__(
            f"Index out of bounds at '{_render(path)}' (length {length})"
        )


class PathSyntaxError(NestPathError, ValueError):
    """A dotted path string cannot be parsed.

    Attributes:
        text: The offending input.
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        super().__init__(f"Invalid path '{text}': {reason}")
