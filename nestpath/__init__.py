"""nestpath: leaf paths for nested JSON-like data.

nestpath walks arbitrarily nested mappings and sequences and reports the
access path (mapping keys and sequence indices) of every terminal value,
together with the operations consumers of such paths need.

Primary API:
    extract_paths() - Paths to every leaf, depth first, in document order
    resolve() - Value at a path
    to_dotted() / parse_dotted() - "user.hobbies.0" rendering and parsing
    flatten() / unflatten() - Nested value <-> dotted-key record
    set_value() / merge() - In-place assignment and deep merge
    diff_paths() - Leaves that differ between two values

Example:
    from nestpath import extract_paths, to_dotted

    data = {"user": {"name": "Alice", "hobbies": ["reading", "coding"]}}
    [to_dotted(p) for p in extract_paths(data)]
    # ['user.name', 'user.hobbies.0', 'user.hobbies.1']
"""

from __future__ import annotations

from nestpath import cli, logging
from nestpath._version import __version__
from nestpath.config import PATH_CONFIG, PathConfig
from nestpath.diff import PathChange, changed_paths, diff_paths
from nestpath.errors import (
    DepthExceeded,
    IndexOutOfBounds,
    NestPathError,
    PathNotFound,
    PathSyntaxError,
)
from nestpath.extract import count_leaves, extract_paths, iter_leaves, iter_paths
from nestpath.flatten import flatten, unflatten
from nestpath.io import load_document, loads_document
from nestpath.keys import parse_dotted, to_dotted
from nestpath.mutate import merge, merge_two, set_value
from nestpath.resolve import has_path, resolve, resolve_dotted, try_resolve
from nestpath.types.base import Indexed, Named, NestedKey, NestedValue, PathSegments

__all__ = [
    # Version
    "__version__",
    # Types
    "Named",
    "Indexed",
    "NestedKey",
    "NestedValue",
    "PathSegments",
    # Extraction (primary API)
    "extract_paths",
    "iter_paths",
    "iter_leaves",
    "count_leaves",
    # Resolution
    "resolve",
    "try_resolve",
    "has_path",
    "resolve_dotted",
    # Dotted keys
    "to_dotted",
    "parse_dotted",
    # Records
    "flatten",
    "unflatten",
    # Mutation
    "set_value",
    "merge",
    "merge_two",
    # Diff
    "PathChange",
    "diff_paths",
    "changed_paths",
    # Errors
    "NestPathError",
    "DepthExceeded",
    "PathNotFound",
    "IndexOutOfBounds",
    "PathSyntaxError",
    # Configuration
    "PathConfig",
    "PATH_CONFIG",
    # Documents
    "load_document",
    "loads_document",
    # Utilities
    "cli",
    "logging",
]
