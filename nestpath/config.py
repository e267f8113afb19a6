"""Configuration defaults for nestpath operations."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PathConfig:
    """Defaults used when a call does not pass its own value."""

    # Separator between segments in dotted paths
    separator: str = "."

    # Maximum path length before DepthExceeded; None means unbounded
    max_depth: Optional[int] = None

    # Iterate mapping keys in sorted order instead of insertion order
    sort_keys: bool = False

    def effective_max_depth(self, override: Optional[int] = None) -> Optional[int]:
        """Return the depth limit for a call, validating it."""
        limit = self.max_depth if override is None else override
        if limit is not None and (
            isinstance(limit, bool) or not isinstance(limit, int) or limit < 0
        ):
            raise ValueError(f"max_depth must be a non-negative integer, got {limit!r}")
        return limit

    def effective_sort_keys(self, override: Optional[bool] = None) -> bool:
        """Return the key ordering policy for a call."""
        return self.sort_keys if override is None else bool(override)

    def effective_separator(self, override: Optional[str] = None) -> str:
        """Return the dotted-path separator for a call."""
        sep = self.separator if override is None else override
        if not sep:
            raise ValueError("Separator must be a non-empty string")
        return sep


# Global configuration instance
PATH_CONFIG = PathConfig()
