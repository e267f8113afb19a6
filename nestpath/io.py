"""Loading nested documents from JSON and YAML.

Documents are parsed, their mapping keys are normalized to strings, and the
result is returned as a plain ``dict``/``list`` tree ready for path
extraction.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

import yaml

from nestpath.logging import get_logger
from nestpath.utils.yaml_utils import normalize_keys

logger = get_logger(__name__)

JSON_SUFFIXES = {".json"}

__all__ = [
    "loads_document",
    "load_document",
]


def loads_document(text: str, fmt: str = "yaml") -> Any:
    """Parse a document string.

    Args:
        text: Document contents.
        fmt: ``"json"`` or ``"yaml"``. YAML is a superset of JSON, so YAML
            also accepts JSON input.

    Returns:
        Parsed value with string keys. An empty YAML document yields ``None``.

    Raises:
        ValueError: On an unknown format, malformed input, or keys that
            collide after normalization.
    """
    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON document: {exc}") from exc
    elif fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML document: {exc}") from exc
    else:
        raise ValueError(f"Unsupported document format '{fmt}'. Use 'json' or 'yaml'.")
    return normalize_keys(data)


def load_document(path: Union[str, Path]) -> Any:
    """Read and parse a document file.

    Files ending in ``.json`` are parsed as JSON, everything else as YAML.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed.
    """
    file_path = Path(path)
    fmt = "json" if file_path.suffix.lower() in JSON_SUFFIXES else "yaml"
    text = file_path.read_text(encoding="utf-8")
    logger.debug("Loading %s document from %s", fmt, file_path)
    return loads_document(text, fmt)
