"""Key normalization for YAML-parsed documents."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Convert every key of one mapping level to a string.

    YAML 1.1 reads keys such as ``yes``, ``on`` or ``true`` as Python booleans
    and bare numbers as ints. Path segments need string keys, so booleans
    become ``"True"``/``"False"`` and everything else goes through ``str``.

    Args:
        data: Mapping fresh from ``yaml.safe_load``.

    Returns:
        New dict with string keys, insertion order preserved.

    Raises:
        ValueError: If two keys collapse into the same string (``1`` and ``"1"``).

    Examples:
        >>> normalize_yaml_dict_keys({True: "a", 2: "b", "c": "c"})
        {'True': 'a', '2': 'b', 'c': 'c'}
    """
    normalized: Dict[str, V] = {}
    for key, value in data.items():
        text = key if isinstance(key, str) else str(key)
        if text in normalized:
            raise ValueError(f"Duplicate key after normalization: '{text}'")
        normalized[text] = value
    return normalized


def normalize_keys(value: Any) -> Any:
    """Recursively apply :func:`normalize_yaml_dict_keys` to a whole document.

    Lists are rebuilt element by element; terminals are returned unchanged.
    """
    if isinstance(value, dict):
        return {
            key: normalize_keys(child)
            for key, child in normalize_yaml_dict_keys(value).items()
        }
    if isinstance(value, list):
        return [normalize_keys(child) for child in value]
    return value
