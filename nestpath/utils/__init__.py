"""Small helpers that do not depend on the path model."""

from nestpath.utils.yaml_utils import normalize_keys, normalize_yaml_dict_keys

__all__ = [
    "normalize_keys",
    "normalize_yaml_dict_keys",
]
