"""Tests for the public package surface."""

import nestpath
from nestpath import Indexed, Named, extract_paths, to_dotted


def test_public_names_resolve():
    for name in nestpath.__all__:
        assert hasattr(nestpath, name), name


def test_version_string():
    assert isinstance(nestpath.__version__, str)
    assert nestpath.__version__.count(".") == 2


def test_documented_example():
    data = {"user": {"name": "Alice", "hobbies": ["reading", "coding"]}}
    assert [to_dotted(p) for p in extract_paths(data)] == [
        "user.name",
        "user.hobbies.0",
        "user.hobbies.1",
    ]
    assert extract_paths({"a": {"b": 1}, "c": [2]}) == [
        (Named("a"), Named("b")),
        (Named("c"), Indexed(0)),
    ]
