"""Tests for document loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from nestpath.io import load_document, loads_document


def test_loads_json() -> None:
    assert loads_document('{"a": [1, 2]}', fmt="json") == {"a": [1, 2]}


def test_loads_yaml() -> None:
    assert loads_document("a:\n  - 1\n  - b\n") == {"a": [1, "b"]}


def test_yaml_accepts_json_text() -> None:
    assert loads_document('{"a": {"b": null}}') == {"a": {"b": None}}


def test_empty_yaml_is_none() -> None:
    assert loads_document("") is None


def test_invalid_json() -> None:
    with pytest.raises(ValueError, match="Invalid JSON"):
        loads_document("{", fmt="json")


def test_invalid_yaml() -> None:
    with pytest.raises(ValueError, match="Invalid YAML"):
        loads_document("a: [1, 2")


def test_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unsupported document format"):
        loads_document("", fmt="toml")


def test_load_json_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text(json.dumps({"user": {"name": "Alice"}}), encoding="utf-8")
    assert load_document(path) == {"user": {"name": "Alice"}}


def test_load_yaml_file_by_default(tmp_path: Path) -> None:
    path = tmp_path / "doc.conf"
    path.write_text("user:\n  name: Alice\n", encoding="utf-8")
    assert load_document(str(path)) == {"user": {"name": "Alice"}}


def test_json_suffix_is_case_insensitive(tmp_path: Path) -> None:
    path = tmp_path / "DOC.JSON"
    path.write_text("[1]", encoding="utf-8")
    assert load_document(path) == [1]


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_document(tmp_path / "missing.yaml")


def test_preserves_document_key_order(tmp_path: Path) -> None:
    path = tmp_path / "doc.yaml"
    path.write_text("z: 1\na: 2\nm: 3\n", encoding="utf-8")
    assert list(load_document(path)) == ["z", "a", "m"]
