"""Shared fixtures for nestpath tests."""

from __future__ import annotations

import logging
from typing import Any, Dict

import pytest

from nestpath.logging import set_global_log_level


@pytest.fixture
def user_doc() -> Dict[str, Any]:
    """The canonical user/hobbies document."""
    return {"user": {"name": "Alice", "hobbies": ["reading", "coding"]}}


@pytest.fixture
def mixed_doc() -> Dict[str, Any]:
    """Mappings and lists mixed at several depths, with every leaf kind."""
    return {
        "name": "test",
        "age": 25,
        "active": True,
        "scores": [100, 85.5, 92],
        "profile": {
            "email": "test@example.com",
            "settings": {"theme": "dark", "tags": []},
            "history": [{"year": 2023, "events": ["a", "b"]}, {}],
        },
        "nullable": None,
        "empty": {},
    }


@pytest.fixture(autouse=True)
def _restore_log_level():
    """Tests that change the package log level must not leak it."""
    yield
    set_global_log_level(logging.INFO)
