"""Tests for the nestpath command line."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

import pytest

from nestpath import cli


def output_lines(output: str) -> List[str]:
    """Drop log records that share stdout with command output."""
    return [line for line in output.splitlines() if " - nestpath" not in line]


@pytest.fixture
def user_file(tmp_path: Path, user_doc) -> Path:
    path = tmp_path / "user.json"
    path.write_text(json.dumps(user_doc), encoding="utf-8")
    return path


@pytest.fixture
def yaml_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        "server:\n  port: 8080\n  hosts:\n    - a.example\n    - b.example\n"
        "name: demo\n",
        encoding="utf-8",
    )
    return path


def test_no_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 0
    assert "usage: nestpath" in capsys.readouterr().out


def test_paths_command(user_file: Path, capsys) -> None:
    cli.main(["paths", str(user_file)])
    assert output_lines(capsys.readouterr().out) == [
        "user.name",
        "user.hobbies.0",
        "user.hobbies.1",
    ]


def test_paths_yaml_sorted_with_separator(yaml_file: Path, capsys) -> None:
    cli.main(["paths", str(yaml_file), "--sort-keys", "--sep", "/"])
    assert output_lines(capsys.readouterr().out) == [
        "name",
        "server/hosts/0",
        "server/hosts/1",
        "server/port",
    ]


def test_paths_scalar_root(tmp_path: Path, capsys) -> None:
    path = tmp_path / "scalar.json"
    path.write_text('"hello"', encoding="utf-8")
    cli.main(["paths", str(path)])
    assert output_lines(capsys.readouterr().out) == [cli.ROOT_LABEL]


def test_paths_max_depth_exceeded(user_file: Path, caplog) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["paths", str(user_file), "--max-depth", "1"])
    assert exc.value.code == 1
    assert "Maximum depth 1 exceeded at 'user'" in caplog.text


def test_paths_negative_max_depth(user_file: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["paths", str(user_file), "--max-depth", "-2"])
    assert exc.value.code == 2


def test_get_command(user_file: Path, capsys) -> None:
    cli.main(["get", str(user_file), "user.hobbies.1"])
    assert output_lines(capsys.readouterr().out) == ['"coding"']


def test_get_container_prints_json(user_file: Path, capsys) -> None:
    cli.main(["get", str(user_file), "user.hobbies"])
    assert json.loads(output_lines(capsys.readouterr().out)[0]) == [
        "reading",
        "coding",
    ]


def test_get_missing_path(user_file: Path, caplog) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["get", str(user_file), "user.email"])
    assert exc.value.code == 1
    assert "Path 'user.email' not found" in caplog.text


def test_missing_file(tmp_path: Path, caplog) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["paths", str(tmp_path / "nope.json")])
    assert exc.value.code == 1
    assert "File not found" in caplog.text


def test_unparsable_file(tmp_path: Path, caplog) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        cli.main(["flatten", str(path)])
    assert exc.value.code == 1
    assert "Failed to parse" in caplog.text


def test_flatten_table(user_file: Path, capsys) -> None:
    cli.main(["flatten", str(user_file)])
    lines = output_lines(capsys.readouterr().out)
    assert lines[0].split(" | ")[0].strip() == "path"
    assert set(lines[1]) <= {"-", "+"}
    assert lines[2].startswith("user.name")
    assert lines[2].endswith('"Alice"')
    assert len(lines) == 5


def test_flatten_json(yaml_file: Path, capsys) -> None:
    cli.main(["flatten", str(yaml_file), "--json"])
    data = json.loads("\n".join(output_lines(capsys.readouterr().out)))
    assert data == {
        "server.port": 8080,
        "server.hosts.0": "a.example",
        "server.hosts.1": "b.example",
        "name": "demo",
    }


def test_diff_no_changes(user_file: Path, capsys) -> None:
    cli.main(["diff", str(user_file), str(user_file)])
    assert output_lines(capsys.readouterr().out) == []


def test_diff_reports_changes(tmp_path: Path, user_file: Path, capsys) -> None:
    new = tmp_path / "new.yaml"
    new.write_text(
        "user:\n  name: Bob\n  hobbies:\n    - reading\n  email: bob@example.com\n",
        encoding="utf-8",
    )
    with pytest.raises(SystemExit) as exc:
        cli.main(["diff", str(user_file), str(new)])
    assert exc.value.code == 1
    assert output_lines(capsys.readouterr().out) == [
        '~ user.name: "Alice" -> "Bob"',
        '- user.hobbies.1: "coding"',
        '+ user.email: "bob@example.com"',
    ]


def test_verbose_enables_debug(user_file: Path, caplog) -> None:
    with caplog.at_level(logging.DEBUG):
        cli.main(["-v", "paths", str(user_file)])
    assert logging.getLogger("nestpath").level == logging.DEBUG
    assert "Extracted 3 leaf paths" in caplog.text


def test_quiet_sets_warning(user_file: Path) -> None:
    cli.main(["--quiet", "paths", str(user_file)])
    assert logging.getLogger("nestpath").level == logging.WARNING


def test_format_table_clips_and_pads() -> None:
    table = cli._format_table(["a", "b"], [["x" * 20, "y"]], max_col_width=10)
    lines = table.splitlines()
    assert lines[2].startswith("xxxxxxx... | y")
    assert cli._format_table(["a"], []) == ""


def test_environment_level_used_without_flags(
    user_file: Path, monkeypatch
) -> None:
    monkeypatch.setenv("NESTPATH_LOG_LEVEL", "warning")
    cli.main(["paths", str(user_file)])
    assert logging.getLogger("nestpath").level == logging.WARNING


def test_verbose_overrides_environment_level(user_file: Path, monkeypatch) -> None:
    monkeypatch.setenv("NESTPATH_LOG_LEVEL", "error")
    cli.main(["-v", "paths", str(user_file)])
    assert logging.getLogger("nestpath").level == logging.DEBUG


def test_unreadable_path_exits_cleanly(tmp_path: Path, caplog) -> None:
    folder = tmp_path / "folder.yaml"
    folder.mkdir()
    with pytest.raises(SystemExit) as exc:
        cli.main(["paths", str(folder)])
    assert exc.value.code == 1
    assert "Cannot read" in caplog.text


def test_diff_output_has_no_info_records(
    tmp_path: Path, user_file: Path, caplog
) -> None:
    new = tmp_path / "new.json"
    new.write_text('{"user": {"name": "Bob"}}', encoding="utf-8")
    with pytest.raises(SystemExit):
        cli.main(["diff", str(user_file), str(new)])
    assert not [r for r in caplog.records if r.levelno >= logging.INFO]
