import json
from pathlib import Path

import pytest

from ai_rules.errors import InvalidJsonFormatError
from ai_rules.utils import (
    backup_file,
    compact_home_path,
    dump_json,
    files_recursive,
    read_json_strict,
    same_text,
)


# --- read_json_strict ---


def test_read_json_strict_missing(tmp_path: Path) -> None:
    assert read_json_strict(tmp_path / "missing.json") is None


def test_read_json_strict_valid(tmp_path: Path) -> None:
    path = tmp_path / "valid.json"
    path.write_text(json.dumps({"key": "value"}), encoding="utf-8")

    assert read_json_strict(path) == {"key": "value"}


def test_read_json_strict_invalid(tmp_path: Path) -> None:
    path = tmp_path / "invalid.json"
    path.write_text("{bad json", encoding="utf-8")

    with pytest.raises(InvalidJsonFormatError) as excinfo:
        read_json_strict(path)
    assert excinfo.value.path == path


# --- dump_json / same_text ---


def test_dump_json_is_indented_with_trailing_newline() -> None:
    assert dump_json({"b": 1, "a": [1]}) == '{\n  "b": 1,\n  "a": [\n    1\n  ]\n}\n'


def test_same_text(tmp_path: Path) -> None:
    path = tmp_path / "file.md"
    path.write_text("body", encoding="utf-8")

    assert same_text(path, "body") is True
    assert same_text(path, "other") is False
    assert same_text(tmp_path / "missing.md", "body") is False


# --- files_recursive ---


def test_files_recursive_skips_hidden_by_default(tmp_path: Path) -> None:
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "two.md").write_text("2", encoding="utf-8")
    (tmp_path / "a.md").write_text("1", encoding="utf-8")
    (tmp_path / ".hidden").mkdir()
    (tmp_path / ".hidden" / "three.md").write_text("3", encoding="utf-8")

    assert files_recursive(tmp_path) == [Path("a.md"), Path("b/two.md")]
    assert Path(".hidden/three.md") in files_recursive(tmp_path, include_hidden=True)


def test_files_recursive_missing_root(tmp_path: Path) -> None:
    assert files_recursive(tmp_path / "missing") == []


# --- backup_file ---


def test_backup_file_mirrors_relative_path(tmp_path: Path) -> None:
    source = tmp_path / ".cursor" / "rules" / "core.mdc"
    source.parent.mkdir(parents=True)
    source.write_text("content", encoding="utf-8")
    backups = tmp_path / ".claude" / "backups"

    backup = backup_file(source, tmp_path, backups)

    assert backup.parent == backups / ".cursor" / "rules"
    assert backup.name.startswith("core.mdc.")
    assert backup.read_text(encoding="utf-8") == "content"
    assert source.exists()


# --- compact_home_path ---


def test_compact_home_path(tmp_path: Path) -> None:
    assert compact_home_path(tmp_path) == "~"
    assert compact_home_path(tmp_path / "project") == "~/project"
    assert compact_home_path("/elsewhere/project") == "/elsewhere/project"
