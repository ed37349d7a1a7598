import json
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ai_rules.errors import InvalidJsonFormatError


def now_stamp() -> str:
    return datetime.now().strftime("%Y%m%d-%H%M%S")


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_json_strict(path: Path) -> Any | None:
    if not path.exists():
        return None
    try:
        return read_json(path)
    except json.JSONDecodeError as exc:
        raise InvalidJsonFormatError(path, str(exc)) from exc


def dump_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, sort_keys=False) + "\n"


def write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_json(payload), encoding="utf-8")


def write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def same_text(path: Path, content: str) -> bool:
    if not path.is_file():
        return False
    return path.read_text(encoding="utf-8") == content


def backup_file(path: Path, root: Path, backup_dir: Path) -> Path:
    relative = path.resolve().relative_to(root.resolve())
    backup_path = backup_dir / f"{relative}.{now_stamp()}"
    backup_path.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(path, backup_path)
    return backup_path


def files_recursive(root: Path, include_hidden: bool = False) -> list[Path]:
    """Return files under root as relative paths, in sorted traversal order."""
    if not root.is_dir():
        return []
    files: list[Path] = []
    for child in sorted(root.iterdir()):
        if child.name.startswith(".") and not include_hidden:
            continue
        if child.is_dir():
            files.extend(
                child.relative_to(root) / item
                for item in files_recursive(child, include_hidden)
            )
        elif child.is_file():
            files.append(child.relative_to(root))
    return files


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text
