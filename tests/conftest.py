import json
import sys
from pathlib import Path

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


TECH_CONFIG = """\
technologies:
  angular:
    label: Angular
    category: Frontend
    description: Angular + NgRx
    includeRules:
      - security
      - conventions
  nestjs:
    label: NestJS
    category: Backend
    description: NestJS + Prisma
    includeRules:
      - security
"""

ANGULAR_CORE = """\
---
description: Angular core conventions
alwaysApply: true
---

# Angular Core

Use standalone components.
"""

ANGULAR_COMPONENTS = """\
---
description: Component rules
paths:
  - "**/*.component.ts"
  - "**/*.component.html"
---

# Components

Use OnPush change detection.
"""

ANGULAR_NOTES = "# Notes\n\nNo header here.\n"

NESTJS_CORE = """\
---
alwaysApply: true
---

# NestJS Core

Use modules per feature.
"""

SHARED_SECURITY = """\
---
description: Security baseline
alwaysApply: true
---

# Security

Never commit secrets.
"""

SHARED_PERFORMANCE = """\
---
description: Performance guidelines
paths:
  - "src/**"
---

# Performance

Measure first.
"""

SHARED_A11Y = """\
---
description: Accessibility
paths:
  - "**/*.html"
---

# Accessibility

Label every input.
"""

LEARNING_SKILL = """\
---
name: learning
description: Explain concepts step by step
argument-hint: "<topic>"
---

# Learning

Teach progressively.
"""

SIGNALS_SKILL = "# Signals\n\nMigrate to signals.\n"


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("AI_RULES_SOURCE", raising=False)


@pytest.fixture
def write_json():
    def _write_json(path: Path, payload: dict) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write_json


@pytest.fixture
def source_root(tmp_path: Path, write_json) -> Path:
    root = tmp_path / "source"
    _write(root / "tech-config.yaml", TECH_CONFIG)

    _write(root / "angular" / "rules" / "core.md", ANGULAR_CORE)
    _write(root / "angular" / "rules" / "components" / "components.md", ANGULAR_COMPONENTS)
    _write(root / "angular" / "rules" / "notes.md", ANGULAR_NOTES)
    _write(root / "angular" / "skills" / "frontend" / "signals" / "SKILL.md", SIGNALS_SKILL)
    write_json(
        root / "angular" / "settings.json",
        {
            "permissions": {
                "allow": ["Bash(npm run *)", "Read"],
                "deny": ["Bash(curl *)"],
            },
            "env": {"NX_DAEMON": "true"},
        },
    )

    _write(root / "nestjs" / "rules" / "core.md", NESTJS_CORE)
    write_json(
        root / "nestjs" / "settings.json",
        {"permissions": {"allow": ["Bash(npm test *)", "Read"], "deny": []}},
    )

    shared = root / "_shared"
    _write(shared / "rules" / "security" / "security.md", SHARED_SECURITY)
    _write(shared / "rules" / "conventions" / "performance.md", SHARED_PERFORMANCE)
    _write(shared / "rules" / "accessibility" / "a11y.md", SHARED_A11Y)
    _write(shared / "rules" / "general.md", "# General\n\nBe consistent.\n")
    _write(shared / "skills" / "dev" / "learning" / "SKILL.md", LEARNING_SKILL)
    _write(shared / "skills" / "review" / "code-review" / "SKILL.md", "# Review\n")
    return root


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def snapshot_tree():
    def _snapshot(root: Path, exclude: tuple[str, ...] = ()) -> dict[str, bytes]:
        files: dict[str, bytes] = {}
        for path in sorted(root.rglob("*")):
            if not path.is_file():
                continue
            relative = path.relative_to(root).as_posix()
            if any(relative.startswith(prefix) for prefix in exclude):
                continue
            files[relative] = path.read_bytes()
        return files

    return _snapshot
