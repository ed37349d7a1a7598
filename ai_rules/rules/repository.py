"""Read-only access to the canonical rule/skill source tree.

Layout::

    <source>/
      tech-config.yaml
      <technology>/rules/**.md
      <technology>/skills/**/SKILL.md
      <technology>/settings.json
      _shared/rules/<category>/**.md
      _shared/skills/<category>/<skill>/SKILL.md
"""

from __future__ import annotations

from pathlib import Path

from ai_rules.constants import (
    RULE_EXTENSION,
    RULES_DIRNAME,
    SETTINGS_FILENAME,
    SHARED_DIRNAME,
    SKILL_FILENAME,
    SKILLS_DIRNAME,
)
from ai_rules.errors import MissingSourceError, UnknownTechnologyError
from ai_rules.rules.models import SourceDocument
from ai_rules.utils import files_recursive, read_json_strict


class SourceRepository:
    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    @property
    def shared_dir(self) -> Path:
        return self._root / SHARED_DIRNAME

    def ensure_exists(self) -> None:
        if not self._root.is_dir():
            raise MissingSourceError(self._root)

    def list_technologies(self) -> list[str]:
        if not self._root.is_dir():
            return []
        return [
            child.name
            for child in sorted(self._root.iterdir())
            if child.is_dir() and not child.name.startswith(("_", "."))
        ]

    def technology_dir(self, technology: str) -> Path:
        return self._root / technology

    def has_technology(self, technology: str) -> bool:
        if technology.startswith(("_", ".")) or "/" in technology:
            return False
        return self.technology_dir(technology).is_dir()

    def require_technologies(self, technologies: list[str]) -> None:
        for technology in technologies:
            if not self.has_technology(technology):
                raise UnknownTechnologyError(technology, self._root)

    def tech_rules(self, technology: str) -> list[SourceDocument]:
        return self._read_rules(self.technology_dir(technology) / RULES_DIRNAME)

    def shared_rules(self) -> list[SourceDocument]:
        return self._read_rules(self.shared_dir / RULES_DIRNAME)

    def tech_skills(self, technology: str) -> list[SourceDocument]:
        return self._read_skills(self.technology_dir(technology) / SKILLS_DIRNAME)

    def shared_skills(self) -> list[SourceDocument]:
        return self._read_skills(self.shared_dir / SKILLS_DIRNAME)

    def has_shared_rules(self) -> bool:
        return (self.shared_dir / RULES_DIRNAME).is_dir()

    def has_shared_skills(self) -> bool:
        return (self.shared_dir / SKILLS_DIRNAME).is_dir()

    def settings_template_path(self, technology: str) -> Path:
        return self.technology_dir(technology) / SETTINGS_FILENAME

    def load_settings_template(self, technology: str) -> dict | None:
        return read_json_strict(self.settings_template_path(technology))

    @staticmethod
    def _read_rules(root: Path) -> list[SourceDocument]:
        return [
            SourceDocument(
                relative_path=relative.as_posix(),
                content=(root / relative).read_text(encoding="utf-8"),
            )
            for relative in files_recursive(root)
            if relative.suffix == RULE_EXTENSION
        ]

    @staticmethod
    def _read_skills(root: Path) -> list[SourceDocument]:
        return [
            SourceDocument(
                relative_path=relative.as_posix(),
                content=(root / relative).read_text(encoding="utf-8"),
            )
            for relative in files_recursive(root)
            if relative.name == SKILL_FILENAME and len(relative.parts) >= 2
        ]
