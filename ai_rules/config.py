"""Source-tree resolution and the technology catalog."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from ai_rules.constants import SOURCE_ENV_VAR, TECH_CATALOG_FILENAME
from ai_rules.errors import InvalidTechCatalogError

BUNDLED_SOURCE_DIR = Path(__file__).resolve().parent / "configs"
SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


def resolve_source_root(explicit: Path | str | None = None) -> Path:
    if explicit:
        return Path(explicit).expanduser().resolve()
    from_env = os.environ.get(SOURCE_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser().resolve()
    return BUNDLED_SOURCE_DIR


def load_schema(name: str) -> dict[str, Any]:
    return json.loads((SCHEMAS_DIR / name).read_text(encoding="utf-8"))


def format_schema_error(error: Any) -> str:
    location = "/".join(str(part) for part in error.path) or "<root>"
    return f"{location}: {error.message}"


def first_schema_error(payload: Any, schema_name: str) -> str | None:
    validator = Draft202012Validator(load_schema(schema_name))
    errors = sorted(
        validator.iter_errors(payload), key=lambda item: [str(part) for part in item.path]
    )
    return format_schema_error(errors[0]) if errors else None


@dataclass(frozen=True)
class TechnologyInfo:
    key: str
    label: str
    category: str = "Other"
    description: str = ""
    include_rules: tuple[str, ...] = ()


@dataclass(frozen=True)
class TechCatalog:
    technologies: dict[str, TechnologyInfo] = field(default_factory=dict)

    def get(self, key: str) -> TechnologyInfo:
        return self.technologies.get(key) or TechnologyInfo(key=key, label=key)

    def shared_rule_categories(self, technologies: list[str]) -> set[str]:
        categories: set[str] = set()
        for technology in technologies:
            info = self.technologies.get(technology)
            if info is not None:
                categories.update(info.include_rules)
        return categories

    @staticmethod
    def from_mapping(mapping: dict[str, list[str]]) -> "TechCatalog":
        return TechCatalog(
            technologies={
                key: TechnologyInfo(key=key, label=key, include_rules=tuple(paths))
                for key, paths in mapping.items()
            }
        )


def should_include_shared_rule(relative_dir: str, categories: set[str]) -> bool:
    """Match a shared rule's directory against the allowed categories.

    Rules sitting directly in the shared rules root carry no category and are
    always included.
    """
    if relative_dir in ("", "."):
        return True
    for category in categories:
        normalized = category.strip("/")
        if relative_dir == normalized or relative_dir.startswith(f"{normalized}/"):
            return True
    return False


def load_tech_catalog(source_root: Path) -> TechCatalog:
    path = source_root / TECH_CATALOG_FILENAME
    if not path.exists():
        return TechCatalog()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise InvalidTechCatalogError(path, str(exc)) from exc

    error = first_schema_error(raw, "tech-config.schema.json")
    if error:
        raise InvalidTechCatalogError(path, error)

    technologies: dict[str, TechnologyInfo] = {}
    for key, entry in (raw.get("technologies") or {}).items():
        technologies[key] = TechnologyInfo(
            key=key,
            label=str(entry.get("label", key)),
            category=str(entry.get("category", "Other")),
            description=str(entry.get("description", "")),
            include_rules=tuple(entry.get("includeRules", [])),
        )
    return TechCatalog(technologies=technologies)
