from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ai_rules.adapters import DEFAULT_TARGET
from ai_rules.config import first_schema_error
from ai_rules.constants import MANIFEST_FILENAME, PRIMARY_DIALECT_DIRNAME
from ai_rules.errors import InvalidManifestError
from ai_rules.utils import read_json_strict, utc_now_iso, write_json


def manifest_path(target_dir: Path) -> Path:
    return target_dir / PRIMARY_DIALECT_DIRNAME / MANIFEST_FILENAME


def unique(items: list[str]) -> list[str]:
    seen: list[str] = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


@dataclass(frozen=True)
class InstallManifest:
    version: str
    technologies: list[str]
    with_skills: bool = False
    with_rules: bool = False
    targets: list[str] = field(default_factory=lambda: [DEFAULT_TARGET.value])
    installed_at: str = field(default_factory=utc_now_iso)

    def as_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "technologies": list(self.technologies),
            "options": {
                "withSkills": self.with_skills,
                "withRules": self.with_rules,
                "targets": list(self.targets),
            },
            "installedAt": self.installed_at,
        }

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> "InstallManifest":
        options = payload.get("options") or {}
        # Legacy manifests kept targets at the top level.
        targets = options.get("targets") or payload.get("targets") or [
            DEFAULT_TARGET.value
        ]
        return InstallManifest(
            version=payload["version"],
            technologies=unique(list(payload["technologies"])),
            with_skills=bool(options.get("withSkills", False)),
            with_rules=bool(options.get("withRules", False)),
            targets=unique(list(targets)),
            installed_at=str(payload.get("installedAt", "")),
        )


def read_manifest(target_dir: Path) -> InstallManifest | None:
    path = manifest_path(target_dir)
    payload = read_json_strict(path)
    if payload is None:
        return None

    error = first_schema_error(payload, "manifest.schema.json")
    if error:
        raise InvalidManifestError(path, error)
    return InstallManifest.from_dict(payload)


def write_manifest(target_dir: Path, manifest: InstallManifest) -> Path:
    path = manifest_path(target_dir)
    write_json(path, manifest.as_dict())
    return path
