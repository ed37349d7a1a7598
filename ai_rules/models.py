from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class ActionKind(str, Enum):
    WRITE_TEXT = "write_text"
    MERGE_JSON = "merge_json"


class ActionStatus(str, Enum):
    NOOP = "noop"
    CREATE = "create"
    UPDATE = "update"


class ActionSection(str, Enum):
    SETTINGS = "settings"
    RULES = "rules"
    SHARED_RULES = "shared rules"
    SKILLS = "skills"
    WORKFLOWS = "workflows"
    AGGREGATE = "aggregate"


class InstallState(str, Enum):
    NOT_INSTALLED = "not_installed"
    UP_TO_DATE = "up_to_date"
    UPDATE_AVAILABLE = "update_available"


@dataclass
class Action:
    kind: ActionKind
    path: Path
    status: ActionStatus
    detail: str
    section: ActionSection
    target: str
    payload: Optional[Any] = None
    source: Optional[str] = None


@dataclass
class InstallOptions:
    targets: list[str]
    with_skills: bool = False
    with_rules: bool = False
    dry_run: bool = False
    force: bool = False

    @property
    def backup(self) -> bool:
        return not self.force


@dataclass
class InstallPlan:
    target_dir: Path
    technologies: list[str]
    options: InstallOptions
    actions: list[Action] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def summary(self) -> dict[str, int]:
        counts = {status.value: 0 for status in ActionStatus}
        for action in self.actions:
            counts[action.status.value] += 1
        counts["actions"] = len(self.actions)
        counts["skipped"] = len(self.skipped)
        return counts

    def pending(self) -> list[Action]:
        return [action for action in self.actions if action.status != ActionStatus.NOOP]

    def for_target(self, target: str) -> list[Action]:
        return [action for action in self.actions if action.target == target]


@dataclass
class ApplyResult:
    applied: int = 0
    failed: int = 0
    failures: list[str] = field(default_factory=list)
    backups: list[Path] = field(default_factory=list)
    manifest_path: Optional[Path] = None


@dataclass
class StatusReport:
    target_dir: Path
    state: InstallState
    current_version: str
    installed_version: Optional[str] = None
    installed_at: Optional[str] = None
    technologies: list[str] = field(default_factory=list)
    targets: list[str] = field(default_factory=list)
    with_skills: bool = False
    with_rules: bool = False
    backup_count: int = 0

    @property
    def update_available(self) -> bool:
        return self.state == InstallState.UPDATE_AVAILABLE
