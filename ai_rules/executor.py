from pathlib import Path
from typing import Optional, Protocol

from ai_rules.constants import BACKUPS_DIRNAME, PRIMARY_DIALECT_DIRNAME
from ai_rules.models import Action, ActionKind, ActionStatus, ApplyResult, InstallPlan
from ai_rules.utils import backup_file, write_json, write_text


def backup_dir(target_dir: Path) -> Path:
    return target_dir / PRIMARY_DIALECT_DIRNAME / BACKUPS_DIRNAME


class ActionHandler(Protocol):
    def handle(self, action: Action) -> Optional[str]: ...


class WriteTextHandler:
    def handle(self, action: Action) -> Optional[str]:
        if not isinstance(action.payload, str):
            return f"Missing text payload for write action: {action.path}"
        write_text(action.path, action.payload)
        return None


class MergeJsonHandler:
    def handle(self, action: Action) -> Optional[str]:
        if not isinstance(action.payload, dict):
            return f"Missing JSON payload for merge action: {action.path}"
        write_json(action.path, action.payload)
        return None


class InstallExecutor:
    def __init__(self, target_dir: Path, backup: bool = True) -> None:
        self.target_dir = target_dir
        self.backup = backup
        self.handlers: dict[ActionKind, ActionHandler] = {
            ActionKind.WRITE_TEXT: WriteTextHandler(),
            ActionKind.MERGE_JSON: MergeJsonHandler(),
        }

    def execute(self, plan: InstallPlan) -> ApplyResult:
        result = ApplyResult()

        for action in plan.actions:
            if action.status == ActionStatus.NOOP:
                continue
            handler = self.handlers.get(action.kind)
            if handler is None:
                result.failed += 1
                result.failures.append(f"Unknown action kind: {action.kind.value}")
                continue
            try:
                if self.backup and action.path.is_file():
                    result.backups.append(
                        backup_file(action.path, self.target_dir, backup_dir(self.target_dir))
                    )
                failure = handler.handle(action)
            except OSError as exc:
                # No retries and no rollback: the first I/O failure ends the run.
                result.failed += 1
                result.failures.append(f"{action.kind.value} failed for {action.path}: {exc}")
                break
            if failure is not None:
                result.failed += 1
                result.failures.append(failure)
                continue
            result.applied += 1

        return result
