from pathlib import Path

from ai_rules import __version__
from ai_rules.executor import backup_dir
from ai_rules.manifest import read_manifest
from ai_rules.models import InstallState, StatusReport
from ai_rules.utils import files_recursive


class StatusService:
    def __init__(self, version: str = __version__) -> None:
        self.version = version

    def build(self, target_dir: Path) -> StatusReport:
        manifest = read_manifest(target_dir)
        if manifest is None:
            return StatusReport(
                target_dir=target_dir,
                state=InstallState.NOT_INSTALLED,
                current_version=self.version,
            )

        state = (
            InstallState.UP_TO_DATE
            if manifest.version == self.version
            else InstallState.UPDATE_AVAILABLE
        )
        return StatusReport(
            target_dir=target_dir,
            state=state,
            current_version=self.version,
            installed_version=manifest.version,
            installed_at=manifest.installed_at,
            technologies=list(manifest.technologies),
            targets=list(manifest.targets),
            with_skills=manifest.with_skills,
            with_rules=manifest.with_rules,
            backup_count=len(files_recursive(backup_dir(target_dir), include_hidden=True)),
        )
