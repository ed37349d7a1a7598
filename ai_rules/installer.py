"""Installation orchestration: init, update and manifest persistence."""

from __future__ import annotations

from pathlib import Path

from ai_rules import __version__
from ai_rules.config import TechCatalog, load_tech_catalog
from ai_rules.errors import MissingManifestError
from ai_rules.executor import InstallExecutor
from ai_rules.manifest import (
    InstallManifest,
    manifest_path,
    read_manifest,
    unique,
    write_manifest,
)
from ai_rules.models import ApplyResult, InstallOptions, InstallPlan
from ai_rules.planner import InstallPlanner
from ai_rules.rules.repository import SourceRepository


class InstallService:
    def __init__(
        self,
        source: SourceRepository,
        catalog: TechCatalog | None = None,
        version: str = __version__,
    ) -> None:
        self.source = source
        self._catalog = catalog
        self.version = version

    @property
    def catalog(self) -> TechCatalog:
        if self._catalog is None:
            self._catalog = load_tech_catalog(self.source.root)
        return self._catalog

    def plan_init(
        self, technologies: list[str], target_dir: Path, options: InstallOptions
    ) -> InstallPlan:
        options.targets = unique(options.targets)
        return InstallPlanner(
            source=self.source,
            target_dir=target_dir,
            technologies=unique(technologies),
            options=options,
            catalog=self.catalog,
        ).build()

    def plan_update(
        self, target_dir: Path, dry_run: bool = False, force: bool = False
    ) -> InstallPlan:
        manifest = read_manifest(target_dir)
        if manifest is None:
            raise MissingManifestError(manifest_path(target_dir))
        options = InstallOptions(
            targets=list(manifest.targets),
            with_skills=manifest.with_skills,
            with_rules=manifest.with_rules,
            dry_run=dry_run,
            force=force,
        )
        return self.plan_init(manifest.technologies, target_dir, options)

    def apply(self, plan: InstallPlan) -> ApplyResult:
        if plan.options.dry_run:
            return ApplyResult()

        result = InstallExecutor(
            target_dir=plan.target_dir, backup=plan.options.backup
        ).execute(plan)
        if result.failed:
            return result

        manifest = InstallManifest(
            version=self.version,
            technologies=list(plan.technologies),
            with_skills=plan.options.with_skills,
            with_rules=plan.options.with_rules,
            targets=list(plan.options.targets),
        )
        result.manifest_path = write_manifest(plan.target_dir, manifest)
        return result

    def init(
        self, technologies: list[str], target_dir: Path, options: InstallOptions
    ) -> tuple[InstallPlan, ApplyResult]:
        plan = self.plan_init(technologies, target_dir, options)
        return plan, self.apply(plan)

    def update(
        self, target_dir: Path, dry_run: bool = False, force: bool = False
    ) -> tuple[InstallPlan, ApplyResult]:
        plan = self.plan_update(target_dir, dry_run=dry_run, force=force)
        return plan, self.apply(plan)
