from pathlib import Path
from typing import Optional

from ai_rules.adapters import IDialectAdapter, get_adapter
from ai_rules.config import TechCatalog, should_include_shared_rule
from ai_rules.constants import SETTINGS_FILENAME, SKILLS_DIRNAME, WORKFLOWS_DIRNAME
from ai_rules.errors import InvalidJsonFormatError
from ai_rules.models import (
    Action,
    ActionKind,
    ActionSection,
    ActionStatus,
    InstallOptions,
    InstallPlan,
)
from ai_rules.rules.models import GlobalRule, SourceDocument
from ai_rules.rules.repository import SourceRepository
from ai_rules.settings import merge_settings
from ai_rules.utils import dump_json, read_json_strict, same_text


def _join(directory: str, filename: str) -> str:
    return filename if directory in ("", ".") else f"{directory}/{filename}"


class InstallPlanner:
    """Build the full list of writes for one installation, touching nothing."""

    def __init__(
        self,
        source: SourceRepository,
        target_dir: Path,
        technologies: list[str],
        options: InstallOptions,
        catalog: Optional[TechCatalog] = None,
    ) -> None:
        self.source = source
        self.target_dir = target_dir
        self.technologies = technologies
        self.options = options
        self.catalog = catalog or TechCatalog()

        self.actions: list[Action] = []
        self.skipped: list[str] = []
        self._by_path: dict[Path, Action] = {}
        self._pending_json: dict[Path, dict] = {}

    def build(self) -> InstallPlan:
        self.source.ensure_exists()
        self.source.require_technologies(self.technologies)
        adapters = [get_adapter(target) for target in self.options.targets]

        for adapter in adapters:
            self._plan_dialect(adapter)

        return InstallPlan(
            target_dir=self.target_dir,
            technologies=self.technologies,
            options=self.options,
            actions=self.actions,
            skipped=self.skipped,
        )

    def _plan_dialect(self, adapter: IDialectAdapter) -> None:
        meta = adapter.metadata
        root = self.target_dir / meta.root_dir
        install_skills = self.options.with_skills and meta.installs_skills
        global_rules: list[GlobalRule] = []

        for technology in self.technologies:
            if meta.supports_settings:
                self._plan_settings(technology, root, meta.dialect_id.value)
            if meta.supports_rules:
                global_rules.extend(self._plan_tech_rules(technology, adapter, root))
            if install_skills:
                self._plan_skills(self.source.tech_skills(technology), adapter, root)

        if install_skills:
            self._plan_skills(self.source.shared_skills(), adapter, root)

        if self.options.with_rules and meta.supports_rules:
            global_rules.extend(self._plan_shared_rules(adapter, root))

        aggregate = adapter.aggregate_global_rules(global_rules)
        if aggregate is not None:
            self._plan_text(
                root / adapter.aggregate_output_path(aggregate.filename),
                aggregate.content,
                section=ActionSection.AGGREGATE,
                target=meta.dialect_id.value,
                detail=f"{len(global_rules)} global rule(s)",
            )

    def _plan_tech_rules(
        self, technology: str, adapter: IDialectAdapter, root: Path
    ) -> list[GlobalRule]:
        global_rules: list[GlobalRule] = []
        for document in self.source.tech_rules(technology):
            output = adapter.transform_rule(document.content, document.relative_path)
            if output.is_global:
                global_rules.append(
                    GlobalRule(content=document.content, source_path=document.relative_path)
                )
            relative = _join(document.relative_dir, output.filename)
            self._plan_text(
                root / adapter.rule_output_path(technology, relative),
                output.content,
                section=ActionSection.RULES,
                target=adapter.metadata.dialect_id.value,
                source=f"{technology}/rules/{document.relative_path}",
            )
        return global_rules

    def _plan_shared_rules(
        self, adapter: IDialectAdapter, root: Path
    ) -> list[GlobalRule]:
        categories = self.catalog.shared_rule_categories(self.technologies)
        global_rules: list[GlobalRule] = []
        for document in self.source.shared_rules():
            if not should_include_shared_rule(document.relative_dir, categories):
                note = f"shared rules/{document.relative_dir}: not applicable"
                if note not in self.skipped:
                    self.skipped.append(note)
                continue

            output = adapter.transform_rule(document.content, document.relative_path)
            if output.is_global:
                global_rules.append(
                    GlobalRule(content=document.content, source_path=document.relative_path)
                )
            relative = _join(document.relative_dir, output.filename)
            self._plan_text(
                root / adapter.shared_rule_output_path(relative),
                output.content,
                section=ActionSection.SHARED_RULES,
                target=adapter.metadata.dialect_id.value,
                source=f"_shared/rules/{document.relative_path}",
            )
        return global_rules

    def _plan_skills(
        self, documents: list[SourceDocument], adapter: IDialectAdapter, root: Path
    ) -> None:
        for document in documents:
            output = adapter.transform_skill(document.content, document.relative_path)
            if output is None:
                continue
            if output.skill_dir:
                path = root / SKILLS_DIRNAME / output.skill_dir / output.filename
                section = ActionSection.SKILLS
            elif output.workflow_dir:
                path = root / WORKFLOWS_DIRNAME / output.workflow_dir / output.filename
                section = ActionSection.WORKFLOWS
            else:
                continue
            self._plan_text(
                path,
                output.content,
                section=section,
                target=adapter.metadata.dialect_id.value,
                source=document.relative_path,
            )

    def _plan_settings(self, technology: str, root: Path, target: str) -> None:
        template = self.source.load_settings_template(technology)
        if template is None:
            return
        template_path = self.source.settings_template_path(technology)
        if not isinstance(template, dict):
            raise InvalidJsonFormatError(template_path, "expected a JSON object")

        path = root / SETTINGS_FILENAME
        existing = self._pending_json.get(path)
        if existing is None:
            existing = read_json_strict(path) if path.exists() else {}
            if not isinstance(existing, dict):
                raise InvalidJsonFormatError(path, "expected a JSON object")

        merged = merge_settings(existing, template)
        self._pending_json[path] = merged
        self._record(
            path,
            ActionKind.MERGE_JSON,
            merged,
            status=self._status_for(path, dump_json(merged)),
            section=ActionSection.SETTINGS,
            target=target,
            detail=f"merged {technology} permissions and env",
            source=f"{technology}/settings.json",
        )

    def _plan_text(
        self,
        path: Path,
        content: str,
        section: ActionSection,
        target: str,
        detail: str = "",
        source: Optional[str] = None,
    ) -> None:
        self._record(
            path,
            ActionKind.WRITE_TEXT,
            content,
            status=self._status_for(path, content),
            section=section,
            target=target,
            detail=detail,
            source=source,
        )

    def _record(
        self,
        path: Path,
        kind: ActionKind,
        payload: object,
        status: ActionStatus,
        section: ActionSection,
        target: str,
        detail: str,
        source: Optional[str],
    ) -> None:
        existing = self._by_path.get(path)
        if existing is not None:
            # Later sources win for the same destination; keep the first slot.
            existing.payload = payload
            existing.status = status
            existing.source = source
            if detail:
                existing.detail = detail
            return

        if not detail:
            detail = "already up to date" if status == ActionStatus.NOOP else ""
        action = Action(
            kind=kind,
            path=path,
            status=status,
            detail=detail,
            section=section,
            target=target,
            payload=payload,
            source=source,
        )
        self._by_path[path] = action
        self.actions.append(action)

    @staticmethod
    def _status_for(path: Path, content: str) -> ActionStatus:
        if not path.exists():
            return ActionStatus.CREATE
        if same_text(path, content):
            return ActionStatus.NOOP
        return ActionStatus.UPDATE
