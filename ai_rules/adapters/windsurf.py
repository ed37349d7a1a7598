from pathlib import PurePosixPath

from ai_rules.adapters.base import (
    DialectId,
    DialectMetadata,
    IDialectAdapter,
    sectioned_aggregate,
)
from ai_rules.constants import WORKFLOW_FILENAME
from ai_rules.rules.frontmatter import build_content, parse_frontmatter
from ai_rules.rules.models import AggregateOutput, GlobalRule, RuleOutput

WINDSURF_AGGREGATE_FILENAME = "global_rules.md"

_AGGREGATE_PREAMBLE = (
    "---\n"
    "trigger: always\n"
    "---\n"
    "\n"
    "# Global Rules\n"
    "\n"
    "These rules are always applied to all files in this project.\n"
    "\n"
)


class WindsurfAdapter(IDialectAdapter):
    """Windsurf: ``trigger``-based activation; skills become workflows."""

    metadata = DialectMetadata(
        dialect_id=DialectId.WINDSURF,
        label="Windsurf",
        root_dir=".windsurf",
        supports_workflows=True,
    )

    def transform_rule(self, content: str, source_path: str) -> RuleOutput:
        filename = self.output_filename(source_path)
        document = parse_frontmatter(content)
        if document.header is None:
            return RuleOutput(content=content, filename=filename)

        header: dict = {}
        if document.description:
            header["description"] = document.header["description"]

        if document.is_global:
            header["trigger"] = "always"
        elif document.header.get("paths"):
            header["trigger"] = "glob"
            header["globs"] = document.header["paths"]

        return RuleOutput(
            content=build_content(header, document.body),
            filename=filename,
            is_global=document.is_global,
        )

    def transform_skill(self, content: str, source_path: str) -> RuleOutput:
        document = parse_frontmatter(content)
        skill_name = PurePosixPath(source_path).parent.name
        source_header = document.header or {}
        header = {
            "name": source_header.get("name") or skill_name,
            "description": source_header.get("description") or f"Workflow: {skill_name}",
            "trigger": "manual",
        }
        return RuleOutput(
            content=build_content(header, document.body),
            filename=WORKFLOW_FILENAME,
            workflow_dir=skill_name,
        )

    def aggregate_global_rules(
        self, rules: list[GlobalRule]
    ) -> AggregateOutput | None:
        if not rules:
            return None
        return AggregateOutput(
            filename=WINDSURF_AGGREGATE_FILENAME,
            content=_AGGREGATE_PREAMBLE + sectioned_aggregate(rules),
        )
