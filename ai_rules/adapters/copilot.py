from ai_rules.adapters.base import (
    DialectId,
    DialectMetadata,
    IDialectAdapter,
    replace_extension,
    sectioned_aggregate,
)
from ai_rules.rules.frontmatter import build_content, parse_frontmatter
from ai_rules.rules.models import AggregateOutput, GlobalRule, RuleOutput

COPILOT_RULE_EXTENSION = ".instructions.md"
COPILOT_AGGREGATE_FILENAME = "copilot-instructions.md"
COPILOT_INSTRUCTIONS_DIRNAME = "instructions"

_AGGREGATE_PREAMBLE = (
    "# Project Instructions\n"
    "\n"
    "These instructions are automatically applied to all files in this project.\n"
    "\n"
)


class CopilotAdapter(IDialectAdapter):
    """GitHub Copilot: ``.instructions.md`` files scoped with ``applyTo``.

    Global rules carry no header flag; they are collected into
    ``.github/copilot-instructions.md`` instead.
    """

    metadata = DialectMetadata(
        dialect_id=DialectId.COPILOT,
        label="GitHub Copilot",
        root_dir=".github",
    )

    def transform_rule(self, content: str, source_path: str) -> RuleOutput:
        filename = self.output_filename(source_path)
        document = parse_frontmatter(content)
        if document.header is None:
            return RuleOutput(content=content, filename=filename)

        header: dict = {}
        if document.header.get("paths"):
            header["applyTo"] = document.header["paths"]
        for key, value in document.header.items():
            if key in ("paths", "alwaysApply"):
                continue
            header[key] = value

        return RuleOutput(
            content=build_content(header, document.body),
            filename=filename,
            is_global=document.is_global,
        )

    def aggregate_global_rules(
        self, rules: list[GlobalRule]
    ) -> AggregateOutput | None:
        if not rules:
            return None
        return AggregateOutput(
            filename=COPILOT_AGGREGATE_FILENAME,
            content=_AGGREGATE_PREAMBLE + sectioned_aggregate(rules),
        )

    def rule_output_path(self, technology: str, filename: str) -> str:
        return f"{COPILOT_INSTRUCTIONS_DIRNAME}/{technology}/{filename}"

    def shared_rule_output_path(self, relative_path: str) -> str:
        return f"{COPILOT_INSTRUCTIONS_DIRNAME}/{relative_path}"

    def output_filename(self, source_path: str) -> str:
        return replace_extension(super().output_filename(source_path), COPILOT_RULE_EXTENSION)
