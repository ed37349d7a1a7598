from ai_rules.adapters.base import (
    DialectId,
    DialectMetadata,
    IDialectAdapter,
    replace_extension,
    rule_label,
)
from ai_rules.constants import AGGREGATE_SEPARATOR
from ai_rules.rules.frontmatter import build_content, parse_frontmatter
from ai_rules.rules.models import AggregateOutput, GlobalRule, RuleOutput

CURSOR_RULE_EXTENSION = ".mdc"
CURSOR_AGGREGATE_FILENAME = ".cursorrules"


class CursorAdapter(IDialectAdapter):
    """Cursor: ``.mdc`` files, ``paths`` renamed to a ``globs`` list."""

    metadata = DialectMetadata(
        dialect_id=DialectId.CURSOR,
        label="Cursor",
        root_dir=".cursor",
    )

    def transform_rule(self, content: str, source_path: str) -> RuleOutput:
        filename = self.output_filename(source_path)
        document = parse_frontmatter(content)
        if document.header is None:
            return RuleOutput(content=content, filename=filename)

        header = dict(document.header)
        paths = header.pop("paths", None)
        if paths:
            header["globs"] = paths

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
        sections: list[str] = []
        for rule in rules:
            document = parse_frontmatter(rule.content)
            label = rule_label(document.description, rule.source_path)
            sections.append(f"# {label}\n\n{document.body}")
        return AggregateOutput(
            filename=CURSOR_AGGREGATE_FILENAME,
            content=AGGREGATE_SEPARATOR.join(sections),
        )

    def output_filename(self, source_path: str) -> str:
        return replace_extension(super().output_filename(source_path), CURSOR_RULE_EXTENSION)
