from pathlib import PurePosixPath

from ai_rules.adapters.base import DialectId, DialectMetadata, IDialectAdapter
from ai_rules.constants import SKILL_FILENAME
from ai_rules.rules.frontmatter import build_content, parse_frontmatter
from ai_rules.rules.models import RuleOutput


class ClaudeAdapter(IDialectAdapter):
    """Claude Code: canonical layout, ``paths`` flattened into a CSV ``globs``.

    Global rules are still flagged so every dialect classifies rules the same
    way; Claude has no aggregate file, so the flag has no output of its own.
    """

    metadata = DialectMetadata(
        dialect_id=DialectId.CLAUDE,
        label="Claude Code",
        root_dir=".claude",
        supports_skills=True,
        supports_settings=True,
    )

    def transform_rule(self, content: str, source_path: str) -> RuleOutput:
        filename = self.output_filename(source_path)
        document = parse_frontmatter(content)
        if document.header is None:
            return RuleOutput(content=content, filename=filename)

        header = dict(document.header)
        paths = header.pop("paths", None)
        if paths:
            header["globs"] = ", ".join(str(item) for item in _as_list(paths))

        return RuleOutput(
            content=build_content(header, document.body),
            filename=filename,
            is_global=document.is_global,
        )

    def transform_skill(self, content: str, source_path: str) -> RuleOutput:
        skill_name = PurePosixPath(source_path).parent.name
        return RuleOutput(content=content, filename=SKILL_FILENAME, skill_dir=skill_name)


def _as_list(value) -> list:
    return value if isinstance(value, list) else [value]
