"""Dialect adapter interface shared by every target tool."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath

from ai_rules.constants import AGGREGATE_SEPARATOR, RULE_EXTENSION, RULES_DIRNAME
from ai_rules.rules.frontmatter import parse_frontmatter
from ai_rules.rules.models import AggregateOutput, GlobalRule, RuleOutput


class DialectId(str, Enum):
    CLAUDE = "claude"
    CURSOR = "cursor"
    COPILOT = "copilot"
    WINDSURF = "windsurf"


@dataclass(frozen=True)
class DialectMetadata:
    dialect_id: DialectId
    label: str
    root_dir: str
    supports_rules: bool = True
    supports_skills: bool = False
    supports_settings: bool = False
    supports_workflows: bool = False

    @property
    def installs_skills(self) -> bool:
        return self.supports_skills or self.supports_workflows


class IDialectAdapter(ABC):
    metadata: DialectMetadata

    @abstractmethod
    def transform_rule(self, content: str, source_path: str) -> RuleOutput:
        """Rewrite one canonical rule into this dialect."""

    def transform_skill(self, content: str, source_path: str) -> RuleOutput | None:
        return None

    def aggregate_global_rules(
        self, rules: list[GlobalRule]
    ) -> AggregateOutput | None:
        return None

    def rule_output_path(self, technology: str, filename: str) -> str:
        return f"{RULES_DIRNAME}/{technology}/{filename}"

    def shared_rule_output_path(self, relative_path: str) -> str:
        return f"{RULES_DIRNAME}/{relative_path}"

    def aggregate_output_path(self, filename: str) -> str:
        return filename

    def output_filename(self, source_path: str) -> str:
        return PurePosixPath(source_path).name


def rule_stem(source_path: str) -> str:
    name = PurePosixPath(source_path).name
    if name.endswith(RULE_EXTENSION):
        return name[: -len(RULE_EXTENSION)]
    return name


def human_title(stem: str) -> str:
    words = stem.replace("_", " ").replace("-", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def rule_label(description: str | None, source_path: str) -> str:
    return description or human_title(rule_stem(source_path))


def replace_extension(filename: str, extension: str) -> str:
    if filename.endswith(RULE_EXTENSION):
        return filename[: -len(RULE_EXTENSION)] + extension
    return filename


def sectioned_aggregate(rules: list[GlobalRule]) -> str:
    """Render ``## <name> - <label>`` sections joined by horizontal rules."""
    sections: list[str] = []
    for rule in rules:
        document = parse_frontmatter(rule.content)
        name = rule_stem(rule.source_path)
        label = rule_label(document.description, rule.source_path)
        sections.append(f"## {name} - {label}\n\n{document.body}")
    return AGGREGATE_SEPARATOR.join(sections)
