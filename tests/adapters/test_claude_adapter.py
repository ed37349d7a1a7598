"""Tests for the Claude Code dialect."""

from ai_rules.adapters import ClaudeAdapter
from ai_rules.rules.frontmatter import parse_frontmatter
from ai_rules.rules.models import GlobalRule


def _make_rule(header: str, body: str = "# Body") -> str:
    return f"---\n{header}\n---\n\n{body}"


PATHS_RULE = _make_rule('description: Test rule\npaths:\n  - "**/*.ts"\n  - "**/*.tsx"')
GLOBAL_RULE = _make_rule("description: Global rule\nalwaysApply: true", "# Global")
PLAIN_RULE = "# Just a body\n\nNo frontmatter."


def test_paths_become_csv_globs() -> None:
    output = ClaudeAdapter().transform_rule(PATHS_RULE, "components.md")

    assert output.filename == "components.md"
    assert "globs: **/*.ts, **/*.tsx" in output.content
    assert "paths:" not in output.content
    assert "description: Test rule" in output.content
    assert output.is_global is False


def test_global_rule_keeps_always_apply() -> None:
    output = ClaudeAdapter().transform_rule(GLOBAL_RULE, "core.md")

    assert output.is_global is True
    assert parse_frontmatter(output.content).header == {
        "description": "Global rule",
        "alwaysApply": True,
    }


def test_header_less_rule_passes_through() -> None:
    output = ClaudeAdapter().transform_rule(PLAIN_RULE, "nested/notes.md")

    assert output.content == PLAIN_RULE
    assert output.filename == "notes.md"
    assert output.is_global is False


def test_skill_is_copied_under_its_directory_name() -> None:
    output = ClaudeAdapter().transform_skill("# Skill body", "dev/my-skill/SKILL.md")

    assert output is not None
    assert output.content == "# Skill body"
    assert output.filename == "SKILL.md"
    assert output.skill_dir == "my-skill"


def test_no_aggregate_file() -> None:
    rules = [GlobalRule(content="---\nalwaysApply: true\n---\n\nx", source_path="core.md")]

    assert ClaudeAdapter().aggregate_global_rules(rules) is None


def test_output_paths() -> None:
    adapter = ClaudeAdapter()

    assert adapter.metadata.root_dir == ".claude"
    assert adapter.rule_output_path("angular", "core.md") == "rules/angular/core.md"
    assert adapter.shared_rule_output_path("security/owasp.md") == "rules/security/owasp.md"
