"""Tests for the GitHub Copilot dialect."""

from ai_rules.adapters import CopilotAdapter
from ai_rules.rules.frontmatter import parse_frontmatter
from ai_rules.rules.models import GlobalRule


def _make_rule(header: str, body: str = "# Body") -> str:
    return f"---\n{header}\n---\n\n{body}"


PATHS_RULE = _make_rule('description: Test rule\npaths:\n  - "**/*.ts"\n  - "**/*.tsx"')
GLOBAL_RULE = _make_rule("description: Global rule\nalwaysApply: true", "# Global")
PLAIN_RULE = "# Just a body\n\nNo frontmatter."


def test_paths_become_apply_to() -> None:
    output = CopilotAdapter().transform_rule(PATHS_RULE, "components.md")

    header = parse_frontmatter(output.content).header
    assert output.filename == "components.instructions.md"
    assert header == {"applyTo": ["**/*.ts", "**/*.tsx"], "description": "Test rule"}
    assert list(header)[0] == "applyTo"
    assert "globs:" not in output.content


def test_always_apply_is_dropped() -> None:
    output = CopilotAdapter().transform_rule(GLOBAL_RULE, "core.md")

    assert "alwaysApply" not in output.content
    assert "description: Global rule" in output.content
    assert output.is_global is True


def test_header_less_rule_passes_through() -> None:
    output = CopilotAdapter().transform_rule(PLAIN_RULE, "test.md")

    assert output.content == PLAIN_RULE
    assert output.filename == "test.instructions.md"


def test_output_paths_live_under_instructions() -> None:
    adapter = CopilotAdapter()

    assert adapter.metadata.root_dir == ".github"
    assert (
        adapter.rule_output_path("angular", "core.instructions.md")
        == "instructions/angular/core.instructions.md"
    )
    assert (
        adapter.shared_rule_output_path("conventions/git.instructions.md")
        == "instructions/conventions/git.instructions.md"
    )


def test_aggregate_has_preamble_and_named_sections() -> None:
    rules = [
        GlobalRule(
            content=_make_rule("description: First rule\nalwaysApply: true", "# First body"),
            source_path="first.md",
        ),
        GlobalRule(content=_make_rule("alwaysApply: true", "# Second"), source_path="team-notes.md"),
    ]

    aggregate = CopilotAdapter().aggregate_global_rules(rules)

    assert aggregate is not None
    assert aggregate.filename == "copilot-instructions.md"
    assert aggregate.content.startswith("# Project Instructions\n\n")
    assert "## first - First rule\n\n# First body" in aggregate.content
    assert "\n\n---\n\n## team-notes - Team Notes\n\n# Second" in aggregate.content


def test_aggregate_of_nothing_is_none() -> None:
    assert CopilotAdapter().aggregate_global_rules([]) is None
