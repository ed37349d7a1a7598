from typing import Final


SHARED_DIRNAME: Final[str] = "_shared"
RULES_DIRNAME: Final[str] = "rules"
SKILLS_DIRNAME: Final[str] = "skills"
WORKFLOWS_DIRNAME: Final[str] = "workflows"
SKILL_FILENAME: Final[str] = "SKILL.md"
WORKFLOW_FILENAME: Final[str] = "workflow.md"
SETTINGS_FILENAME: Final[str] = "settings.json"
TECH_CATALOG_FILENAME: Final[str] = "tech-config.yaml"

RULE_EXTENSION: Final[str] = ".md"

# Manifest and backups live under the primary (claude) dialect directory.
PRIMARY_DIALECT_DIRNAME: Final[str] = ".claude"
MANIFEST_FILENAME: Final[str] = ".ai-rules.json"
BACKUPS_DIRNAME: Final[str] = "backups"

SOURCE_ENV_VAR: Final[str] = "AI_RULES_SOURCE"

FRONTMATTER_DELIMITER: Final[str] = "---"
AGGREGATE_SEPARATOR: Final[str] = "\n\n---\n\n"
