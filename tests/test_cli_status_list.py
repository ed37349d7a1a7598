"""Tests for the status and list commands."""

from pathlib import Path

from ai_rules.__main__ import cli
from ai_rules.manifest import manifest_path


def test_status_without_installation(cli_runner, project_dir: Path) -> None:
    result = cli_runner.invoke(cli, ["status", "--target", str(project_dir)])

    assert result.exit_code == 0
    assert "No ai-rules installation detected" in result.output


def test_status_after_init(cli_runner, source_root: Path, project_dir: Path) -> None:
    init = cli_runner.invoke(
        cli,
        [
            "init",
            "angular",
            "--targets",
            "claude,windsurf",
            "--with-skills",
            "--source",
            str(source_root),
            "--target",
            str(project_dir),
        ],
    )
    assert init.exit_code == 0, init.output

    result = cli_runner.invoke(cli, ["status", "--target", str(project_dir)])

    assert result.exit_code == 0
    assert "up_to_date" in result.output
    assert "angular" in result.output
    assert "claude, windsurf" in result.output
    assert "Update available" not in result.output


def test_status_reports_available_update(cli_runner, project_dir: Path, write_json) -> None:
    write_json(
        manifest_path(project_dir),
        {
            "version": "1.0.0",
            "technologies": ["angular"],
            "options": {"withSkills": False, "withRules": False},
            "installedAt": "2025-06-01T00:00:00.000Z",
        },
    )

    result = cli_runner.invoke(cli, ["status", "--target", str(project_dir)])

    assert result.exit_code == 0
    assert "update_available" in result.output
    assert "Update available" in result.output


def test_status_with_corrupt_manifest(cli_runner, project_dir: Path) -> None:
    path = manifest_path(project_dir)
    path.parent.mkdir(parents=True)
    path.write_text("{", encoding="utf-8")

    result = cli_runner.invoke(cli, ["status", "--target", str(project_dir)])

    assert result.exit_code == 1
    assert "Invalid JSON format" in result.output


def test_list_shows_catalog_and_shared_resources(cli_runner, source_root: Path) -> None:
    result = cli_runner.invoke(cli, ["list", "--source", str(source_root)])

    assert result.exit_code == 0, result.output
    assert "angular" in result.output
    assert "nestjs" in result.output
    assert "Frontend" in result.output
    assert "shared resources" in result.output


def test_list_bundled_source(cli_runner) -> None:
    result = cli_runner.invoke(cli, ["list"])

    assert result.exit_code == 0, result.output
    assert "react" in result.output
    assert "fastapi" in result.output


def test_list_missing_source(cli_runner, tmp_path: Path) -> None:
    result = cli_runner.invoke(cli, ["list", "--source", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "Canonical rules source not found" in result.output
