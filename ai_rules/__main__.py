from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console

from ai_rules import __version__
from ai_rules.adapters import AVAILABLE_TARGETS, DEFAULT_TARGET
from ai_rules.config import load_tech_catalog, resolve_source_root
from ai_rules.constants import SOURCE_ENV_VAR
from ai_rules.errors import AiRulesError
from ai_rules.installer import InstallService
from ai_rules.models import ApplyResult, InstallOptions, InstallPlan
from ai_rules.rules.repository import SourceRepository
from ai_rules.status import StatusService
from ai_rules.tui import InstallConsoleUI


def _source_option(func: Callable) -> Callable:
    return click.option(
        "--source",
        type=click.Path(path_type=Path, file_okay=False),
        envvar=SOURCE_ENV_VAR,
        default=None,
        help=f"Canonical rules tree (default: bundled configs, or ${SOURCE_ENV_VAR}).",
    )(func)


def _target_dir_option(func: Callable) -> Callable:
    return click.option(
        "--target",
        "target_dir",
        type=click.Path(path_type=Path, file_okay=False),
        default=".",
        show_default=True,
        help="Project directory to install into.",
    )(func)


def _write_options(func: Callable) -> Callable:
    func = click.option(
        "--force", is_flag=True, help="Overwrite files without taking backups."
    )(func)
    return click.option(
        "--dry-run", is_flag=True, help="Preview changes without writing files."
    )(func)


def _normalize_targets(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> list[str]:
    targets: list[str] = []
    for value in values:
        for item in value.split(","):
            name = item.strip().lower()
            if not name:
                continue
            if name not in AVAILABLE_TARGETS:
                raise click.BadParameter(
                    f"{name!r} is not one of {', '.join(AVAILABLE_TARGETS)}"
                )
            if name not in targets:
                targets.append(name)
    return targets or [DEFAULT_TARGET.value]


def _service(source: Optional[Path]) -> InstallService:
    return InstallService(SourceRepository(resolve_source_root(source)))


def _run_install(
    ui: InstallConsoleUI, plan_factory: Callable[[], InstallPlan], service: InstallService, mode: str
) -> None:
    try:
        plan = plan_factory()
    except AiRulesError as exc:
        raise click.ClickException(str(exc))

    ui.render_plan(plan, mode=mode)
    if plan.options.dry_run:
        return

    result: ApplyResult = service.apply(plan)
    ui.render_apply_result(result)
    if result.failed:
        raise click.exceptions.Exit(1)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="ai-rules")
def cli() -> None:
    """Install coding-assistant rules for Claude, Cursor, Copilot and Windsurf."""


@cli.command(help="Install rules for one or more technologies.")
@click.argument("technologies", nargs=-1, required=True)
@_target_dir_option
@click.option(
    "--targets",
    multiple=True,
    callback=_normalize_targets,
    help=f"Assistant dialects to install for ({', '.join(AVAILABLE_TARGETS)}). "
    "Repeat or comma-separate; defaults to claude.",
)
@click.option("--with-skills", is_flag=True, help="Install skills (workflows on Windsurf).")
@click.option("--with-rules", is_flag=True, help="Install shared cross-technology rules.")
@_write_options
@_source_option
def init(
    technologies: tuple[str, ...],
    target_dir: Path,
    targets: list[str],
    with_skills: bool,
    with_rules: bool,
    dry_run: bool,
    force: bool,
    source: Optional[Path],
) -> None:
    ui = InstallConsoleUI(Console())
    service = _service(source)
    options = InstallOptions(
        targets=targets,
        with_skills=with_skills,
        with_rules=with_rules,
        dry_run=dry_run,
        force=force,
    )
    destination = target_dir.expanduser().resolve()
    _run_install(
        ui,
        lambda: service.plan_init(list(technologies), destination, options),
        service,
        mode="dry-run" if dry_run else "init",
    )


@cli.command(help="Re-install using the technologies and options recorded by init.")
@_target_dir_option
@_write_options
@_source_option
def update(target_dir: Path, dry_run: bool, force: bool, source: Optional[Path]) -> None:
    ui = InstallConsoleUI(Console())
    service = _service(source)
    destination = target_dir.expanduser().resolve()
    _run_install(
        ui,
        lambda: service.plan_update(destination, dry_run=dry_run, force=force),
        service,
        mode="dry-run" if dry_run else "update",
    )


@cli.command(help="Show the installation recorded in a project.")
@_target_dir_option
def status(target_dir: Path) -> None:
    ui = InstallConsoleUI(Console())
    try:
        report = StatusService().build(target_dir.expanduser().resolve())
    except AiRulesError as exc:
        raise click.ClickException(str(exc))
    ui.render_status(report)


@cli.command("list", help="List available technologies and shared resources.")
@_source_option
def list_technologies(source: Optional[Path]) -> None:
    ui = InstallConsoleUI(Console())
    repository = SourceRepository(resolve_source_root(source))
    try:
        repository.ensure_exists()
        catalog = load_tech_catalog(repository.root)
    except AiRulesError as exc:
        raise click.ClickException(str(exc))
    ui.render_technologies(
        repository.list_technologies(),
        catalog,
        has_shared_skills=repository.has_shared_skills(),
        has_shared_rules=repository.has_shared_rules(),
    )


def main() -> int:
    try:
        code = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.exceptions.Abort:
        return 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
