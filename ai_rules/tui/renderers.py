from rich.console import Console

from ai_rules.adapters import dialect_metadata
from ai_rules.config import TechCatalog
from ai_rules.models import ApplyResult, InstallPlan, InstallState, StatusReport
from ai_rules.tui.enums import UIStyle
from ai_rules.tui.sections import UISection
from ai_rules.tui.tables import ApplyTable, PlanTable, StatusTable, TechnologyTable
from ai_rules.utils import compact_home_path


class InstallConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_plan(self, plan: InstallPlan, mode: str) -> None:
        self.console.print(
            UISection.wrap(
                "plan overview",
                PlanTable.summary_block(plan, mode=mode),
                style=UIStyle.BLUE.value,
            )
        )

        for target in plan.options.targets:
            actions = plan.for_target(target)
            if not actions:
                continue
            self.console.print(
                UISection.wrap(
                    dialect_metadata(target).label,
                    PlanTable.actions_table(actions, plan),
                    style=UIStyle.CYAN.value,
                )
            )

        if not plan.actions:
            self.console.print(
                UISection.note("actions", "No actions required.", style=UIStyle.DIM.value)
            )

        if plan.skipped:
            self.console.print(
                UISection.bullets("skipped", plan.skipped, style=UIStyle.YELLOW.value)
            )

        if plan.options.dry_run:
            self.console.print(
                UISection.note(
                    "dry run",
                    "No files were modified.\nRun without --dry-run to apply changes.",
                    style=UIStyle.DIM.value,
                )
            )

    def render_apply_result(self, result: ApplyResult) -> None:
        self.console.print(
            ApplyTable.stats_panel(
                applied=result.applied,
                failed=result.failed,
                backups=len(result.backups),
            )
        )
        if result.failures:
            self.console.print(
                UISection.bullets("failures", result.failures, style=UIStyle.RED.value)
            )
        if result.manifest_path is not None:
            self.console.print(
                UISection.note(
                    "manifest",
                    f"Installation recorded in {compact_home_path(result.manifest_path)}",
                    style=UIStyle.GREEN.value,
                )
            )

    def render_status(self, report: StatusReport) -> None:
        if report.state == InstallState.NOT_INSTALLED:
            self.console.print(
                UISection.note(
                    "status",
                    f"No ai-rules installation detected in {compact_home_path(report.target_dir)}.\n"
                    "Run `ai-rules init <tech>` to install configurations.",
                    style=UIStyle.YELLOW.value,
                )
            )
            return

        self.console.print(
            UISection.wrap("status", StatusTable.overview(report), style=UIStyle.BLUE.value)
        )
        if report.update_available:
            self.console.print(
                UISection.note(
                    "update",
                    f"Update available ({report.installed_version} -> {report.current_version}).\n"
                    "Run `ai-rules update` to refresh installed rules.",
                    style=UIStyle.YELLOW.value,
                )
            )

    def render_technologies(
        self,
        available: list[str],
        catalog: TechCatalog,
        has_shared_skills: bool,
        has_shared_rules: bool,
    ) -> None:
        if not available and not catalog.technologies:
            self.console.print(
                UISection.note(
                    "technologies", "No technologies found.", style=UIStyle.YELLOW.value
                )
            )
        else:
            self.console.print(
                UISection.wrap(
                    "technologies",
                    TechnologyTable.technologies_table(available, catalog),
                    style=UIStyle.BLUE.value,
                )
            )

        shared_lines = [
            f"{'[green]yes[/green]' if has_shared_skills else '[red]no[/red]'}  skills",
            f"{'[green]yes[/green]' if has_shared_rules else '[red]no[/red]'}  shared rules",
        ]
        self.console.print(
            UISection.note("shared resources", "\n".join(shared_lines), style=UIStyle.CYAN.value)
        )
