from collections import Counter

from rich.panel import Panel
from rich.table import Column, Table

from ai_rules.config import TechCatalog
from ai_rules.models import Action, InstallPlan, StatusReport
from ai_rules.tui.enums import ACTION_STATUS_STYLE, INSTALL_STATE_STYLE, UIStyle


def _relative(action: Action, plan: InstallPlan) -> str:
    try:
        return str(action.path.relative_to(plan.target_dir))
    except ValueError:
        return str(action.path)


class PlanTable:
    @staticmethod
    def summary_block(plan: InstallPlan, mode: str):
        counts = Counter(action.status.value for action in plan.actions)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Directory", str(plan.target_dir))
        table.add_row("Technologies", ", ".join(plan.technologies))
        table.add_row("Targets", ", ".join(plan.options.targets))
        table.add_row("Actions", str(len(plan.actions)))
        table.add_row("Statuses", "  ".join(chips))
        return table

    @staticmethod
    def actions_table(actions: list[Action], plan: InstallPlan) -> Table:
        table = Table(
            Column(header="Section", width=12),
            Column(header="Status", width=8),
            Column(header="Target", overflow="ellipsis", max_width=64),
            Column(header="Source", overflow="ellipsis", max_width=48),
            Column(header="Detail", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for action in actions:
            style = ACTION_STATUS_STYLE.get(action.status, UIStyle.WHITE.value)
            table.add_row(
                action.section.value,
                f"[{style}]{action.status.value}[/{style}]",
                _relative(action, plan),
                action.source or "",
                action.detail,
            )
        return table


class ApplyTable:
    @staticmethod
    def stats_panel(applied: int, failed: int, backups: int) -> Panel:
        stats: dict[str, str] = {
            "applied": str(applied),
            "failed": str(failed),
            "backups": str(backups),
        }
        table = Table(show_header=False, box=None)
        for key, value in stats.items():
            table.add_row(f"[bold]{key}[/bold]", value)
        return Panel(
            table,
            title="apply",
            border_style=UIStyle.GREEN.value if failed == 0 else UIStyle.RED.value,
        )


class StatusTable:
    @staticmethod
    def overview(report: StatusReport) -> Table:
        style = INSTALL_STATE_STYLE.get(report.state, UIStyle.WHITE.value)
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Directory", str(report.target_dir))
        table.add_row("State", f"[{style}]{report.state.value}[/{style}]")
        table.add_row("Installed version", report.installed_version or "-")
        table.add_row("Current version", report.current_version)
        table.add_row("Installed at", report.installed_at or "-")
        table.add_row("Targets", ", ".join(report.targets) or "-")
        table.add_row("Technologies", ", ".join(report.technologies) or "-")
        options = [
            name
            for name, enabled in (("skills", report.with_skills), ("shared rules", report.with_rules))
            if enabled
        ]
        table.add_row("Options", ", ".join(options) or "-")
        table.add_row("Backups", str(report.backup_count))
        return table


class TechnologyTable:
    @staticmethod
    def technologies_table(available: list[str], catalog: TechCatalog) -> Table:
        table = Table(
            Column(header="Category", width=12),
            Column(header="Technology", width=14),
            Column(header="Present", width=8),
            Column(header="Description", overflow="ellipsis"),
            Column(header="Shared rules", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        keys = list(catalog.technologies)
        keys.extend(key for key in available if key not in catalog.technologies)
        rows = sorted(
            (catalog.get(key) for key in keys), key=lambda item: (item.category, item.key)
        )
        for info in rows:
            present = info.key in available
            mark = "[green]yes[/green]" if present else "[red]no[/red]"
            table.add_row(
                info.category,
                info.key,
                mark,
                info.description,
                ", ".join(info.include_rules),
            )
        return table
