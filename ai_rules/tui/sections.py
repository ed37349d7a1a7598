from rich.panel import Panel

from ai_rules.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(title: str, body, style: str = UIStyle.BLUE.value) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def note(title: str, body: str, style: str) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def bullets(title: str, items: list[str], style: str) -> Panel:
        """A note panel listing one ``- item`` line per entry."""
        return UISection.note(title, "\n".join(f"- {item}" for item in items), style)
