from ai_rules.tui.renderers import InstallConsoleUI

__all__ = ["InstallConsoleUI"]
