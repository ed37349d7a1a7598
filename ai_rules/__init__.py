"""Distribute canonical coding-assistant rules to Claude, Cursor, Copilot and Windsurf."""

__version__ = "2.1.0"
