from ai_rules.adapters.base import DialectId, DialectMetadata, IDialectAdapter
from ai_rules.adapters.claude import ClaudeAdapter
from ai_rules.adapters.copilot import CopilotAdapter
from ai_rules.adapters.cursor import CursorAdapter
from ai_rules.adapters.windsurf import WindsurfAdapter
from ai_rules.errors import UnknownTargetError

ADAPTERS: dict[DialectId, type[IDialectAdapter]] = {
    DialectId.CLAUDE: ClaudeAdapter,
    DialectId.CURSOR: CursorAdapter,
    DialectId.COPILOT: CopilotAdapter,
    DialectId.WINDSURF: WindsurfAdapter,
}

AVAILABLE_TARGETS: list[str] = [dialect.value for dialect in ADAPTERS]
DEFAULT_TARGET: DialectId = DialectId.CLAUDE


def get_adapter(target: DialectId | str) -> IDialectAdapter:
    try:
        dialect = target if isinstance(target, DialectId) else DialectId(target.lower())
    except ValueError:
        raise UnknownTargetError(str(target), AVAILABLE_TARGETS) from None
    return ADAPTERS[dialect]()


def dialect_metadata(target: DialectId | str) -> DialectMetadata:
    return get_adapter(target).metadata


__all__ = [
    "ADAPTERS",
    "AVAILABLE_TARGETS",
    "DEFAULT_TARGET",
    "ClaudeAdapter",
    "CopilotAdapter",
    "CursorAdapter",
    "DialectId",
    "DialectMetadata",
    "IDialectAdapter",
    "WindsurfAdapter",
    "dialect_metadata",
    "get_adapter",
]
