from enum import Enum

from ai_rules.models import ActionStatus, InstallState


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


ACTION_STATUS_STYLE = {
    ActionStatus.CREATE: UIStyle.GREEN.value,
    ActionStatus.UPDATE: UIStyle.CYAN.value,
    ActionStatus.NOOP: UIStyle.DIM.value,
}

INSTALL_STATE_STYLE = {
    InstallState.NOT_INSTALLED: UIStyle.YELLOW.value,
    InstallState.UP_TO_DATE: UIStyle.GREEN.value,
    InstallState.UPDATE_AVAILABLE: UIStyle.YELLOW.value,
}
