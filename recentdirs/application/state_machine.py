"""Feature state: disabled or enabled."""

from enum import Enum

from recentdirs.core.logger import get_logger

logger = get_logger("state_machine")


class FeatureState(Enum):
    DISABLED = "disabled"
    ENABLED = "enabled"


class StateMachine:
    """DISABLED -> ENABLED -> DISABLED."""

    def __init__(self) -> None:
        self._state = FeatureState.DISABLED

    @property
    def state(self) -> FeatureState:
        return self._state

    def set_state(self, s: FeatureState) -> None:
        logger.debug("State %s -> %s", self._state.value, s.value)
        self._state = s
