"""A small state machine for the controller's lifecycle."""

from __future__ import annotations

from enum import Enum, auto


class LifecycleState(Enum):
    UNCONFIGURED = auto()
    INACTIVE = auto()
    ACTIVE = auto()
    FINALIZED = auto()
    ERROR = auto()


class LifecycleError(Exception):
    """Raised when a lifecycle transition is not allowed."""


_ALLOWED = frozenset(
    {
        (LifecycleState.UNCONFIGURED, LifecycleState.INACTIVE),
        (LifecycleState.INACTIVE, LifecycleState.ACTIVE),
        (LifecycleState.ACTIVE, LifecycleState.INACTIVE),
        (LifecycleState.INACTIVE, LifecycleState.FINALIZED),
    }
)


class LifecycleManager:
    """Track the lifecycle state and allow only the permitted transitions."""

    def __init__(self) -> None:
        self._state = LifecycleState.UNCONFIGURED

    @property
    def state(self) -> LifecycleState:
        return self._state

    def transition(self, target: LifecycleState) -> None:
        """Move to ``target``, raising LifecycleError if that is not allowed."""
        if (self._state, target) not in _ALLOWED:
            raise LifecycleError(
                f"Transition not allowed: {self._state.name} -> {target.name}"
            )
        self._state = target