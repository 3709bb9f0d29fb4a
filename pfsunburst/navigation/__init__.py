from .state import NavigationState
from .machine import NavigationStateMachine

__all__ = [
    "NavigationState",
    "NavigationStateMachine",
]
