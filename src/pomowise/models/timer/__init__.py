"""Work/break session timing."""

from .policy import DEFAULT_POLICY, DurationPolicy, PhaseKind
from .snapshot import StatusSnapshot
from .state import Phase, SessionClock, SessionStateMachine

__all__ = [
    "DEFAULT_POLICY",
    "DurationPolicy",
    "Phase",
    "PhaseKind",
    "SessionClock",
    "SessionStateMachine",
    "StatusSnapshot",
]
