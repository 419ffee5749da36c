"""Work/break durations and lap counts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

WORK_DURATION = 25 * 60  # seconds
SHORT_BREAK_DURATION = 5 * 60
LONG_BREAK_DURATION = 15 * 60

WORK_LAPS = 10
SHORT_BREAK_LAPS = 3
SESSIONS_BEFORE_LONG_BREAK = 4


class PhaseKind(str, Enum):
    """Kind of a segment in the work/break cycle."""

    IDLE = "idle"
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    PhaseKind.IDLE: "Idle",
    PhaseKind.WORK: "Work",
    PhaseKind.SHORT_BREAK: "Short Break",
    PhaseKind.LONG_BREAK: "Long Break",
}


@dataclass(frozen=True)
class DurationPolicy:
    """Stateless duration and lap arithmetic for the Pomodoro cycle.

    Every lap is a full-length interval: finishing lap ``n`` of a Work phase
    starts lap ``n + 1`` with the whole work duration again. Set the lap
    counts to 1 for a classic single-interval cycle.
    """

    work: float = WORK_DURATION
    short_break: float = SHORT_BREAK_DURATION
    long_break: float = LONG_BREAK_DURATION
    work_laps: int = WORK_LAPS
    short_break_laps: int = SHORT_BREAK_LAPS
    sessions_before_long_break: int = SESSIONS_BEFORE_LONG_BREAK

    def __post_init__(self) -> None:
        for name in ("work", "short_break", "long_break"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} duration must be positive")
        for name in ("work_laps", "short_break_laps", "sessions_before_long_break"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1")

    def duration_for(self, kind: PhaseKind) -> float:
        """Full duration of one interval of *kind* (0 for Idle)."""
        if kind is PhaseKind.WORK:
            return self.work
        if kind is PhaseKind.SHORT_BREAK:
            return self.short_break
        if kind is PhaseKind.LONG_BREAK:
            return self.long_break
        return 0.0

    def laps_for(self, kind: PhaseKind) -> int:
        """Number of laps in a phase of *kind*; 0 where laps don't apply."""
        if kind is PhaseKind.WORK:
            return self.work_laps
        if kind is PhaseKind.SHORT_BREAK:
            return self.short_break_laps
        return 0


DEFAULT_POLICY = DurationPolicy()
