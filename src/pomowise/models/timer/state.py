"""Session state machine for the work/break cycle."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from .policy import DEFAULT_POLICY, DurationPolicy, PhaseKind
from .snapshot import StatusSnapshot

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

NS_PER_SECOND = 1_000_000_000


def to_ns(seconds: float) -> int:
    """Convert a clock reading or duration in seconds to whole nanoseconds."""
    return round(seconds * NS_PER_SECOND)


@dataclass(frozen=True)
class Phase:
    """A non-paused segment of the cycle. Pausing is tracked separately."""

    kind: PhaseKind
    lap: int = 0

    @classmethod
    def idle(cls) -> "Phase":
        return cls(PhaseKind.IDLE)

    @classmethod
    def work(cls, lap: int = 1) -> "Phase":
        return cls(PhaseKind.WORK, lap)

    @classmethod
    def short_break(cls, lap: int = 1) -> "Phase":
        return cls(PhaseKind.SHORT_BREAK, lap)

    @classmethod
    def long_break(cls) -> "Phase":
        return cls(PhaseKind.LONG_BREAK)


@dataclass
class SessionClock:
    """Mutable timing state of one session.

    ``remaining_ns`` is kept in integer nanoseconds so that a run of ticks
    whose deltas add up to a duration charges exactly that duration.
    ``last_tick`` is set exactly when the clock is running (not idle and not
    paused).
    """

    phase: Phase = field(default_factory=Phase.idle)
    remaining_ns: int = 0
    cycle_position: int = 0
    last_tick: float | None = None
    paused: bool = False


class SessionStateMachine:
    """Tracks work/break/pause phases and laps against a monotonic clock.

    Invalid calls (ticking while idle, pausing while idle, resetting an idle
    session) are no-ops.
    """

    def __init__(
        self,
        policy: DurationPolicy = DEFAULT_POLICY,
        clock: Clock = time.monotonic,
    ):
        self.policy = policy
        self._clock = clock
        self.state = SessionClock()

    # -- read-only views ---------------------------------------------------

    @property
    def phase(self) -> Phase:
        """The underlying phase, seen through pause."""
        return self.state.phase

    @property
    def remaining(self) -> float:
        """Remaining time of the current interval in seconds."""
        return self.state.remaining_ns / NS_PER_SECOND

    @property
    def remaining_seconds(self) -> int:
        """Remaining time rounded up to whole seconds, for display."""
        return max(0, -(-self.state.remaining_ns // NS_PER_SECOND))

    @property
    def cycle_position(self) -> int:
        return self.state.cycle_position

    @property
    def is_idle(self) -> bool:
        return self.state.phase.kind is PhaseKind.IDLE

    @property
    def is_paused(self) -> bool:
        return self.state.paused

    @property
    def is_running(self) -> bool:
        return not self.is_idle and not self.is_paused

    # -- operations --------------------------------------------------------

    def start(self) -> None:
        """Begin a fresh cycle at the first work lap."""
        self.state = SessionClock(
            phase=Phase.work(1),
            remaining_ns=to_ns(self.policy.work),
            cycle_position=0,
            last_tick=self._clock(),
        )
        logger.debug("session started")

    def tick(self) -> None:
        """Charge the time elapsed since the last tick against ``remaining``.

        Uses the real elapsed delta, so accuracy does not depend on how often
        the caller ticks. Overshoot past the end of an interval is dropped.
        """
        if not self.is_running or self.state.last_tick is None:
            return

        now = self._clock()
        elapsed_ns = max(0, to_ns(now) - to_ns(self.state.last_tick))
        self.state.last_tick = now

        if elapsed_ns >= self.state.remaining_ns:
            self.state.remaining_ns = 0
            self.advance_state()
        else:
            self.state.remaining_ns -= elapsed_ns

    def advance_state(self) -> None:
        """Move to the next interval of the cycle.

        A paused session is left as it is; resume it first.
        """
        s = self.state
        if s.paused:
            return
        kind = s.phase.kind
        policy = self.policy

        if kind is PhaseKind.IDLE:
            self.start()
            return

        if kind is PhaseKind.WORK:
            if s.phase.lap < policy.work_laps:
                next_phase = Phase.work(s.phase.lap + 1)
            else:
                s.cycle_position += 1
                if s.cycle_position >= policy.sessions_before_long_break:
                    next_phase = Phase.long_break()
                else:
                    next_phase = Phase.short_break(1)
        elif kind is PhaseKind.SHORT_BREAK:
            if s.phase.lap < policy.short_break_laps:
                next_phase = Phase.short_break(s.phase.lap + 1)
            else:
                next_phase = Phase.work(1)
        else:
            s.cycle_position = 0
            next_phase = Phase.work(1)

        logger.debug(
            "advance %s lap %d -> %s lap %d (cycle %d)",
            kind.value,
            s.phase.lap,
            next_phase.kind.value,
            next_phase.lap,
            s.cycle_position,
        )
        s.phase = next_phase
        s.remaining_ns = to_ns(policy.duration_for(next_phase.kind))
        s.last_tick = self._clock()

    def toggle_pause(self) -> None:
        """Freeze or resume the countdown. No time is charged while paused."""
        s = self.state
        if s.paused:
            s.paused = False
            s.last_tick = self._clock()
        elif self.is_idle:
            return
        else:
            s.paused = True
            s.last_tick = None

    def reset_current_session(self) -> None:
        """Restart the current phase kind from lap 1 with its full duration.

        A paused session resumes with the fresh interval.
        """
        kind = self.state.phase.kind
        if kind is PhaseKind.IDLE:
            return
        lap = 1 if self.policy.laps_for(kind) else 0
        s = self.state
        s.phase = Phase(kind, lap)
        s.remaining_ns = to_ns(self.policy.duration_for(kind))
        s.paused = False
        s.last_tick = self._clock()

    # -- derived values ----------------------------------------------------

    def session_progress(self) -> float:
        """Fraction of the current interval already elapsed, in [0, 1]."""
        total = self.policy.duration_for(self.state.phase.kind)
        if total <= 0:
            return 0.0
        return min(1.0, max(0.0, 1.0 - self.state.remaining_ns / to_ns(total)))

    def current_lap(self) -> int:
        return self.state.phase.lap

    def total_laps(self) -> int:
        return self.policy.laps_for(self.state.phase.kind)

    def session_name(self) -> str:
        name = self.state.phase.kind.label
        if self.is_paused:
            return f"{name} (Paused)"
        return name

    def snapshot(self) -> StatusSnapshot:
        return StatusSnapshot(
            phase=self.state.phase.kind.value,
            remaining_seconds=self.remaining_seconds,
            session_name=self.session_name(),
            session_progress=round(self.session_progress(), 3),
            is_paused=self.is_paused,
            cycle_position=self.state.cycle_position,
        )
