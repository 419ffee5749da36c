"""Serializable view of the session state shared with other processes."""

from __future__ import annotations

from pydantic import BaseModel, Field


class StatusSnapshot(BaseModel):
    """Point-in-time session status written to the status file.

    There is no schema version; readers and writers must agree on these
    fields.
    """

    phase: str = Field(description="Phase kind: idle, work, short_break, long_break")
    remaining_seconds: int = Field(ge=0)
    session_name: str
    session_progress: float = Field(ge=0.0, le=1.0)
    is_paused: bool = False
    cycle_position: int = Field(default=0, ge=0)

    @property
    def clock_text(self) -> str:
        """Remaining time as MM:SS."""
        mins, secs = divmod(self.remaining_seconds, 60)
        return f"{mins:02d}:{secs:02d}"

    @classmethod
    def idle(cls) -> "StatusSnapshot":
        return cls(
            phase="idle",
            remaining_seconds=0,
            session_name="Idle",
            session_progress=0.0,
        )
