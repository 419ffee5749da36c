"""Configuration models.

Every setting has a default, so an empty ``config.json`` is a valid one.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from pomowise.models.timer.policy import DurationPolicy


class TimerConfig(BaseModel):
    """Interval lengths (minutes) and lap counts."""

    work_minutes: float = Field(default=25, gt=0)
    short_break_minutes: float = Field(default=5, gt=0)
    long_break_minutes: float = Field(default=15, gt=0)
    work_laps: int = Field(default=10, ge=1)
    short_break_laps: int = Field(default=3, ge=1)
    sessions_before_long_break: int = Field(default=4, ge=1)


class DisplayConfig(BaseModel):
    """Look of the full-screen timer."""

    theme: str | None = Field(default=None, description="Theme id; random if unset")
    font: str = Field(default="block3d")
    adaptive_font: bool = Field(default=True)
    font_strategy: Literal["category", "best_fit"] = Field(default="category")
    auto_rotate: bool = Field(default=True)
    rotation_seconds: float = Field(default=150, gt=0)
    show_hints: bool = Field(default=True)


class NotificationConfig(BaseModel):
    """Desktop notification settings."""

    enabled: bool = Field(default=True)


class StatusConfig(BaseModel):
    """Status file shared with other processes."""

    enabled: bool = Field(default=True)
    path: str | None = Field(default=None, description="Defaults to the data dir")


class AppConfig(BaseModel):
    """Main pomowise configuration"""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)
    status: StatusConfig = Field(default_factory=StatusConfig)
    seed: int | None = Field(default=None, description="Seed for theme rotation")

    def to_policy(self) -> DurationPolicy:
        """Build the duration policy the state machine runs on."""
        t = self.timer
        return DurationPolicy(
            work=t.work_minutes * 60,
            short_break=t.short_break_minutes * 60,
            long_break=t.long_break_minutes * 60,
            work_laps=t.work_laps,
            short_break_laps=t.short_break_laps,
            sessions_before_long_break=t.sessions_before_long_break,
        )
