"""
Timer domain models.

Contains data structures for operating modes and the cycle timeline.
"""

from dataclasses import dataclass
from enum import Enum


class OperatingMode(Enum):
    """How breaks are made quiet."""

    SYSTEM = "system"  # Mute / restore system volume
    MUSIC = "music"  # Pause / resume a Music playlist
    YOUTUBE = "youtube"  # Video in the browser, muted via system volume

    @property
    def uses_system_volume(self) -> bool:
        return self is not OperatingMode.MUSIC


class EventKind(Enum):
    WORK_START = "work_start"
    BREAK_START = "break_start"
    COMPLETE = "complete"


@dataclass(frozen=True)
class CycleEvent:
    """One entry of the timer timeline.

    Offsets are seconds from the moment scheduling started.
    """

    offset_seconds: float
    kind: EventKind
    cycle: int  # 1-indexed; the last cycle number for COMPLETE

    @property
    def offset_minutes(self) -> float:
        return self.offset_seconds / 60
