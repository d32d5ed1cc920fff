"""
Timer domain module.

Provides the work/break timeline, the single-threaded cycle scheduler and
operating mode selection.
"""

from .models import CycleEvent, EventKind, OperatingMode
from .modes import (
    finish_session,
    is_url,
    resolve_mode,
    restore_audio,
    select_mode,
    start_break,
    start_work,
)
from .schedule import build_timeline, total_duration_seconds
from .scheduler import CycleScheduler

__all__ = [
    # Models
    "CycleEvent",
    "EventKind",
    "OperatingMode",
    # Modes
    "finish_session",
    "is_url",
    "resolve_mode",
    "restore_audio",
    "select_mode",
    "start_break",
    "start_work",
    # Timeline
    "build_timeline",
    "total_duration_seconds",
    "CycleScheduler",
]
