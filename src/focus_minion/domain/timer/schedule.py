"""
Deterministic timeline calculation for work/break cycles.

Every event offset is computed up front from one start time, so the whole
session can be inspected (and tested) without waiting for real time.
"""

from focus_minion.core.config import TimerConfig

from .models import CycleEvent, EventKind


def build_timeline(config: TimerConfig) -> list[CycleEvent]:
    """Compute every event of a timer session.

    For cycle k (1-indexed) work starts at (k-1) * cycle and the break at
    (k-1) * cycle + work. The final break only exists with
    include_final_break; without it completion takes the final break's
    slot, otherwise completion comes after the final break ends.

    Args:
        config: Validated timer configuration

    Returns:
        Events sorted by offset
    """
    work = config.work_seconds
    cycle = config.cycle_seconds
    last = config.cycle_count

    events: list[CycleEvent] = []
    for k in range(1, last + 1):
        cycle_start = (k - 1) * cycle
        events.append(CycleEvent(cycle_start, EventKind.WORK_START, k))

        if k < last or config.include_final_break:
            events.append(CycleEvent(cycle_start + work, EventKind.BREAK_START, k))

    if config.include_final_break:
        complete_at = last * cycle
    else:
        complete_at = (last - 1) * cycle + work
    events.append(CycleEvent(complete_at, EventKind.COMPLETE, last))

    return sorted(events, key=lambda event: event.offset_seconds)


def total_duration_seconds(config: TimerConfig) -> float:
    """Seconds from the first work start until completion."""
    return build_timeline(config)[-1].offset_seconds
