"""Tests for work/break timeline calculation."""

import pytest

from focus_minion.core.config import TimerConfig
from focus_minion.core.exceptions import ConfigValidationError
from focus_minion.domain.timer.models import EventKind
from focus_minion.domain.timer.schedule import build_timeline, total_duration_seconds


def offsets(timeline, kind: EventKind) -> list[float]:
    """Offsets in minutes for one event kind."""
    return [event.offset_minutes for event in timeline if event.kind is kind]


class TestBuildTimeline:
    """Tests for build_timeline function."""

    def test_default_session_without_final_break(self) -> None:
        """25/5 x4: completion takes the place of the fourth break."""
        timeline = build_timeline(TimerConfig(work_minutes=25, break_minutes=5, cycle_count=4))

        assert offsets(timeline, EventKind.WORK_START) == [0, 30, 60, 90]
        assert offsets(timeline, EventKind.BREAK_START) == [25, 55, 85]
        assert offsets(timeline, EventKind.COMPLETE) == [115]

    def test_default_session_with_final_break(self) -> None:
        """With a final break there is a break at 115 and completion at 120."""
        timeline = build_timeline(
            TimerConfig(
                work_minutes=25,
                break_minutes=5,
                cycle_count=4,
                include_final_break=True,
            )
        )

        assert offsets(timeline, EventKind.WORK_START) == [0, 30, 60, 90]
        assert offsets(timeline, EventKind.BREAK_START) == [25, 55, 85, 115]
        assert offsets(timeline, EventKind.COMPLETE) == [120]

    def test_single_cycle_without_final_break(self) -> None:
        """One cycle: one work start, no breaks, completion when work ends."""
        timeline = build_timeline(TimerConfig(work_minutes=25, break_minutes=5, cycle_count=1))

        assert [event.kind for event in timeline] == [
            EventKind.WORK_START,
            EventKind.COMPLETE,
        ]
        assert timeline[0].offset_seconds == 0
        assert timeline[1].offset_seconds == 25 * 60

    def test_cycle_numbers_are_one_indexed(self) -> None:
        timeline = build_timeline(TimerConfig(cycle_count=3))
        work_cycles = [e.cycle for e in timeline if e.kind is EventKind.WORK_START]
        break_cycles = [e.cycle for e in timeline if e.kind is EventKind.BREAK_START]

        assert work_cycles == [1, 2, 3]
        assert break_cycles == [1, 2]

    @pytest.mark.parametrize(
        "work,brk,cycles,final_break",
        [
            (25, 5, 4, False),
            (25, 5, 4, True),
            (1, 1, 1, False),
            (1, 1, 1, True),
            (50, 10, 2, False),
            (0.5, 0.25, 6, True),
        ],
    )
    def test_event_counts_and_ordering(
        self, work: float, brk: float, cycles: int, final_break: bool
    ) -> None:
        """Counts match the cycle count and offsets strictly increase."""
        timeline = build_timeline(
            TimerConfig(
                work_minutes=work,
                break_minutes=brk,
                cycle_count=cycles,
                include_final_break=final_break,
            )
        )

        kinds = [event.kind for event in timeline]
        assert kinds.count(EventKind.WORK_START) == cycles
        assert kinds.count(EventKind.BREAK_START) == cycles - (0 if final_break else 1)
        assert kinds.count(EventKind.COMPLETE) == 1
        assert kinds[-1] is EventKind.COMPLETE

        times = [event.offset_seconds for event in timeline]
        assert all(a < b for a, b in zip(times, times[1:]))

    def test_break_follows_work_in_same_cycle(self) -> None:
        timeline = build_timeline(TimerConfig(cycle_count=4, include_final_break=True))
        for cycle in range(1, 5):
            work = next(
                e for e in timeline if e.kind is EventKind.WORK_START and e.cycle == cycle
            )
            brk = next(
                e for e in timeline if e.kind is EventKind.BREAK_START and e.cycle == cycle
            )
            assert brk.offset_seconds - work.offset_seconds == 25 * 60

    def test_total_duration(self) -> None:
        assert total_duration_seconds(TimerConfig()) == 115 * 60
        assert total_duration_seconds(TimerConfig(include_final_break=True)) == 120 * 60


class TestTimerConfigValidation:
    """Tests for TimerConfig range checks."""

    @pytest.mark.parametrize("minutes", [0, -5])
    def test_non_positive_work_rejected(self, minutes: float) -> None:
        with pytest.raises(ConfigValidationError, match="Work interval"):
            TimerConfig(work_minutes=minutes)

    @pytest.mark.parametrize("minutes", [0, -1])
    def test_non_positive_break_rejected(self, minutes: float) -> None:
        with pytest.raises(ConfigValidationError, match="Break interval"):
            TimerConfig(break_minutes=minutes)

    @pytest.mark.parametrize("minutes", [float("nan"), float("inf"), 1e308])
    def test_non_finite_work_rejected(self, minutes: float) -> None:
        with pytest.raises(ConfigValidationError, match="Work interval"):
            TimerConfig(work_minutes=minutes)

    @pytest.mark.parametrize("minutes", [float("nan"), float("inf")])
    def test_non_finite_break_rejected(self, minutes: float) -> None:
        with pytest.raises(ConfigValidationError, match="Break interval"):
            TimerConfig(break_minutes=minutes)

    @pytest.mark.parametrize("cycles", [0, -3])
    def test_cycle_count_below_one_rejected(self, cycles: int) -> None:
        with pytest.raises(ConfigValidationError, match="Cycle count"):
            TimerConfig(cycle_count=cycles)

    def test_durations_in_seconds(self) -> None:
        config = TimerConfig(work_minutes=25, break_minutes=5)
        assert config.work_seconds == 1500
        assert config.break_seconds == 300
        assert config.cycle_seconds == 1800
