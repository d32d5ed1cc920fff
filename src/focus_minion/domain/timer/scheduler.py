"""
Single-threaded cycle scheduler built on the standard library sched module.

All timeline events are registered at once against a single start time and
dispatched in offset order on the calling thread.
"""

import sched
import time
from typing import Any, Callable, Optional

from loguru import logger

from focus_minion.core.config import TimerConfig

from .models import CycleEvent, EventKind
from .schedule import build_timeline


class CycleScheduler:
    """One-shot timer queue for a focus session.

    Args:
        timefunc: Monotonic clock returning seconds
        delayfunc: Blocks for the given number of seconds

    Both clock functions can be replaced with a virtual clock in tests.
    """

    def __init__(
        self,
        timefunc: Callable[[], float] = time.monotonic,
        delayfunc: Callable[[float], Any] = time.sleep,
    ):
        self._timefunc = timefunc
        self._scheduler = sched.scheduler(timefunc, delayfunc)
        self._cancelled = False

    def schedule(
        self,
        config: TimerConfig,
        on_work_start: Callable[[int], None],
        on_break_start: Callable[[int], None],
        on_complete: Callable[[], None],
    ) -> list[CycleEvent]:
        """Register every event of the session.

        Args:
            config: Validated timer configuration
            on_work_start: Called with the cycle number when work begins
            on_break_start: Called with the cycle number when a break begins
            on_complete: Called once after the last cycle

        Returns:
            The registered timeline
        """
        timeline = build_timeline(config)
        start = self._timefunc()

        for event in timeline:
            if event.kind is EventKind.WORK_START:
                action, args = on_work_start, (event.cycle,)
            elif event.kind is EventKind.BREAK_START:
                action, args = on_break_start, (event.cycle,)
            else:
                action, args = on_complete, ()

            self._scheduler.enterabs(
                start + event.offset_seconds,
                0,
                self._dispatch,
                argument=(event, action, args),
            )

        logger.info(
            f"Scheduled {len(timeline)} events over "
            f"{timeline[-1].offset_minutes:g} minutes"
        )
        return timeline

    def call_later(self, delay: float, action: Callable[[], None]) -> sched.Event:
        """Register a one-off action delay seconds from now."""
        return self._scheduler.enter(
            delay, 0, self._dispatch, argument=(None, action, ())
        )

    def _dispatch(
        self,
        event: Optional[CycleEvent],
        action: Callable[..., None],
        args: tuple,
    ) -> None:
        if self._cancelled:
            return
        if event is not None:
            logger.debug(f"Dispatching {event.kind.value} (cycle {event.cycle})")
        try:
            action(*args)
        except Exception:
            # Handler failures must not stop the remaining timeline
            logger.exception(f"Timer handler failed: {getattr(action, '__name__', action)}")

    def run(self) -> None:
        """Block until every registered event has fired or been cancelled."""
        self._scheduler.run()

    def cancel_all(self) -> int:
        """Cancel every pending event.

        Returns:
            Number of events cancelled
        """
        self._cancelled = True
        cancelled = 0
        for event in self._scheduler.queue:
            try:
                self._scheduler.cancel(event)
                cancelled += 1
            except ValueError:
                pass  # Already fired
        if cancelled:
            logger.info(f"Cancelled {cancelled} pending timer events")
        return cancelled

    def pending_count(self) -> int:
        return len(self._scheduler.queue)

    @property
    def cancelled(self) -> bool:
        return self._cancelled
