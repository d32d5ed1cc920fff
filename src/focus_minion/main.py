"""
Focus Minion - session runner

Selects the operating mode, registers the full timeline and blocks until the
session completes or is interrupted.
"""

import signal
from typing import Optional

from loguru import logger

from focus_minion.context import SessionContext
from focus_minion.core.config import Config, TimerConfig
from focus_minion.core.console import get_console, get_error_console
from focus_minion.core.exceptions import PlaylistNotFoundError
from focus_minion.core.output import log
from focus_minion.core.process import check_platform_support
from focus_minion.domain import timer
from focus_minion.domain.timer import CycleScheduler, EventKind, OperatingMode

# Exit status after Ctrl+C / SIGTERM (128 + SIGINT)
EXIT_INTERRUPTED = 130


def _raise_interrupt(signum, frame) -> None:
    raise KeyboardInterrupt(f"signal {signum}")


def install_signal_handlers() -> None:
    """Treat SIGTERM like Ctrl+C so the session can clean up."""
    signal.signal(signal.SIGTERM, _raise_interrupt)


def run_session(
    timer_config: TimerConfig,
    config: Optional[Config] = None,
    scheduler: Optional[CycleScheduler] = None,
) -> int:
    """Run a complete focus session.

    Args:
        timer_config: Validated timer settings from the CLI
        config: Application configuration
        scheduler: Scheduler to use (a real-time one by default)

    Returns:
        Exit code (0 completed, 1 playlist not found, 130 interrupted)
    """
    config = config or Config()
    scheduler = scheduler or CycleScheduler()

    supported, reason = check_platform_support()
    if not supported:
        log(f"{reason} Audio control will not work.", level="warning")

    get_console().print("--- Focus Minion Timer Initialized ---", style="bold")

    context = SessionContext.create(timer_config, config)
    try:
        context = timer.select_mode(context, defer=scheduler.call_later)
    except PlaylistNotFoundError as e:
        logger.error(str(e))
        console = get_error_console()
        console.print(f"\n❌ Error: {e}", style="bold red", markup=False)
        console.print(
            "   To search the Apple Music catalog instead, add the --search flag.\n",
            markup=False,
        )
        return 1
    except KeyboardInterrupt:
        scheduler.cancel_all()
        log("Interrupted during startup.", level="warning")
        # Nothing is muted yet; only a started playlist needs undoing
        if timer.resolve_mode(context) is OperatingMode.MUSIC:
            timer.restore_audio(context.with_mode(OperatingMode.MUSIC))
        return EXIT_INTERRUPTED

    logger.info(f"Operating mode: {context.mode.value}")

    scheduler.schedule(
        timer_config,
        on_work_start=lambda cycle: timer.start_work(context, cycle),
        on_break_start=lambda cycle: timer.start_break(context, cycle),
        on_complete=lambda: timer.finish_session(context),
    )

    try:
        scheduler.run()
    except KeyboardInterrupt:
        scheduler.cancel_all()
        log("Interrupted. Restoring audio before exit.", level="warning")
        timer.restore_audio(context)
        return EXIT_INTERRUPTED

    logger.info("Session complete")
    return 0


def render_plan(timer_config: TimerConfig) -> None:
    """Print the session timeline without running it."""
    from rich.table import Table

    labels = {
        EventKind.WORK_START: "Work",
        EventKind.BREAK_START: "Break",
        EventKind.COMPLETE: "Complete",
    }

    table = Table(title="Focus Minion timeline")
    table.add_column("At (min)", justify="right")
    table.add_column("Event")
    table.add_column("Cycle", justify="right")

    for event in timer.build_timeline(timer_config):
        cycle = "" if event.kind is EventKind.COMPLETE else str(event.cycle)
        table.add_row(f"{event.offset_minutes:g}", labels[event.kind], cycle)

    get_console().print(table)
