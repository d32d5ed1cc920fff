"""
Focus Minion CLI - Entry point

Parses flags into a validated TimerConfig and hands off to the session
runner.
"""

import argparse
import sys
from typing import Optional, Sequence

from loguru import logger

from focus_minion.core.config import Config, TimerConfig, load_config
from focus_minion.core.exceptions import ConfigValidationError
from focus_minion.core.output import setup_from_config

USAGE_EPILOG = """
examples:
  focus-minion                          mute the system during breaks
  focus-minion -w 50 -b 10 -i 2         two 50/10 cycles
  focus-minion --playlist "Deep Focus"  pause a Music playlist during breaks
  focus-minion https://youtu.be/...     play a video, mute during breaks
"""


def build_parser(config: Optional[Config] = None) -> argparse.ArgumentParser:
    """Create the argument parser, taking defaults from the config file."""
    defaults = (config or Config()).timer

    parser = argparse.ArgumentParser(
        prog="focus-minion",
        description="Focus Minion - a Pomodoro-style focus timer for macOS",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "url",
        nargs="?",
        default=None,
        help="YouTube (or any http/https) link to open",
    )
    parser.add_argument(
        "-w",
        "--work",
        type=float,
        default=defaults.work_minutes,
        help=f"Duration of work intervals in minutes (default: {defaults.work_minutes:g})",
    )
    parser.add_argument(
        "-b",
        "--break",
        dest="break_minutes",
        type=float,
        default=defaults.break_minutes,
        help=f"Duration of break intervals in minutes (default: {defaults.break_minutes:g})",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=int,
        default=defaults.cycles,
        help=f"Number of work/break cycles to run (default: {defaults.cycles})",
    )
    parser.add_argument(
        "--playlist",
        help="The name of an Apple Music playlist to play",
    )
    parser.add_argument(
        "--search",
        action="store_true",
        help="If a local playlist isn't found, search Apple Music",
    )
    parser.add_argument(
        "--last-break",
        action=argparse.BooleanOptionalAction,
        default=defaults.last_break,
        help="Include the final break period after the last work interval "
        "(--no-last-break overrides a config default)",
    )
    parser.add_argument(
        "--plan",
        action="store_true",
        help="Print the session timeline and exit",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log file level (DEBUG, INFO, WARNING, ERROR)",
    )

    return parser


def timer_config_from_args(args: argparse.Namespace) -> TimerConfig:
    """Build a validated TimerConfig from parsed arguments.

    Raises:
        ConfigValidationError: If durations or cycle count are out of range
    """
    return TimerConfig(
        work_minutes=args.work,
        break_minutes=args.break_minutes,
        cycle_count=args.interval,
        playlist_name=args.playlist,
        search_enabled=args.search,
        include_final_break=args.last_break,
        youtube_url=args.url,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the focus-minion command."""
    config = load_config()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    try:
        timer_config = timer_config_from_args(args)
    except ConfigValidationError as e:
        parser.error(str(e))

    if args.plan:
        from .main import render_plan

        render_plan(timer_config)
        sys.exit(0)

    if args.log_level:
        config.logging.level = args.log_level
    setup_from_config(config.logging)
    logger.info(
        f"Starting session: work={timer_config.work_minutes}, "
        f"break={timer_config.break_minutes}, cycles={timer_config.cycle_count}, "
        f"last_break={timer_config.include_final_break}"
    )

    from .main import install_signal_handlers, run_session

    install_signal_handlers()
    sys.exit(run_session(timer_config, config))


if __name__ == "__main__":
    main()
