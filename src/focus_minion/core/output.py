"""
Unified output system using Loguru.
Status lines go to the console with a wall-clock prefix and to the log file.
"""

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from .config import LoggingConfig, get_data_dir
from .console import safe_print

# Console colors per log level
_LEVEL_STYLES = {
    "debug": "cyan",
    "info": None,
    "warning": "yellow",
    "error": "red",
}

# Overridable clock for status timestamps
_now: Callable[[], datetime] = datetime.now


def get_log_file_path() -> Path:
    """Get the default path to the log file."""
    return get_data_dir() / "focus-minion.log"


def setup_loguru(
    log_file: Optional[Path] = None,
    level: str = "INFO",
    rotation_mb: int = 10,
    retention: int = 5,
) -> Path:
    """
    Configure loguru for file-only logging (status lines handle the console).

    Args:
        log_file: Path to log file (default: ~/.local/share/focus-minion/focus-minion.log)
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
        rotation_mb: Rotate the file once it reaches this size
        retention: Number of rotated files to keep

    Returns:
        The path logs are written to
    """
    log_path = log_file if log_file else get_log_file_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # Remove default stderr handler
    logger.remove()

    logger.add(
        log_path,
        rotation=f"{rotation_mb} MB",
        retention=retention,
        level=level.upper(),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    logger.info(f"Loguru initialized: {log_path} (level={level})")
    return log_path


def setup_from_config(config: LoggingConfig) -> Path:
    """Configure logging from the [logging] config section."""
    log_file = Path(config.log_file) if config.log_file else None
    return setup_loguru(
        log_file=log_file,
        level=config.level,
        rotation_mb=config.max_file_size_mb,
        retention=config.backup_count,
    )


def format_timestamp(moment: datetime) -> str:
    """Format a wall-clock time as 'hh:mm AM'."""
    return moment.strftime("%I:%M %p")


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to the log file AND prints a timestamped status line.

    Use this instead of print() for user-facing messages.

    Args:
        message: User-facing message
        level: Log level (debug, info, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)

    if level == "debug":
        return

    safe_print(f"[{format_timestamp(_now())}] {message}", style=_LEVEL_STYLES.get(level))
