"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Process execution (subprocess)
- Status output and logging (Loguru)
- Console management (Rich)

Clean architecture principle: The core layer has no dependencies on
domain or application layers.
"""

# Configuration
from .config import (
    Config,
    TimerConfig,
    load_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    create_default_config,
)

# Errors
from .exceptions import (
    ConfigValidationError,
    FocusMinionError,
    PlaylistNotFoundError,
)

# Processes
from .process import (
    CommandResult,
    check_platform_support,
    run_command,
    spawn_command,
)

# Output
from .output import log, setup_from_config, setup_loguru

# Console
from .console import get_console, get_error_console, safe_print

__all__ = [
    # Config
    "Config",
    "TimerConfig",
    "load_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "create_default_config",
    # Errors
    "ConfigValidationError",
    "FocusMinionError",
    "PlaylistNotFoundError",
    # Processes
    "CommandResult",
    "check_platform_support",
    "run_command",
    "spawn_command",
    # Output
    "log",
    "setup_from_config",
    "setup_loguru",
    # Console
    "get_console",
    "get_error_console",
    "safe_print",
]
