"""
Configuration management for Focus Minion
"""

import math
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .exceptions import ConfigValidationError


def _is_positive_duration(minutes: float) -> bool:
    """True for a finite duration above zero that stays finite in seconds."""
    return math.isfinite(minutes * 60) and minutes > 0


@dataclass(frozen=True)
class TimerConfig:
    """Settings for a single timer run, resolved from CLI flags.

    Raises:
        ConfigValidationError: If a duration is not positive or
            cycle_count is below 1
    """

    work_minutes: float = 25
    break_minutes: float = 5
    cycle_count: int = 4
    playlist_name: Optional[str] = None
    search_enabled: bool = False
    include_final_break: bool = False
    youtube_url: Optional[str] = None

    def __post_init__(self) -> None:
        if not _is_positive_duration(self.work_minutes):
            raise ConfigValidationError(
                f"Work interval must be greater than 0 minutes (got {self.work_minutes})"
            )
        if not _is_positive_duration(self.break_minutes):
            raise ConfigValidationError(
                f"Break interval must be greater than 0 minutes (got {self.break_minutes})"
            )
        if self.cycle_count < 1:
            raise ConfigValidationError(
                f"Cycle count must be at least 1 (got {self.cycle_count})"
            )

    @property
    def work_seconds(self) -> float:
        return self.work_minutes * 60

    @property
    def break_seconds(self) -> float:
        return self.break_minutes * 60

    @property
    def cycle_seconds(self) -> float:
        return self.work_seconds + self.break_seconds


@dataclass
class TimerDefaults:
    """Default timer values used when CLI flags are omitted."""

    work_minutes: float = 25
    break_minutes: float = 5
    cycles: int = 4
    last_break: bool = False

    def validate(self) -> None:
        """Validate default timer values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not (
            _is_positive_duration(self.work_minutes)
            and _is_positive_duration(self.break_minutes)
        ):
            raise ValueError("work_minutes and break_minutes must be positive")
        if self.cycles < 1:
            raise ValueError("cycles must be at least 1")


@dataclass
class PlayerConfig:
    """Configuration for the media player and system volume."""

    app_name: str = "Music"
    settle_delay: float = 0.5  # Seconds between "play" and shuffle/repeat setup
    fallback_volume: int = 50
    command_timeout: float = 10.0

    def validate(self) -> None:
        """Validate player configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not self.app_name.strip():
            raise ValueError("app_name must not be empty")
        if not 0 <= self.fallback_volume <= 100:
            raise ValueError("fallback_volume must be between 0 and 100")
        if self.settle_delay < 0 or self.command_timeout <= 0:
            raise ValueError("settle_delay and command_timeout must be positive")


@dataclass
class SoundConfig:
    """Configuration for the completion cue."""

    completion_sound: str = "/System/Library/Sounds/Hero.aiff"
    repeat: int = 5
    gap_seconds: float = 0.35


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/focus-minion/focus-minion.log)
    )
    max_file_size_mb: int = 10  # Maximum log file size before rotation
    backup_count: int = 5  # Number of backup files to keep


@dataclass
class Config:
    """Main configuration object."""

    timer: TimerDefaults = field(default_factory=TimerDefaults)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    sound: SoundConfig = field(default_factory=SoundConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "focus-minion"
    return Path.home() / ".config" / "focus-minion"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/focus-minion (or ~/.config/focus-minion)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "focus-minion"
    return Path.home() / ".local" / "share" / "focus-minion"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Focus Minion Configuration

[timer]
# Length of each work interval in minutes
work_minutes = 25

# Length of each break in minutes
break_minutes = 5

# Number of work/break cycles
cycles = 4

# Also take a break after the final work interval
last_break = false

[player]
# Application that plays playlists
app_name = "Music"

# Seconds to wait after starting a playlist before setting shuffle/repeat
settle_delay = 0.5

# Volume assumed when the current volume cannot be read (0-100)
fallback_volume = 50

# Seconds before a scripting command is abandoned
command_timeout = 10.0

[sound]
# Sound played when all cycles are complete
completion_sound = "/System/Library/Sounds/Hero.aiff"

# Number of times the completion sound is played
repeat = 5

# Seconds between completion sound starts
gap_seconds = 0.35

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/focus-minion/focus-minion.log)
# log_file = "/path/to/custom/focus-minion.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of backup log files to keep
backup_count = 5
""".strip()


def load_config() -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - FOCUS_MINION_LOG_LEVEL
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = get_config_path()

    if not config_path.exists():
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(create_default_config())
            print(f"Created default configuration at: {config_path}")
        except OSError as e:
            print(f"Could not write default configuration to {config_path}: {e}")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        config = Config()

        if "timer" in toml_data:
            timer_data = toml_data["timer"]
            config.timer = TimerDefaults(
                work_minutes=timer_data.get("work_minutes", config.timer.work_minutes),
                break_minutes=timer_data.get(
                    "break_minutes", config.timer.break_minutes
                ),
                cycles=timer_data.get("cycles", config.timer.cycles),
                last_break=timer_data.get("last_break", config.timer.last_break),
            )
            try:
                config.timer.validate()
            except ValueError as e:
                print(f"Warning: Invalid timer configuration: {e}")
                print("Using default timer configuration.")
                config.timer = TimerDefaults()

        if "player" in toml_data:
            player_data = toml_data["player"]
            config.player = PlayerConfig(
                app_name=player_data.get("app_name", config.player.app_name),
                settle_delay=player_data.get(
                    "settle_delay", config.player.settle_delay
                ),
                fallback_volume=player_data.get(
                    "fallback_volume", config.player.fallback_volume
                ),
                command_timeout=player_data.get(
                    "command_timeout", config.player.command_timeout
                ),
            )
            try:
                config.player.validate()
            except ValueError as e:
                print(f"Warning: Invalid player configuration: {e}")
                print("Using default player configuration.")
                config.player = PlayerConfig()

        if "sound" in toml_data:
            sound_data = toml_data["sound"]
            config.sound = SoundConfig(
                completion_sound=str(
                    Path(
                        sound_data.get("completion_sound", config.sound.completion_sound)
                    ).expanduser()
                ),
                repeat=sound_data.get("repeat", config.sound.repeat),
                gap_seconds=sound_data.get("gap_seconds", config.sound.gap_seconds),
            )

        if "logging" in toml_data:
            logging_data = toml_data["logging"]
            log_file = logging_data.get("log_file")
            if log_file:
                log_file = str(Path(log_file).expanduser())
            config.logging = LoggingConfig(
                level=logging_data.get("level", config.logging.level).upper(),
                log_file=log_file,
                max_file_size_mb=logging_data.get(
                    "max_file_size_mb", config.logging.max_file_size_mb
                ),
                backup_count=logging_data.get(
                    "backup_count", config.logging.backup_count
                ),
            )

        return _apply_env_overrides(config)

    except Exception as e:
        print(f"Error loading configuration from {config_path}: {e}")
        print("Using default configuration.")
        return _apply_env_overrides(Config())


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to a loaded config."""
    log_level = os.environ.get("FOCUS_MINION_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()
    return config

