"""Session context for explicit state passing.

Holds everything the timer handlers need - the resolved timer settings, the
operating mode and the volume to restore - instead of module-level globals.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from focus_minion.core.config import Config, PlayerConfig, SoundConfig, TimerConfig
from focus_minion.domain.timer.models import OperatingMode


@dataclass(frozen=True)
class SessionContext:
    """Immutable session state, built once by mode selection.

    Attributes:
        timer: Validated timer settings for this run
        mode: Operating mode chosen at startup
        original_volume: System volume captured at startup (None in music mode)
        player: Player settings from the config file
        sound: Completion sound settings from the config file
    """

    timer: TimerConfig
    mode: OperatingMode = OperatingMode.SYSTEM
    original_volume: Optional[int] = None
    player: PlayerConfig = field(default_factory=PlayerConfig)
    sound: SoundConfig = field(default_factory=SoundConfig)

    @classmethod
    def create(cls, timer: TimerConfig, config: Optional[Config] = None) -> "SessionContext":
        """Create an initial context in system mode.

        Args:
            timer: Validated timer settings
            config: Application configuration (defaults when omitted)
        """
        config = config or Config()
        return cls(timer=timer, player=config.player, sound=config.sound)

    def with_mode(
        self, mode: OperatingMode, original_volume: Optional[int] = None
    ) -> "SessionContext":
        """Return new context with the selected mode and captured volume."""
        return replace(self, mode=mode, original_volume=original_volume)

    @property
    def restore_level(self) -> int:
        """Volume to write back when unmuting."""
        if self.original_volume is None:
            return self.player.fallback_volume
        return self.original_volume
