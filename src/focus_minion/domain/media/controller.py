"""
Media and system-audio control for Focus Minion.

Every action here is best-effort: failures are logged and swallowed so the
timer never stops because the Music app or osascript misbehaved.
"""

import subprocess
import time
from typing import Any, Callable, Optional
from urllib.parse import quote as url_quote

from loguru import logger

from focus_minion.core.config import PlayerConfig, SoundConfig
from focus_minion.core.output import log
from focus_minion.core.process import CommandResult, run_command, spawn_command

from . import applescript

# Callback used to run an action later: defer(delay_seconds, action)
Defer = Callable[[float, Callable[[], None]], Any]

CATALOG_SEARCH_URL = "music://music.apple.com/search?term={term}"


def run_applescript(
    script: str, timeout: Optional[float] = None
) -> Optional[CommandResult]:
    """Run an AppleScript and wait for it.

    Returns:
        CommandResult on success, None if osascript failed or could not run
    """
    try:
        result = run_command(["osascript", "-e", script], timeout=timeout)
    except subprocess.TimeoutExpired:
        logger.warning(f"AppleScript timed out after {timeout}s")
        return None
    except (subprocess.SubprocessError, OSError) as e:
        logger.error(f"AppleScript error: {e}")
        return None

    if not result.success:
        logger.error(f"AppleScript error: {result.stderr.strip()}")
        return None

    return result


def fire_applescript(script: str) -> None:
    """Start an AppleScript without waiting for the result."""
    spawn_command(["osascript", "-e", script])


def get_volume(player: Optional[PlayerConfig] = None) -> int:
    """Read the system output volume.

    Falls back to player.fallback_volume (50 by default) on any failure.
    """
    player = player or PlayerConfig()
    result = run_applescript(
        applescript.get_volume_script(), timeout=player.command_timeout
    )
    if result is None:
        log(
            f"Could not get volume, defaulting to {player.fallback_volume}.",
            level="warning",
        )
        return player.fallback_volume

    try:
        return int(result.stdout.strip())
    except ValueError:
        log(
            f"Could not get volume, defaulting to {player.fallback_volume}.",
            level="warning",
        )
        logger.debug(f"Unparsable volume output: {result.stdout!r}")
        return player.fallback_volume


def set_volume(level: int, player: Optional[PlayerConfig] = None) -> bool:
    """Set the system output volume (clamped to 0-100)."""
    player = player or PlayerConfig()
    level = max(0, min(100, int(level)))
    result = run_applescript(
        applescript.set_volume_script(level), timeout=player.command_timeout
    )
    return result is not None


def mute_system(player: Optional[PlayerConfig] = None) -> bool:
    log("Muting system audio. 🤫")
    return set_volume(0, player)


def restore_volume(level: int, player: Optional[PlayerConfig] = None) -> bool:
    log(f"Restoring system volume to {level}. 🔊")
    return set_volume(level, player)


def playlist_exists(name: str, player: Optional[PlayerConfig] = None) -> bool:
    """Check whether a playlist exists in the local library.

    Errors and timeouts count as "not found".
    """
    player = player or PlayerConfig()
    result = run_applescript(
        applescript.playlist_exists_script(player.app_name, name),
        timeout=player.command_timeout,
    )
    if result is None:
        logger.warning(f"Error checking for playlist: {name}")
        return False
    return result.stdout.strip() == "true"


def apply_playback_settings(player: Optional[PlayerConfig] = None) -> None:
    """Turn shuffle off and repeat the whole playlist (result ignored)."""
    player = player or PlayerConfig()
    logger.debug("Applying shuffle=off, repeat=all")
    fire_applescript(applescript.playback_settings_script(player.app_name))


def play_playlist(
    name: str,
    defer: Optional[Defer] = None,
    player: Optional[PlayerConfig] = None,
) -> bool:
    """Start a playlist, then apply playback settings after a short delay.

    The Music app accepts "play" before it is ready to take further
    commands, so the shuffle/repeat settings are sent settle_delay seconds
    later through defer. Without defer the call blocks for the delay.
    """
    player = player or PlayerConfig()
    log(f'Starting {player.app_name} playlist: "{name}"')
    result = run_applescript(
        applescript.play_playlist_script(player.app_name, name),
        timeout=player.command_timeout,
    )

    def settle() -> None:
        apply_playback_settings(player)

    if defer is not None:
        defer(player.settle_delay, settle)
    else:
        time.sleep(player.settle_delay)
        settle()

    return result is not None


def _transport(command: str, player: Optional[PlayerConfig]) -> bool:
    player = player or PlayerConfig()
    result = run_applescript(
        applescript.player_command_script(player.app_name, command),
        timeout=player.command_timeout,
    )
    return result is not None


def pause_playback(player: Optional[PlayerConfig] = None) -> bool:
    log(f"Pausing {(player or PlayerConfig()).app_name}. 🤫")
    return _transport("pause", player)


def resume_playback(player: Optional[PlayerConfig] = None) -> bool:
    log(f"Resuming {(player or PlayerConfig()).app_name}. 🔊")
    return _transport("play", player)


def stop_playback(player: Optional[PlayerConfig] = None) -> bool:
    log(f"Stopping {(player or PlayerConfig()).app_name} playback.")
    return _transport("stop", player)


def open_url(url: str) -> bool:
    """Open a URL with its default handler (browser for web links)."""
    log("Opening video in your browser...")
    return spawn_command(["open", url])


def search_catalog(term: str) -> None:
    """Open a catalog search for term (fire-and-forget)."""
    log(f'Searching Apple Music catalog for "{term}"...')
    spawn_command(["open", build_search_url(term)])


def build_search_url(term: str) -> str:
    return CATALOG_SEARCH_URL.format(term=url_quote(term, safe=""))


def play_completion_sound(sound: Optional[SoundConfig] = None) -> None:
    """Play the completion cue several times in quick succession."""
    sound = sound or SoundConfig()
    log("Playing completion sound...")
    for i in range(sound.repeat):
        spawn_command(["afplay", sound.completion_sound])
        if i < sound.repeat - 1:
            time.sleep(sound.gap_seconds)
