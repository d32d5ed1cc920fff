"""
Operating mode selection and per-mode work/break actions.

Exactly one mode is chosen before any timer is registered:

- YOUTUBE: a URL was given; the video is opened and breaks mute the system
- MUSIC: a playlist was given; breaks pause the Music app
- SYSTEM: neither; breaks mute the system
"""

from typing import TYPE_CHECKING, Optional

from loguru import logger

from focus_minion.core.exceptions import PlaylistNotFoundError
from focus_minion.core.output import log
from focus_minion.domain.media import controller
from focus_minion.domain.media.controller import Defer

from .models import OperatingMode

if TYPE_CHECKING:
    from focus_minion.context import SessionContext

URL_SCHEMES = ("http://", "https://")


def is_url(value: Optional[str]) -> bool:
    """Check whether a positional argument looks like a web URL."""
    if not value:
        return False
    return value.strip().lower().startswith(URL_SCHEMES)


def resolve_mode(context: "SessionContext") -> OperatingMode:
    """Decide the operating mode without side effects.

    A URL wins over a playlist when both are supplied.
    """
    timer = context.timer
    if is_url(timer.youtube_url):
        return OperatingMode.YOUTUBE
    if timer.playlist_name and timer.playlist_name.strip():
        return OperatingMode.MUSIC
    return OperatingMode.SYSTEM


def select_mode(context: "SessionContext", defer: Optional[Defer] = None) -> "SessionContext":
    """Run the startup protocol for the selected mode.

    Args:
        context: Initial session context
        defer: Schedules the post-play settle action in music mode

    Returns:
        Context with mode and original volume filled in

    Raises:
        PlaylistNotFoundError: Playlist missing and catalog search disabled
    """
    timer = context.timer
    mode = resolve_mode(context)

    if timer.youtube_url and mode is not OperatingMode.YOUTUBE:
        log(
            f'Ignoring "{timer.youtube_url}": only http(s) links are supported.',
            level="warning",
        )

    if mode is OperatingMode.YOUTUBE:
        if timer.playlist_name:
            logger.info("Video link given; ignoring --playlist")
        controller.open_url(timer.youtube_url.strip())
        volume = controller.get_volume(context.player)
        log(f"Original volume detected: {volume}.")
        return context.with_mode(mode, volume)

    if mode is OperatingMode.MUSIC:
        name = timer.playlist_name
        if controller.playlist_exists(name, context.player):
            controller.play_playlist(name, defer=defer, player=context.player)
        elif timer.search_enabled:
            controller.search_catalog(name)
        else:
            raise PlaylistNotFoundError(name)
        return context.with_mode(mode)

    log("Running in System Mute mode.")
    volume = controller.get_volume(context.player)
    log(f"Original volume detected: {volume}.")
    return context.with_mode(mode, volume)


def start_work(context: "SessionContext", cycle: int) -> None:
    """Unmute for a work interval."""
    if context.mode.uses_system_volume:
        controller.restore_volume(context.restore_level, context.player)
    else:
        controller.resume_playback(context.player)
    log(
        f"Starting {context.timer.work_minutes:g}-minute work interval "
        f"{cycle} of {context.timer.cycle_count}."
    )


def start_break(context: "SessionContext", cycle: int) -> None:
    """Mute for a break."""
    log(
        f"Starting {context.timer.break_minutes:g}-minute break "
        f"{cycle} of {context.timer.cycle_count}."
    )
    if context.mode.uses_system_volume:
        controller.mute_system(context.player)
    else:
        controller.pause_playback(context.player)


def restore_audio(context: "SessionContext") -> None:
    """Leave audio as it was before the session (music is stopped)."""
    if context.mode.uses_system_volume:
        controller.restore_volume(context.restore_level, context.player)
    else:
        controller.stop_playback(context.player)


def finish_session(context: "SessionContext") -> None:
    """Completion action: restore audio and play the completion sound."""
    log("All cycles complete. Finishing program. Great work!")
    restore_audio(context)
    controller.play_completion_sound(context.sound)
