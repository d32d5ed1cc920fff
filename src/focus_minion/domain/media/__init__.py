"""Media domain - system volume and Music app control via AppleScript.

This domain handles:
- Reading, muting and restoring the system output volume
- Playlist lookup, playback and transport commands
- Opening videos and catalog searches
- The completion sound
"""

from .applescript import escape_applescript_string
from .controller import (
    Defer,
    apply_playback_settings,
    build_search_url,
    get_volume,
    mute_system,
    open_url,
    pause_playback,
    play_completion_sound,
    play_playlist,
    playlist_exists,
    restore_volume,
    resume_playback,
    run_applescript,
    search_catalog,
    set_volume,
    stop_playback,
)

__all__ = [
    "Defer",
    "apply_playback_settings",
    "build_search_url",
    "escape_applescript_string",
    "get_volume",
    "mute_system",
    "open_url",
    "pause_playback",
    "play_completion_sound",
    "play_playlist",
    "playlist_exists",
    "restore_volume",
    "resume_playback",
    "run_applescript",
    "search_catalog",
    "set_volume",
    "stop_playback",
]
