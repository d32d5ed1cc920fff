"""
AppleScript builders for the Music app and system volume.

Scripts are passed to osascript as a single argument (no shell involved),
so user input only has to be safe inside an AppleScript string literal.
"""


def escape_applescript_string(value: str) -> str:
    """Escape text for use inside a double-quoted AppleScript literal.

    Backslashes and double quotes are the only characters that can end the
    literal early. Single quotes are left as-is so names like
    "Rock 'n' Roll" still match the library entry.

    Args:
        value: Raw user-supplied text

    Returns:
        Text safe to place between double quotes in a script
    """
    return value.replace("\\", "\\\\").replace('"', '\\"')


def quote(value: str) -> str:
    """Return value as a complete AppleScript string literal."""
    return f'"{escape_applescript_string(value)}"'


def get_volume_script() -> str:
    return "output volume of (get volume settings)"


def set_volume_script(level: int) -> str:
    return f"set volume output volume {int(level)}"


def playlist_exists_script(app_name: str, playlist_name: str) -> str:
    return f"tell application {quote(app_name)} to exists (playlist named {quote(playlist_name)})"


def play_playlist_script(app_name: str, playlist_name: str) -> str:
    return f"tell application {quote(app_name)} to play playlist {quote(playlist_name)}"


def playback_settings_script(app_name: str) -> str:
    """Shuffle off, repeat all."""
    return "\n".join(
        [
            f"tell application {quote(app_name)}",
            "    set shuffle enabled to false",
            "    set song repeat to all",
            "end tell",
        ]
    )


def player_command_script(app_name: str, command: str) -> str:
    """Simple transport command: play, pause or stop."""
    if command not in ("play", "pause", "stop"):
        raise ValueError(f"Unsupported player command: {command}")
    return f"tell application {quote(app_name)} to {command}"
