"""Focus Minion exceptions for user-facing failures."""


class FocusMinionError(Exception):
    """Base exception for Focus Minion."""

    pass


class ConfigValidationError(FocusMinionError):
    """Raised when timer settings are out of range."""

    pass


class PlaylistNotFoundError(FocusMinionError):
    """Raised when a playlist is missing and catalog search is disabled."""

    def __init__(self, playlist_name: str, message: str = None):
        self.playlist_name = playlist_name
        super().__init__(
            message or f'Playlist "{playlist_name}" not found in your local library.'
        )
