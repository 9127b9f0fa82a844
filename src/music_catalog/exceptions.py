"""Custom exceptions for music catalog."""


class MusicCatalogError(Exception):
    """Base exception for music catalog errors."""
    pass


class InvalidReferenceError(MusicCatalogError):
    """Raised when a song references an album that is not in the catalog."""

    def __init__(self, song_name: str, album_name: str):
        super().__init__(f"Song '{song_name}' references unknown album '{album_name}'")
        self.song_name = song_name
        self.album_name = album_name


class CatalogFileError(MusicCatalogError):
    """Raised when a catalog file cannot be read or fails validation."""
    pass


class ConfigurationError(MusicCatalogError):
    """Raised when there's an error in configuration."""
    pass
