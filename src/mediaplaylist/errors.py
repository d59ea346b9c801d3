class PlaylistFormatError(ValueError):
    """Base error for everything that can go wrong while parsing a playlist."""


class NotBytesError(PlaylistFormatError, TypeError):
    """Playlist input is not a byte buffer."""


class BadSignatureError(PlaylistFormatError):
    """First bytes do not match the M3U file signature."""


class EncodingError(PlaylistFormatError):
    """Playlist bytes are not valid UTF-8."""


class NotAnEntryError(PlaylistFormatError):
    """Fragment is not text or does not begin with #EXTINF."""


class InvalidDurationError(PlaylistFormatError):
    """The duration region of an #EXTINF line is not a number."""
