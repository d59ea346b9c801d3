"""Parse M3U/M3U8 playlists into immutable entry objects."""

from .errors import (
    BadSignatureError,
    EncodingError,
    InvalidDurationError,
    NotAnEntryError,
    NotBytesError,
    PlaylistFormatError,
)
from .m3u import MediaPlaylist, MediaPlaylistEntry, load_playlist, parse_playlist

__all__ = [
    "MediaPlaylist",
    "MediaPlaylistEntry",
    "load_playlist",
    "parse_playlist",
    "PlaylistFormatError",
    "NotBytesError",
    "BadSignatureError",
    "EncodingError",
    "NotAnEntryError",
    "InvalidDurationError",
]
