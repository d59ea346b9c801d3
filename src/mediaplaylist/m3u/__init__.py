"""M3U/M3U8 playlist parsing.

Recommended entry points:
- parse_playlist (bytes or already decoded text)
- load_playlist (file on disk)

The parsing functions never touch the filesystem and never log; reading files
lives in io.playlist_fs.
"""

from .entry import (
    MediaPlaylistEntry,
    parse_attributes,
    parse_duration,
    parse_name,
    parse_uri,
    validate_entry,
)
from .io.playlist_fs import load_playlist, read_playlist_bytes
from .playlist import (
    M3U_SIGNATURE,
    MediaPlaylist,
    check_signature,
    decode_playlist,
    parse_playlist,
    parse_playlist_items,
    split_entries,
)

__all__ = [
    "M3U_SIGNATURE",
    "MediaPlaylist",
    "MediaPlaylistEntry",
    "check_signature",
    "decode_playlist",
    "load_playlist",
    "parse_attributes",
    "parse_duration",
    "parse_name",
    "parse_playlist",
    "parse_playlist_items",
    "parse_uri",
    "read_playlist_bytes",
    "split_entries",
    "validate_entry",
]
