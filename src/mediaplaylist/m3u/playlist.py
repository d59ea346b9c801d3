from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple, Union

from mediaplaylist.errors import BadSignatureError, EncodingError, NotBytesError

from .entry import EXTINF, MediaPlaylistEntry

# "#EXTM3U" in ASCII
M3U_SIGNATURE = bytes([0x23, 0x45, 0x58, 0x54, 0x4D, 0x33, 0x55])
M3U_HEADER = "#EXTM3U"

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class MediaPlaylist:
    """Parsed M3U/M3U8 playlist: entries in the order they appear in the file."""

    items: Tuple[MediaPlaylistEntry, ...] = ()
    plain_text: str = field(default="", repr=False, compare=False)

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "MediaPlaylist":
        return parse_playlist(data)

    @classmethod
    def from_text(cls, text: str) -> "MediaPlaylist":
        return parse_playlist(text)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[MediaPlaylistEntry]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]


def ensure_bytes(data) -> None:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise NotBytesError(
            f"Not a valid bytes array. Must be bytes-like, got {type(data).__name__}."
        )


def check_signature(data: BytesLike) -> None:
    """Make sure the buffer starts with the M3U file signature."""
    ensure_bytes(data)
    if bytes(data[: len(M3U_SIGNATURE)]) != M3U_SIGNATURE:
        raise BadSignatureError("Invalid file signature. Must be M3U/M3U8.")


def decode_playlist(data: BytesLike) -> str:
    ensure_bytes(data)
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(f"Playlist is not valid UTF-8: {e}") from e


def split_entries(text: str) -> List[str]:
    """Split text in front of every #EXTINF, keeping the marker on each fragment.

    Anything before the first marker is returned as its own fragment, and text
    without any marker comes back as a single fragment.
    """
    fragments: List[str] = []
    start = 0
    pos = text.find(EXTINF, 1)
    while pos != -1:
        fragments.append(text[start:pos])
        start = pos
        pos = text.find(EXTINF, pos + 1)
    fragments.append(text[start:])
    return fragments


def parse_playlist_items(data: Union[str, BytesLike]) -> List[MediaPlaylistEntry]:
    """Parse playlist text (or bytes, decoded without a signature check) into entries."""
    text = data if isinstance(data, str) else decode_playlist(data)

    if text.startswith(M3U_HEADER):
        text = text[len(M3U_HEADER) :].strip()

    return [MediaPlaylistEntry.from_info(info) for info in split_entries(text)]


def parse_playlist(data: Union[str, BytesLike]) -> MediaPlaylist:
    """Validate, decode and parse a playlist.

    Bytes are checked against the M3U signature and decoded as strict UTF-8.
    Text is taken as already decoded and goes straight to the item parser.
    """
    if isinstance(data, str):
        text = data
    else:
        check_signature(data)
        text = decode_playlist(data)
    return MediaPlaylist(items=tuple(parse_playlist_items(text)), plain_text=text)
