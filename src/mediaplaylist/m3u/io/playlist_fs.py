from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from mediaplaylist import config
from mediaplaylist import logger as log
from mediaplaylist.errors import PlaylistFormatError

from ..playlist import MediaPlaylist, parse_playlist

log = log.get_logger()

PathLike = Union[str, "os.PathLike[str]"]


def read_playlist_bytes(path: PathLike) -> bytes:
    """Read a playlist file from disk without interpreting it."""
    p = Path(path)
    if p.suffix.lower() not in config.PLAYLIST_SUFFIXES:
        log.warning(
            f"Unexpected playlist suffix '{p.suffix}' for {p.name}; "
            f"expected one of {', '.join(config.PLAYLIST_SUFFIXES)}"
        )
    data = p.read_bytes()
    log.debug(f"Read {len(data)} bytes from {p}")
    return data


def load_playlist(path: PathLike) -> MediaPlaylist:
    data = read_playlist_bytes(path)
    try:
        playlist = parse_playlist(data)
    except PlaylistFormatError as e:
        log.error(f"Failed to parse playlist {path}: {e}")
        raise
    log.info(f"Parsed {len(playlist)} entries from {path}")
    return playlist
