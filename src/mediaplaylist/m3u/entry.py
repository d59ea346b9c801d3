from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from mediaplaylist.errors import InvalidDurationError, NotAnEntryError

EXTINF = "#EXTINF"

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class MediaPlaylistEntry:
    """A single #EXTINF item of an M3U playlist."""

    name: str = ""
    duration: Optional[int] = None  # seconds; negative values are placeholders
    uri: Optional[str] = None
    attributes: Optional[Dict[str, Optional[str]]] = None
    raw_info: str = field(default="", repr=False)

    @classmethod
    def from_info(cls, info: str) -> "MediaPlaylistEntry":
        """Parse a fragment that starts with #EXTINF and holds the URI on its second line."""
        validate_entry(info)
        name = parse_name(info)
        duration = parse_duration(info)
        uri = parse_uri(info)
        attributes = parse_attributes(info)
        return cls(
            name=name,
            duration=duration,
            uri=uri,
            attributes=attributes,
            raw_info=info,
        )


def validate_entry(info) -> None:
    if not isinstance(info, str):
        raise NotAnEntryError(
            f"Entry info must be a string, got {type(info).__name__}"
        )
    if not info.startswith(EXTINF):
        raise NotAnEntryError(f"Does not begin with {EXTINF}: {info[:32]!r}")


def _first_line(info: str) -> str:
    return info.split("\n", 1)[0]


def _find_duration_run(info: str) -> Tuple[int, int]:
    """Locate the first digit run followed by whitespace or a comma.

    Returns the (start, end) offsets of the run, or (-1, -1) if there is none.
    """
    i = 0
    n = len(info)
    while i < n:
        if info[i] not in _DIGITS:
            i += 1
            continue
        start = i
        while i < n and info[i] in _DIGITS:
            i += 1
        if i < n and (info[i].isspace() or info[i] == ","):
            return start, i
    return -1, -1


def _parse_int_prefix(text: str) -> Optional[int]:
    """Read a leading integer the way a lenient parseInt does; None if there is none."""
    s = text.lstrip()
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    end = 0
    while end < len(s) and s[end] in _DIGITS:
        end += 1
    if end == 0:
        return None
    return sign * int(s[:end])


def parse_duration(info: str) -> Optional[int]:
    # A missing colon means there is no duration region at all.
    start_at = 8 if info[7:8] == ":" else 0
    run_start, _ = _find_duration_run(info)
    end_at = run_start + 1
    if start_at == 0 or end_at == 0:
        return None

    # The bounded region only decides validity; the value takes the full digit run.
    if _parse_int_prefix(info[start_at:end_at]) is None:
        raise InvalidDurationError(
            f"Invalid duration provided. {info[start_at:end_at]!r} is not a number."
        )
    return _parse_int_prefix(info[start_at:])


def parse_name(info: str) -> str:
    first_line = _first_line(info)
    return first_line[first_line.rfind(",") + 1 :].strip()


def parse_attributes(info: str) -> Optional[Dict[str, Optional[str]]]:
    first_line = _first_line(info)

    _, run_end = _find_duration_run(info)
    start_at = 8 if run_end == -1 else run_end
    end_at = first_line.rfind(",")
    if end_at == -1:
        return None

    attributes_str = first_line[start_at:end_at].strip()
    if not attributes_str:
        return None

    attributes: Dict[str, Optional[str]] = {}
    for token in attributes_str.split(" "):
        key, sep, value = token.partition("=")
        # Fixed unwrap of the surrounding quote characters.
        attributes[key] = value[1:-1] if sep and value else None
    return attributes


def parse_uri(info: str) -> Optional[str]:
    lines = info.split("\n")
    if len(lines) < 2:
        return None
    return lines[1]
