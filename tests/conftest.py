import sys
from pathlib import Path

import pytest

# This repo uses a src/ layout, so when running tests without an editable install,
# we add <repo>/src to sys.path.
_SRC = str(Path(__file__).resolve().parents[1] / "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)


SAMPLE_PLAYLIST = "\n".join(
    [
        "#EXTM3U",
        "#EXTINF:180,Song 1",
        "http://example.com/song1.mp3",
        '#EXTINF:-1 tvg-id="1" group-title="News",Channel One',
        "http://x/ch1",
    ]
)


@pytest.fixture
def sample_text():
    return SAMPLE_PLAYLIST


@pytest.fixture
def sample_bytes():
    return SAMPLE_PLAYLIST.encode("utf-8")
