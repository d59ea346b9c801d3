import logging

import pytest

from mediaplaylist import config
from mediaplaylist.errors import BadSignatureError
from mediaplaylist.m3u.io import playlist_fs


@pytest.fixture(autouse=True)
def _capture_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="mediaplaylist")


def test_load_playlist_from_disk(tmp_path, sample_bytes, caplog):
    p = tmp_path / "list.m3u8"
    p.write_bytes(sample_bytes)

    playlist = playlist_fs.load_playlist(p)

    assert [i.name for i in playlist] == ["Song 1", "Channel One"]
    assert "Parsed 2 entries" in caplog.text
    assert "Unexpected playlist suffix" not in caplog.text


def test_load_playlist_accepts_str_path(tmp_path, sample_bytes):
    p = tmp_path / "list.m3u"
    p.write_bytes(sample_bytes)
    assert len(playlist_fs.load_playlist(str(p))) == 2


def test_load_playlist_logs_and_reraises_format_errors(tmp_path, caplog):
    p = tmp_path / "bad.m3u"
    p.write_bytes(b"not a playlist")

    with pytest.raises(BadSignatureError):
        playlist_fs.load_playlist(p)
    assert "Failed to parse playlist" in caplog.text


def test_load_playlist_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        playlist_fs.load_playlist(tmp_path / "missing.m3u")


def test_read_playlist_bytes_warns_on_suffix(tmp_path, sample_bytes, caplog):
    p = tmp_path / "list.txt"
    p.write_bytes(sample_bytes)

    assert playlist_fs.read_playlist_bytes(p) == sample_bytes
    assert "Unexpected playlist suffix '.txt'" in caplog.text


def test_read_playlist_bytes_uses_configured_suffixes(
    tmp_path, sample_bytes, caplog, monkeypatch
):
    monkeypatch.setattr(config, "PLAYLIST_SUFFIXES", (".txt",))
    p = tmp_path / "list.txt"
    p.write_bytes(sample_bytes)

    playlist_fs.read_playlist_bytes(p)
    assert "Unexpected playlist suffix" not in caplog.text
