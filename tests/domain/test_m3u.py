"""Tests for M3U playlist reading and track path resolution."""

from pathlib import Path

import pytest

from neubauten.domain.playlists.m3u import (
    list_playlist_files,
    read_m3u,
    resolve_track_path,
)


class TestListPlaylistFiles:
    def test_only_playlists_sorted_case_insensitive(self, tmp_path):
        for name in ["zeichnungen.m3u", "Kollaps.M3U8", "cover.jpg", "alles.m3u8"]:
            (tmp_path / name).write_text("")
        (tmp_path / "folder.m3u").mkdir()

        names = [path.name for path in list_playlist_files(tmp_path)]
        assert names == ["alles.m3u8", "Kollaps.M3U8", "zeichnungen.m3u"]

    def test_missing_directory(self, tmp_path):
        assert list_playlist_files(tmp_path / "nope") == []


class TestReadM3u:
    def test_skips_header_comments_and_blank_lines(self, tmp_path):
        playlist = tmp_path / "list.m3u8"
        playlist.write_text(
            "\ufeff#EXTM3U\n"
            "#EXTINF:183,Einstürzende Neubauten - Tanz Debil\n"
            "Kollaps/01 Tanz Debil.flac\n"
            "\n"
            "# a comment\n"
            "/abs/Steh Auf Berlin.flac\n",
            encoding="utf-8",
        )
        assert read_m3u(playlist) == [
            "Kollaps/01 Tanz Debil.flac",
            "/abs/Steh Auf Berlin.flac",
        ]

    def test_latin1_fallback(self, tmp_path):
        playlist = tmp_path / "old.m3u"
        playlist.write_bytes("Fünf.mp3\n".encode("latin-1"))
        assert read_m3u(playlist) == ["Fünf.mp3"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_m3u(tmp_path / "missing.m3u")


class TestResolveTrackPath:
    @pytest.fixture
    def layout(self, tmp_path):
        library = tmp_path / "Music"
        playlists = tmp_path / "Playlists"
        (library / "Kollaps").mkdir(parents=True)
        playlists.mkdir()
        track = library / "Kollaps" / "Tanz Debil.flac"
        track.write_bytes(b"")
        local = playlists / "Blume.flac"
        local.write_bytes(b"")
        return library, playlists / "list.m3u", track, local

    def test_absolute(self, layout):
        library, playlist, track, _ = layout
        assert resolve_track_path(playlist, str(track), library) == track

    def test_absolute_missing(self, layout, tmp_path):
        library, playlist, _, _ = layout
        assert resolve_track_path(playlist, str(tmp_path / "gone.flac"), library) is None

    def test_relative_to_playlist(self, layout):
        library, playlist, _, local = layout
        assert resolve_track_path(playlist, "Blume.flac", library) == local.resolve()

    def test_relative_to_library(self, layout):
        library, playlist, track, _ = layout
        resolved = resolve_track_path(playlist, "Kollaps/Tanz Debil.flac", library)
        assert resolved == track.resolve()

    def test_file_url_is_decoded(self, layout):
        library, playlist, track, _ = layout
        url = "file://" + str(track).replace(" ", "%20")
        assert resolve_track_path(playlist, url, library) == Path(str(track))

    def test_unresolvable(self, layout):
        library, playlist, _, _ = layout
        assert resolve_track_path(playlist, "nowhere.flac", library) is None
