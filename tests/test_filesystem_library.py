"""Unit Tests for FileSystemLibrary."""

import logging

from lan_music_remote.infrastructure.library.filesystem_library import FileSystemLibrary


class TestFileSystemLibrary:
    """Tests for the startup scan."""

    def test_scan_filters_by_extension(self, library, song1, song2):
        """Only .mp3 and .wav files are listed, as absolute paths in sorted order."""
        assert [str(item) for item in library.items()] == [song1, song2]

    def test_extension_match_is_case_insensitive(self, tmp_path):
        (tmp_path / "LOUD.MP3").write_bytes(b"")
        (tmp_path / "quiet.Wav").write_bytes(b"")

        library = FileSystemLibrary(tmp_path)

        assert [item.name for item in library.items()] == ["LOUD.MP3", "quiet.Wav"]

    def test_custom_extensions(self, music_dir):
        library = FileSystemLibrary(music_dir, extensions=[".txt"])

        assert [item.name for item in library.items()] == ["notes.txt"]

    def test_subdirectories_not_scanned(self, music_dir):
        nested = music_dir / "album"
        nested.mkdir()
        (nested / "track.mp3").write_bytes(b"")
        (music_dir / "folder.mp3").mkdir()

        library = FileSystemLibrary(music_dir)

        assert [item.name for item in library.items()] == ["song1.mp3", "song2.wav"]

    def test_missing_directory_is_empty(self, tmp_path, caplog):
        """A missing music directory yields an empty library and a warning."""
        with caplog.at_level(logging.WARNING):
            library = FileSystemLibrary(tmp_path / "absent")

        assert library.items() == ()
        assert "does not exist" in caplog.text

    def test_scan_happens_once(self, library, music_dir):
        """Files added after startup are not picked up."""
        before = library.items()
        (music_dir / "song3.mp3").write_bytes(b"")

        assert library.items() == before

    def test_relative_directory_resolved(self, music_dir, monkeypatch):
        monkeypatch.chdir(music_dir.parent)

        library = FileSystemLibrary("music")

        assert library.root == music_dir.resolve()
        assert all(item.path.is_absolute() for item in library.items())
