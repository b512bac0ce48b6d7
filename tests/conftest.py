from unittest.mock import MagicMock

import pytest

from lan_music_remote.application.interfaces.audio_sink import AudioSink, SinkHandle
from lan_music_remote.domain.playback.value_objects import OutputDevice

# ============================================================================
# Library Fixtures
# ============================================================================


@pytest.fixture
def music_dir(tmp_path):
    """A music directory with two playable files and one that must be ignored."""
    root = tmp_path / "music"
    root.mkdir()
    (root / "song1.mp3").write_bytes(b"ID3")
    (root / "song2.wav").write_bytes(b"RIFF")
    (root / "notes.txt").write_text("not audio")
    return root


@pytest.fixture
def library(music_dir):
    """Filesystem library scanned over ``music_dir``."""
    from lan_music_remote.infrastructure.library.filesystem_library import FileSystemLibrary

    return FileSystemLibrary(music_dir)


@pytest.fixture
def song1(music_dir):
    return str(music_dir / "song1.mp3")


@pytest.fixture
def song2(music_dir):
    return str(music_dir / "song2.wav")


# ============================================================================
# Audio Sink Fixtures
# ============================================================================


@pytest.fixture
def output_devices():
    """Three enumerable output devices."""
    return [
        OutputDevice(id=0, name="Speakers"),
        OutputDevice(id=1, name="Headphones"),
        OutputDevice(id=2, name="HDMI"),
    ]


@pytest.fixture
def opened_handles():
    """Every handle the fake sink hands out, in order."""
    return []


@pytest.fixture
def audio_sink(output_devices, opened_handles):
    """Fake audio sink that returns a fresh mock handle for every open()."""
    sink = MagicMock(spec=AudioSink)

    def _open(item, device, gain):
        handle = MagicMock(spec=SinkHandle)
        handle.item = item
        handle.device = device
        handle.gain = gain
        opened_handles.append(handle)
        return handle

    sink.open.side_effect = _open
    sink.list_devices.return_value = output_devices
    return sink


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def controller(audio_sink, library):
    """Playback controller wired to the fake sink and the temp library."""
    from lan_music_remote.application.services.playback_controller import PlaybackController

    return PlaybackController(audio_sink=audio_sink, library_provider=library)


@pytest.fixture
def static_dir(tmp_path):
    root = tmp_path / "wwwroot"
    root.mkdir()
    (root / "index.html").write_text("<html><body>remote</body></html>", encoding="utf-8")
    return root


@pytest.fixture
def dispatcher(controller, static_dir):
    from lan_music_remote.application.commands.dispatcher import CommandDispatcher

    return CommandDispatcher(controller=controller, static_dir=static_dir)

