"""Audio infrastructure - soundfile decoding and sounddevice output."""

from lan_music_remote.infrastructure.audio.sounddevice_sink import (
    SoundDeviceHandle,
    SoundDeviceSink,
)

__all__ = [
    "SoundDeviceHandle",
    "SoundDeviceSink",
]
