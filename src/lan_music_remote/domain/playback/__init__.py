"""
Playback Bounded Context

Value objects for library items, output devices, volume and playback state.
"""

from lan_music_remote.domain.playback.value_objects import (
    DefaultDevice,
    DeviceRef,
    LibraryItem,
    OutputDevice,
    PlaybackState,
    Volume,
)

__all__ = [
    "LibraryItem",
    "DeviceRef",
    "DefaultDevice",
    "OutputDevice",
    "Volume",
    "PlaybackState",
]
