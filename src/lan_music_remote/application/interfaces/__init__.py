"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the application
layer and infrastructure adapters. These are the "ports" in
hexagonal architecture.
"""

from lan_music_remote.application.interfaces.audio_sink import AudioSink, SinkHandle
from lan_music_remote.application.interfaces.library_provider import LibraryProvider

__all__ = [
    "AudioSink",
    "SinkHandle",
    "LibraryProvider",
]
