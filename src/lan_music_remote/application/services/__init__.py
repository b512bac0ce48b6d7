"""Application services orchestrating the playback session."""

from lan_music_remote.application.services.playback_controller import PlaybackController
from lan_music_remote.application.services.playback_session import (
    ActiveSession,
    NoSession,
    PlaybackSession,
    PlaybackSnapshot,
)

__all__ = [
    "PlaybackController",
    "ActiveSession",
    "NoSession",
    "PlaybackSession",
    "PlaybackSnapshot",
]
