"""The current playback session as a sum type: nothing loaded, or one live sink."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from lan_music_remote.domain.playback.value_objects import (
    DeviceRef,
    LibraryItem,
    PlaybackState,
    Volume,
)

if TYPE_CHECKING:
    from lan_music_remote.application.interfaces.audio_sink import SinkHandle


@dataclass(frozen=True)
class NoSession:
    """No sink is open. ``state`` is IDLE before the first play, STOPPED after a teardown."""

    state: PlaybackState = PlaybackState.IDLE

    @property
    def source(self) -> None:
        return None


@dataclass
class ActiveSession:
    """A loaded item that exclusively owns its sink handle."""

    source: LibraryItem
    device: DeviceRef
    sink: SinkHandle
    state: PlaybackState = PlaybackState.PLAYING

    def mark(self, target: PlaybackState) -> None:
        if not self.state.can_transition_to(target):
            raise ValueError(f"Illegal transition {self.state.value} -> {target.value}")
        self.state = target


PlaybackSession: TypeAlias = NoSession | ActiveSession


@dataclass(frozen=True)
class PlaybackSnapshot:
    """Consistent read of the controller's state taken under its lock."""

    state: PlaybackState
    source: LibraryItem | None
    device: DeviceRef
    volume: Volume

    @property
    def has_sink(self) -> bool:
        return self.state.is_active
