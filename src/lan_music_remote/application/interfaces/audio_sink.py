"""Port interface for the platform audio output."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lan_music_remote.domain.playback.value_objects import DeviceRef, LibraryItem, OutputDevice


class SinkHandle(ABC):
    """A live rendering resource for one opened item.

    ``close`` must be called before the handle is discarded and is safe to call
    more than once.
    """

    @abstractmethod
    def play(self) -> None:
        """Start or resume rendering."""
        ...

    @abstractmethod
    def pause(self) -> None:
        """Suspend rendering without releasing the stream."""
        ...

    @abstractmethod
    def set_gain(self, gain: float) -> None:
        """Apply a gain factor in [0.0, 1.0] to the live stream."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Stop rendering and release every resource held by the handle."""
        ...


class AudioSink(ABC):
    """Interface for opening items on output devices."""

    @abstractmethod
    def open(self, item: LibraryItem, device: DeviceRef, gain: float) -> SinkHandle:
        """Open *item* on *device* at *gain*, ready to ``play``.

        Raises:
            EntityNotFoundError: If the item's file does not exist.
            PlaybackError: If the item cannot be decoded or the device opened.
        """
        ...

    @abstractmethod
    def list_devices(self) -> list[OutputDevice]:
        """Active render-capable devices, ids numbered from 0 in enumeration order."""
        ...
