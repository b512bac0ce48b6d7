"""Port interface for the music library."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lan_music_remote.domain.playback.value_objects import LibraryItem


class LibraryProvider(ABC):
    """Read-only source of playable items."""

    @abstractmethod
    def items(self) -> tuple[LibraryItem, ...]:
        """Return the library snapshot; the same ordered tuple on every call."""
        ...
