"""Filesystem music library, scanned once at startup."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from lan_music_remote.application.interfaces.library_provider import LibraryProvider
from lan_music_remote.domain.playback.value_objects import LibraryItem
from lan_music_remote.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".mp3", ".wav")


class FileSystemLibrary(LibraryProvider):
    """Audio files directly inside one directory, as absolute paths.

    The directory is read once in ``__init__``; files added later are not
    picked up until the process restarts.
    """

    def __init__(self, music_dir: Path | str, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> None:
        self._root = Path(music_dir).resolve()
        self._extensions = frozenset(ext.lower() for ext in extensions)
        self._items = self._scan()

    @property
    def root(self) -> Path:
        return self._root

    def items(self) -> tuple[LibraryItem, ...]:
        return self._items

    def _scan(self) -> tuple[LibraryItem, ...]:
        if not self._root.is_dir():
            logger.warning(LogTemplates.LIBRARY_DIR_MISSING, self._root)
            return ()

        found = sorted(
            path
            for path in self._root.iterdir()
            if path.is_file() and path.suffix.lower() in self._extensions
        )
        logger.info(LogTemplates.LIBRARY_SCANNED, len(found), self._root)
        return tuple(LibraryItem(str(path)) for path in found)
