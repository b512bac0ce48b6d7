"""Library infrastructure - filesystem scan."""

from lan_music_remote.infrastructure.library.filesystem_library import FileSystemLibrary

__all__ = ["FileSystemLibrary"]
