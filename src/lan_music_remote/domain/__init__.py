"""
Domain Layer

Contains pure playback logic organized by bounded contexts:
- shared/: Exceptions and message constants
- playback/: Library items, devices, volume and playback state
"""

from lan_music_remote.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
