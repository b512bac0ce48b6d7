"""
Shared Domain Kernel

Contains exceptions and message constants shared across the application.
"""

from lan_music_remote.domain.shared.exceptions import (
    DomainError,
    EntityNotFoundError,
    PlaybackError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "EntityNotFoundError",
    "PlaybackError",
]
