"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when a command argument or payload is invalid."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="INVALID_ARGUMENT")
        self.field = field


class EntityNotFoundError(DomainError):
    """Raised when a requested library item or asset does not exist."""

    def __init__(self, entity_type: str, identifier: str | int, message: str | None = None) -> None:
        msg = message or f"{entity_type} '{identifier}' not found"
        super().__init__(msg, code="NOT_FOUND")
        self.entity_type = entity_type
        self.identifier = identifier


class PlaybackError(DomainError):
    """Raised when the audio sink fails to open or render."""

    def __init__(self, message: str, item: str | None = None) -> None:
        super().__init__(message, code="PLAYBACK_ERROR")
        self.item = item
