"""Immutable value objects for the playback bounded context."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import ClassVar

from lan_music_remote.domain.shared.exceptions import ValidationError
from lan_music_remote.domain.shared.messages import ErrorMessages


@dataclass(frozen=True)
class LibraryItem:
    """Stable identifier for a playable asset, normally an absolute file path."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError(ErrorMessages.EMPTY_ITEM_ID)

    def __str__(self) -> str:
        return self.value

    @property
    def path(self) -> Path:
        return Path(self.value)

    @property
    def name(self) -> str:
        """File name without directories, used for matching short identifiers."""
        return self.path.name


@dataclass(frozen=True)
class DeviceRef:
    """Reference to an output device by its position in the render-device enumeration.

    ``DeviceRef.DEFAULT_ID`` (-1) lets the platform choose.
    """

    DEFAULT_ID: ClassVar[int] = -1

    index: int = DEFAULT_ID

    @property
    def is_default(self) -> bool:
        return self.index == self.DEFAULT_ID

    def __str__(self) -> str:
        return str(self.index)

    @classmethod
    def parse(cls, value: object) -> DeviceRef:
        """Build a reference from an int or a decimal string such as ``"2"``."""
        if isinstance(value, bool):
            raise ValidationError(
                ErrorMessages.DEVICE_ID_NOT_INTEGER.format(value=value), field="deviceId"
            )
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            try:
                return cls(int(value.strip()))
            except ValueError:
                pass
        raise ValidationError(
            ErrorMessages.DEVICE_ID_NOT_INTEGER.format(value=value), field="deviceId"
        )


DefaultDevice = DeviceRef()


@dataclass(frozen=True)
class OutputDevice:
    """An entry of the device listing: ``id`` is what clients send back to select it."""

    id: int
    name: str

    def to_dict(self) -> dict[str, int | str]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Volume:
    """Gain factor in [0.0, 1.0].

    Clients speak percentages. Any real number is accepted: it is clamped to
    0-100 and kept to ``PRECISION`` decimals, and that stored value is what
    callers report back. Non-numeric input and NaN are rejected.
    """

    gain: float = 0.5

    MIN_PERCENT: ClassVar[float] = 0.0
    MAX_PERCENT: ClassVar[float] = 100.0
    PRECISION: ClassVar[int] = 2

    def __post_init__(self) -> None:
        if not 0.0 <= self.gain <= 1.0:
            raise ValueError(ErrorMessages.GAIN_OUT_OF_RANGE)

    @property
    def percent(self) -> float:
        return round(self.gain * 100.0, self.PRECISION)

    @property
    def display_percent(self) -> str:
        """Percentage without a trailing ``.0`` for whole numbers."""
        pct = self.percent
        return str(int(pct)) if pct.is_integer() else str(pct)

    @classmethod
    def from_percent(cls, value: object) -> Volume:
        """Parse a percentage (number or numeric string), clamp it to 0-100 and round it."""
        percent = cls._coerce(value)
        clamped = min(cls.MAX_PERCENT, max(cls.MIN_PERCENT, percent))
        return cls(round(clamped, cls.PRECISION) / 100.0)

    @staticmethod
    def _coerce(value: object) -> float:
        if isinstance(value, bool):
            raise ValidationError(ErrorMessages.VOLUME_NOT_NUMBER.format(value=value), field="volume")
        if isinstance(value, int):
            # Integers past the float range still clamp.
            try:
                return float(value)
            except OverflowError:
                return math.inf if value > 0 else -math.inf
        if isinstance(value, float):
            number = value
        elif isinstance(value, str):
            try:
                number = float(value.strip())
            except ValueError:
                raise ValidationError(
                    ErrorMessages.VOLUME_NOT_NUMBER.format(value=value), field="volume"
                ) from None
        else:
            raise ValidationError(ErrorMessages.VOLUME_NOT_NUMBER.format(value=value), field="volume")

        if math.isnan(number):
            raise ValidationError(ErrorMessages.VOLUME_NOT_A_NUMBER, field="volume")
        return number


class PlaybackState(Enum):
    """Playback state with enforced transitions.

    State transitions:
    - IDLE -> PLAYING (first play)
    - PLAYING -> PAUSED (pause)
    - PAUSED -> PLAYING (resume)
    - PLAYING -> STOPPED (stop, device change, shutdown)
    - PAUSED -> STOPPED (stop, device change, shutdown)
    - STOPPED -> PLAYING (play again)

    ``play`` from any state tears the old session down first, so it always
    lands in PLAYING.
    """

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    STOPPED = "stopped"

    def can_transition_to(self, target: PlaybackState) -> bool:
        """Check if transition to target state is valid."""
        valid_transitions = {
            PlaybackState.IDLE: {PlaybackState.PLAYING},
            PlaybackState.PLAYING: {PlaybackState.PAUSED, PlaybackState.STOPPED},
            PlaybackState.PAUSED: {PlaybackState.PLAYING, PlaybackState.STOPPED},
            PlaybackState.STOPPED: {PlaybackState.PLAYING},
        }
        return target in valid_transitions.get(self, set())

    @property
    def is_active(self) -> bool:
        return self in {PlaybackState.PLAYING, PlaybackState.PAUSED}

    @property
    def is_playing(self) -> bool:
        return self == PlaybackState.PLAYING
