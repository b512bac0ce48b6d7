"""Playback Controller - the single owner of the current playback session."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from ...domain.playback.value_objects import (
    DefaultDevice,
    DeviceRef,
    LibraryItem,
    OutputDevice,
    PlaybackState,
    Volume,
)
from ...domain.shared.exceptions import (
    DomainError,
    EntityNotFoundError,
    PlaybackError,
    ValidationError,
)
from ...domain.shared.messages import ErrorMessages, LogTemplates, ReplyMessages
from .playback_session import ActiveSession, NoSession, PlaybackSession, PlaybackSnapshot

if TYPE_CHECKING:
    from ..interfaces.audio_sink import AudioSink, SinkHandle
    from ..interfaces.library_provider import LibraryProvider

logger = logging.getLogger(__name__)


class PlaybackController:
    """Serializes every mutating command against one playback session.

    All mutations run under a single ``asyncio.Lock``; blocking sink calls are
    pushed to a worker thread while the lock is held so they stay ordered.
    Whichever ``play``/``stop`` finishes its critical section last wins.
    """

    def __init__(
        self,
        *,
        audio_sink: AudioSink,
        library_provider: LibraryProvider,
        default_volume: float = 0.5,
    ) -> None:
        self._sink = audio_sink
        self._library = library_provider
        self._lock = asyncio.Lock()

        self._session: PlaybackSession = NoSession()
        self._device: DeviceRef = DefaultDevice
        self._volume = Volume(default_volume)
        self._shut_down = False

    # -- read-only views -------------------------------------------------

    @property
    def state(self) -> PlaybackState:
        return self._session.state

    @property
    def device(self) -> DeviceRef:
        return self._device

    @property
    def volume(self) -> Volume:
        return self._volume

    @property
    def current_item(self) -> LibraryItem | None:
        return self._session.source

    async def snapshot(self) -> PlaybackSnapshot:
        async with self._lock:
            return PlaybackSnapshot(
                state=self._session.state,
                source=self._session.source,
                device=self._device,
                volume=self._volume,
            )

    def list_library(self) -> tuple[LibraryItem, ...]:
        return self._library.items()

    async def list_devices(self) -> list[OutputDevice]:
        """Enumerate output devices now, with the platform default first as id -1."""
        devices = await self._query_devices()
        return [OutputDevice(DeviceRef.DEFAULT_ID, ReplyMessages.DEFAULT_DEVICE_NAME), *devices]

    # -- commands --------------------------------------------------------

    async def play(self, identifier: str) -> LibraryItem:
        """Replace whatever is loaded with *identifier* and start rendering it.

        Raises:
            EntityNotFoundError: The identifier is not in the library or its file is gone.
            PlaybackError: The sink could not open or start the item, or the
                controller has been shut down.
        """
        item = self._resolve(identifier)

        async with self._lock:
            if self._shut_down:
                raise PlaybackError(
                    ErrorMessages.CONTROLLER_SHUT_DOWN.format(item=item), item=str(item)
                )

            await self._teardown()

            try:
                handle = await asyncio.to_thread(
                    self._sink.open, item, self._device, self._volume.gain
                )
            except DomainError as e:
                logger.warning(LogTemplates.PLAYBACK_FAILED_START, item, e.message)
                raise
            except Exception as e:
                logger.warning(LogTemplates.PLAYBACK_FAILED_START, item, e)
                raise PlaybackError(
                    ErrorMessages.SINK_OPEN_FAILED.format(item=item, detail=e), item=str(item)
                ) from e

            try:
                await asyncio.to_thread(handle.play)
            except Exception as e:
                await self._release(handle)
                logger.warning(LogTemplates.PLAYBACK_FAILED_START, item, e)
                raise PlaybackError(
                    ErrorMessages.SINK_OPEN_FAILED.format(item=item, detail=e), item=str(item)
                ) from e

            self._session = ActiveSession(source=item, device=self._device, sink=handle)
            logger.info(LogTemplates.PLAYBACK_STARTED, item, self._device, self._volume.percent)

        return item

    async def stop(self) -> None:
        """Release the sink if one is open. Safe to call in any state."""
        async with self._lock:
            await self._teardown()

    async def pause(self) -> None:
        async with self._lock:
            session = self._session
            if not isinstance(session, ActiveSession) or not session.state.is_playing:
                logger.debug(LogTemplates.PLAYBACK_NOOP, "pause", self.state.value)
                return

            await self._call_sink(session.sink.pause)
            session.mark(PlaybackState.PAUSED)
            logger.info(LogTemplates.PLAYBACK_PAUSED, session.source)

    async def resume(self) -> None:
        async with self._lock:
            session = self._session
            if not isinstance(session, ActiveSession) or session.state.is_playing:
                logger.debug(LogTemplates.PLAYBACK_NOOP, "resume", self.state.value)
                return

            await self._call_sink(session.sink.play)
            session.mark(PlaybackState.PLAYING)
            logger.info(LogTemplates.PLAYBACK_RESUMED, session.source)

    async def set_device(self, value: object) -> DeviceRef:
        """Select the output device for the next ``play``; stops current playback.

        Raises:
            ValidationError: *value* is not an integer id in the live enumeration.
        """
        device = DeviceRef.parse(value)

        async with self._lock:
            if not device.is_default:
                available = await self._query_devices()
                if not 0 <= device.index < len(available):
                    raise ValidationError(
                        ErrorMessages.DEVICE_ID_OUT_OF_RANGE.format(
                            device_id=device.index, last=len(available) - 1
                        ),
                        field="deviceId",
                    )

            await self._teardown()
            self._device = device
            logger.info(LogTemplates.DEVICE_SELECTED, device)

        return device

    async def set_volume(self, value: object) -> Volume:
        """Store a new volume from a percentage and apply it to the live sink.

        Returns the applied volume, which may be clamped to 0-100%.
        """
        volume = Volume.from_percent(value)

        async with self._lock:
            self._volume = volume
            session = self._session
            if isinstance(session, ActiveSession):
                await self._call_sink(session.sink.set_gain, volume.gain)
            logger.info(LogTemplates.VOLUME_SET, volume.percent, value)

        return volume

    async def shutdown(self) -> None:
        """Run the ``stop`` teardown and refuse any later ``play``.

        Safe to call more than once; commands queued behind it can no longer
        open a sink.
        """
        async with self._lock:
            if not self._shut_down:
                logger.info(LogTemplates.APP_SHUTDOWN_TEARDOWN)
            self._shut_down = True
            await self._teardown()

    # -- internals -------------------------------------------------------

    def _resolve(self, identifier: str) -> LibraryItem:
        """Match *identifier* against the library by full path, then by file name."""
        wanted = identifier.strip()
        if not wanted:
            raise ValidationError(ErrorMessages.EMPTY_ITEM_ID, field="item")

        items = self._library.items()
        match = next((item for item in items if item.value == wanted), None)
        if match is None:
            match = next((item for item in items if item.name == wanted), None)
        if match is None:
            raise EntityNotFoundError(
                "Library item", wanted, ErrorMessages.ITEM_NOT_IN_LIBRARY.format(item=wanted)
            )
        if not match.path.is_file():
            raise EntityNotFoundError(
                "Library item", wanted, ErrorMessages.ITEM_FILE_MISSING.format(item=wanted)
            )
        return match

    async def _teardown(self) -> None:
        """Close the active sink, if any, and leave the session STOPPED. Caller holds the lock."""
        session = self._session
        if not isinstance(session, ActiveSession):
            return

        self._session = NoSession(PlaybackState.STOPPED)
        await self._release(session.sink)
        logger.info(LogTemplates.PLAYBACK_STOPPED, session.source)

    async def _release(self, handle: SinkHandle) -> None:
        try:
            await asyncio.to_thread(handle.close)
        except Exception as e:
            logger.warning(LogTemplates.SINK_CLOSE_ERROR, e)

    async def _call_sink(self, func, *args) -> None:
        try:
            await asyncio.to_thread(func, *args)
        except DomainError:
            raise
        except Exception as e:
            raise PlaybackError(str(e)) from e

    async def _query_devices(self) -> list[OutputDevice]:
        try:
            return await asyncio.to_thread(self._sink.list_devices)
        except DomainError:
            raise
        except Exception as e:
            raise PlaybackError(str(e)) from e
