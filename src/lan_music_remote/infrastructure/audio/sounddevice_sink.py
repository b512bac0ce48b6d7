"""
SoundDevice Audio Sink

Decodes library files with soundfile and renders them through a PortAudio
output stream, applying the session gain in the stream callback.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

import numpy as np
import sounddevice as sd
import soundfile as sf

from lan_music_remote.application.interfaces.audio_sink import AudioSink, SinkHandle
from lan_music_remote.config.settings import AudioSettings
from lan_music_remote.domain.playback.value_objects import OutputDevice
from lan_music_remote.domain.shared.exceptions import (
    DomainError,
    EntityNotFoundError,
    PlaybackError,
)
from lan_music_remote.domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from lan_music_remote.domain.playback.value_objects import DeviceRef, LibraryItem

logger = logging.getLogger(__name__)


class SoundDeviceHandle(SinkHandle):
    """One opened file bound to one output stream.

    Pausing stops the stream but keeps the decoder position, so ``play``
    continues where it left off.
    """

    def __init__(
        self,
        item: LibraryItem,
        sound_file: sf.SoundFile,
        *,
        device_index: int | None,
        gain: float,
        block_size: int = 0,
        latency: str = "high",
    ) -> None:
        self._item = item
        self._file = sound_file
        self._gain = gain
        self._closed = False
        # Guards the decoder between the PortAudio thread and close().
        self._file_lock = threading.Lock()

        self._stream = sd.OutputStream(
            samplerate=sound_file.samplerate,
            channels=sound_file.channels,
            dtype="float32",
            device=device_index,
            blocksize=block_size,
            latency=latency,
            callback=self._callback,
            finished_callback=self._on_finished,
        )
        logger.info(
            LogTemplates.SINK_OPENED,
            item,
            "default" if device_index is None else device_index,
            sound_file.samplerate,
            sound_file.channels,
        )

    @property
    def gain(self) -> float:
        return self._gain

    @property
    def closed(self) -> bool:
        return self._closed

    def play(self) -> None:
        if self._closed:
            raise PlaybackError(ErrorMessages.SINK_CLOSED, item=str(self._item))
        if self._stream.active:
            return
        # A stream that ended via CallbackStop is inactive but not stopped.
        if not self._stream.stopped:
            self._stream.stop()
        self._stream.start()

    def pause(self) -> None:
        if self._closed:
            return
        self._stream.stop()

    def set_gain(self, gain: float) -> None:
        if not 0.0 <= gain <= 1.0:
            raise ValueError(ErrorMessages.GAIN_OUT_OF_RANGE)
        self._gain = gain

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._stream.close(ignore_errors=True)
        finally:
            with self._file_lock:
                self._file.close()
            logger.debug(LogTemplates.SINK_CLOSED, self._item)

    def _callback(self, outdata: np.ndarray, frames: int, time: Any, status: sd.CallbackFlags) -> None:
        if status:
            logger.debug(LogTemplates.SINK_STREAM_STATUS, self._item, status)

        with self._file_lock:
            if self._closed:
                outdata.fill(0)
                raise sd.CallbackAbort
            data = self._file.read(frames, dtype="float32", always_2d=True)

        read = len(data)
        outdata[:read] = data * self._gain
        if read < frames:
            outdata[read:].fill(0)
            raise sd.CallbackStop

    def _on_finished(self) -> None:
        if not self._closed:
            logger.debug(LogTemplates.SINK_FINISHED, self._item)


class SoundDeviceSink(AudioSink):
    """Opens library items on PortAudio output devices."""

    def __init__(self, settings: AudioSettings | None = None) -> None:
        self._settings = settings or AudioSettings()

    def list_devices(self) -> list[OutputDevice]:
        return [
            OutputDevice(id=position, name=info["name"])
            for position, (_, info) in enumerate(self._output_devices())
        ]

    def open(self, item: LibraryItem, device: DeviceRef, gain: float) -> SinkHandle:
        if not item.path.is_file():
            raise EntityNotFoundError(
                "Library item", str(item), ErrorMessages.ITEM_FILE_MISSING.format(item=item)
            )

        try:
            sound_file = sf.SoundFile(str(item.path))
        except (RuntimeError, OSError) as e:
            raise PlaybackError(
                ErrorMessages.SINK_OPEN_FAILED.format(item=item, detail=e), item=str(item)
            ) from e

        # Anything failing past this point must not leak the decoder.
        try:
            return SoundDeviceHandle(
                item,
                sound_file,
                device_index=self._resolve_device(device),
                gain=gain,
                block_size=self._settings.block_size,
                latency=self._settings.latency,
            )
        except DomainError:
            sound_file.close()
            raise
        except Exception as e:
            sound_file.close()
            raise PlaybackError(
                ErrorMessages.SINK_OPEN_FAILED.format(item=item, detail=e), item=str(item)
            ) from e

    def _resolve_device(self, device: DeviceRef) -> int | None:
        """Map a listing position to a PortAudio device index; None means the default."""
        if device.is_default:
            return None
        outputs = self._output_devices()
        if not 0 <= device.index < len(outputs):
            raise PlaybackError(ErrorMessages.DEVICE_GONE.format(device_id=device.index))
        return outputs[device.index][0]

    @staticmethod
    def _output_devices() -> list[tuple[int, dict[str, Any]]]:
        try:
            devices = sd.query_devices()
        except sd.PortAudioError as e:
            raise PlaybackError(str(e)) from e
        return [
            (index, info)
            for index, info in enumerate(devices)
            if info.get("max_output_channels", 0) > 0
        ]
