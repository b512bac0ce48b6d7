"""Command Dispatcher

Maps each inbound command to exactly one controller call and renders exactly
one reply. Domain errors are turned into text replies here and never escape to
the command channel.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TYPE_CHECKING

from ...domain.shared.exceptions import DomainError, EntityNotFoundError
from ...domain.shared.messages import ErrorMessages, LogTemplates, ReplyMessages
from .models import Command, Reply, SetDevicePayload, VolumePayload, parse_payload

if TYPE_CHECKING:
    from ..services.playback_controller import PlaybackController

logger = logging.getLogger(__name__)

Handler = Callable[[Command], Awaitable[Reply]]

INDEX_FILE = "index.html"


class CommandDispatcher:
    """Routes ``(method, path)`` pairs to controller operations."""

    def __init__(self, *, controller: PlaybackController, static_dir: Path | str) -> None:
        self._controller = controller
        self._static_dir = Path(static_dir)
        self._routes: dict[tuple[str, str], Handler] = {
            ("GET", "/"): self._serve_index,
            ("GET", "/index.html"): self._serve_index,
            ("POST", "/play"): self._play,
            ("GET", "/stop"): self._stop,
            ("GET", "/pause"): self._pause,
            ("GET", "/resume"): self._resume,
            ("GET", "/list"): self._list,
            ("GET", "/devices"): self._devices,
            ("POST", "/setdevice"): self._set_device,
            ("POST", "/volume"): self._set_volume,
        }

    @property
    def routes(self) -> frozenset[tuple[str, str]]:
        return frozenset(self._routes)

    async def dispatch(self, command: Command) -> Reply:
        method, path = command.route
        logger.info(LogTemplates.REQUEST_RECEIVED, method, path, command.remote or "-")

        handler = self._routes.get((method, path))
        if handler is None:
            logger.debug(LogTemplates.REQUEST_UNMATCHED, method, path)
            return Reply.text(ReplyMessages.INVALID_COMMAND, status=404)

        try:
            return await handler(command)
        except EntityNotFoundError as e:
            logger.warning(LogTemplates.REQUEST_NOT_FOUND, method, path, e.message)
            return Reply.text(ReplyMessages.ERROR.format(message=e.message), status=404)
        except DomainError as e:
            logger.warning(LogTemplates.REQUEST_FAILED, method, path, e.message)
            return Reply.text(ReplyMessages.ERROR.format(message=e.message), status=500)
        except Exception as e:
            logger.exception(LogTemplates.REQUEST_UNHANDLED, method, path)
            return Reply.text(ReplyMessages.ERROR.format(message=e), status=500)

    # -- handlers --------------------------------------------------------

    async def _serve_index(self, command: Command) -> Reply:
        index = self._static_dir / INDEX_FILE
        if not index.is_file():
            return Reply.text(ErrorMessages.STATIC_FILE_NOT_FOUND, status=404)
        return Reply.html(await asyncio.to_thread(index.read_bytes))

    async def _play(self, command: Command) -> Reply:
        requested = command.text().strip()
        await self._controller.play(requested)
        return Reply.text(ReplyMessages.PLAYING.format(item=requested))

    async def _stop(self, command: Command) -> Reply:
        await self._controller.stop()
        return Reply.text(ReplyMessages.STOPPED)

    async def _pause(self, command: Command) -> Reply:
        await self._controller.pause()
        return Reply.text(ReplyMessages.PAUSED)

    async def _resume(self, command: Command) -> Reply:
        await self._controller.resume()
        return Reply.text(ReplyMessages.RESUMED)

    async def _list(self, command: Command) -> Reply:
        return Reply.text("\n".join(str(item) for item in self._controller.list_library()))

    async def _devices(self, command: Command) -> Reply:
        devices = await self._controller.list_devices()
        return Reply.json([device.to_dict() for device in devices])

    async def _set_device(self, command: Command) -> Reply:
        payload = parse_payload(SetDevicePayload, command.body)
        device = await self._controller.set_device(payload.device_id)
        return Reply.text(ReplyMessages.DEVICE_SWITCHED.format(device_id=device))

    async def _set_volume(self, command: Command) -> Reply:
        payload = parse_payload(VolumePayload, command.body)
        volume = await self._controller.set_volume(payload.volume)
        return Reply.text(ReplyMessages.VOLUME_SET.format(percent=volume.display_percent))
