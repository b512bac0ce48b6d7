"""
HTTP Command Channel

aiohttp front end for the command dispatcher. Every request, whatever its
method or path, is turned into a ``Command`` and answered with the
dispatcher's single ``Reply``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aiohttp import web

from lan_music_remote.application.commands.models import Command, Reply
from lan_music_remote.domain.shared.messages import LogTemplates, ReplyMessages

if TYPE_CHECKING:
    from lan_music_remote.application.commands.dispatcher import CommandDispatcher
    from lan_music_remote.application.services.playback_controller import PlaybackController

logger = logging.getLogger(__name__)

DISPATCHER_KEY: web.AppKey[CommandDispatcher] = web.AppKey("dispatcher")
CONTROLLER_KEY: web.AppKey[PlaybackController] = web.AppKey("controller")


def to_response(reply: Reply) -> web.Response:
    return web.Response(
        status=reply.status,
        body=reply.body,
        content_type=reply.content_type,
        charset="utf-8",
    )


async def handle_command(request: web.Request) -> web.Response:
    """Catch-all route: translate the request and hand it to the dispatcher."""
    try:
        command = Command(
            method=request.method,
            path=request.path,
            body=await request.read() if request.can_read_body else b"",
            remote=request.remote,
        )
        reply = await request.app[DISPATCHER_KEY].dispatch(command)
    except Exception as e:
        logger.exception(LogTemplates.REQUEST_UNHANDLED, request.method, request.path)
        reply = Reply.text(ReplyMessages.ERROR.format(message=e), status=500)
    return to_response(reply)


async def on_shutdown(app: web.Application) -> None:
    # Listener is already closed; in-flight handlers have not been drained yet.
    await app[CONTROLLER_KEY].shutdown()


async def on_cleanup(app: web.Application) -> None:
    # Runs after the drain, so nothing opened by a late handler survives.
    await app[CONTROLLER_KEY].shutdown()


def create_app(dispatcher: CommandDispatcher, controller: PlaybackController) -> web.Application:
    app = web.Application()
    app[DISPATCHER_KEY] = dispatcher
    app[CONTROLLER_KEY] = controller
    app.router.add_route("*", "/{tail:.*}", handle_command)
    app.on_shutdown.append(on_shutdown)
    app.on_cleanup.append(on_cleanup)
    return app


def run_app(app: web.Application, *, host: str, port: int) -> None:
    """Serve until interrupted; aiohttp runs the shutdown hooks on the way out."""
    logger.info(LogTemplates.APP_LISTENING, host, port)
    web.run_app(app, host=host, port=port, print=lambda msg: logger.info(msg))
