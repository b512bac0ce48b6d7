"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
for the library, audio sink, playback controller, dispatcher and web app.
Components are created on-demand and cached for reuse throughout the application.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aiohttp import web

    from ..application.commands.dispatcher import CommandDispatcher
    from ..application.interfaces.audio_sink import AudioSink
    from ..application.interfaces.library_provider import LibraryProvider
    from ..application.services.playback_controller import PlaybackController
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Holds the single ``PlaybackController`` for the process lifetime and
    passes it by reference to the dispatcher and the web app.
    """

    settings: Settings

    # Infrastructure adapters
    _library_provider: LibraryProvider | None = None
    _audio_sink: AudioSink | None = None

    # Application services
    _playback_controller: PlaybackController | None = None
    _dispatcher: CommandDispatcher | None = None

    # Command channel
    _web_app: web.Application | None = None

    # === Infrastructure ===

    @property
    def library_provider(self) -> LibraryProvider:
        """Get the music library, scanning it on first access."""
        if self._library_provider is None:
            from ..infrastructure.library.filesystem_library import FileSystemLibrary

            self._library_provider = FileSystemLibrary(
                self.settings.library.music_dir,
                extensions=self.settings.library.extensions,
            )
        return self._library_provider

    @library_provider.setter
    def library_provider(self, value: LibraryProvider) -> None:
        self._library_provider = value

    @property
    def audio_sink(self) -> AudioSink:
        """Get the audio output adapter."""
        if self._audio_sink is None:
            from ..infrastructure.audio.sounddevice_sink import SoundDeviceSink

            self._audio_sink = SoundDeviceSink(self.settings.audio)
        return self._audio_sink

    @audio_sink.setter
    def audio_sink(self, value: AudioSink) -> None:
        self._audio_sink = value

    # === Application ===

    @property
    def playback_controller(self) -> PlaybackController:
        """Get the playback controller."""
        if self._playback_controller is None:
            from ..application.services.playback_controller import PlaybackController

            self._playback_controller = PlaybackController(
                audio_sink=self.audio_sink,
                library_provider=self.library_provider,
                default_volume=self.settings.audio.default_volume,
            )
        return self._playback_controller

    @property
    def dispatcher(self) -> CommandDispatcher:
        """Get the command dispatcher."""
        if self._dispatcher is None:
            from ..application.commands.dispatcher import CommandDispatcher

            self._dispatcher = CommandDispatcher(
                controller=self.playback_controller,
                static_dir=self.settings.server.static_dir,
            )
        return self._dispatcher

    # === Command channel ===

    @property
    def web_app(self) -> web.Application:
        """Get the aiohttp application serving the command channel."""
        if self._web_app is None:
            from ..infrastructure.http.server import create_app

            self._web_app = create_app(self.dispatcher, self.playback_controller)
        return self._web_app


def create_container(settings: Settings) -> Container:
    """Create and configure the dependency injection container."""
    return Container(settings=settings)
