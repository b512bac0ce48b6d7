"""HTTP infrastructure - aiohttp command channel."""

from lan_music_remote.infrastructure.http.server import create_app, run_app

__all__ = ["create_app", "run_app"]
