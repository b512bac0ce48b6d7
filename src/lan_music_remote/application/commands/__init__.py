"""Command dispatching: inbound commands in, one reply out."""

from lan_music_remote.application.commands.dispatcher import CommandDispatcher
from lan_music_remote.application.commands.models import Command, Reply

__all__ = [
    "Command",
    "CommandDispatcher",
    "Reply",
]
