"""CLI commands for moyn."""

from moyn.commands.login import LoginCommand, LogoutCommand
from moyn.commands.posts import DeleteCommand, PostsCommand, PublishCommand
from moyn.commands.spaces import SpaceCommand, SpacesCommand

__all__ = [
    "LoginCommand",
    "LogoutCommand",
    "PublishCommand",
    "PostsCommand",
    "DeleteCommand",
    "SpacesCommand",
    "SpaceCommand",
]
