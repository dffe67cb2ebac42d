"""Main CLI entry point for moyn."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import httpx
from rich.logging import RichHandler

from moyn import __version__
from moyn.commands.base import BaseCommand
from moyn.commands.login import LoginCommand, LogoutCommand
from moyn.commands.posts import DeleteCommand, PostsCommand, PublishCommand
from moyn.commands.spaces import SpaceCommand, SpacesCommand
from moyn.core.config import ConfigStore, Settings
from moyn.ui.console import err_console, print_error

logger = logging.getLogger("moyn")

COMMANDS: list[type[BaseCommand]] = [
    LoginCommand,
    LogoutCommand,
    PublishCommand,
    PostsCommand,
    DeleteCommand,
    SpacesCommand,
    SpaceCommand,
]


class MoynCLI:
    """Command registry bound to one invocation's settings and session file."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings
        self.store = ConfigStore(settings.session_path)

        # Command registry
        self.commands: dict[str, BaseCommand] = {
            cls.name: cls(settings, self.store, transport) for cls in COMMANDS
        }

    def dispatch(self, name: str, args: list[str]) -> bool:
        command = self.commands.get(name)
        if command is None:
            print_error(f"Unknown command: {name}")
            return False
        logger.debug("Running %s with %s", name, args)
        return command.run(args)


def build_parser() -> argparse.ArgumentParser:
    epilog = "commands:\n" + "\n".join(
        f"  {cls.name:<10} {cls.description}" for cls in COMMANDS
    )
    epilog += "\n\nGlobal options (--config, --verbose) go before the command."
    parser = argparse.ArgumentParser(
        prog="moyn",
        description="Developer microblogging from your terminal",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Session file (default: $MOYN_CONFIG_PATH or ~/.config/moyn/config.json)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log HTTP requests to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"moyn {__version__}",
    )
    parser.add_argument(
        "command",
        choices=[cls.name for cls in COMMANDS],
        metavar="command",
        help="Command to run (see below)",
    )
    # Everything after the command belongs to it
    parser.add_argument("args", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def run(
    argv: Optional[Sequence[str]] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> int:
    """Parse arguments, run one command and return the exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    settings = Settings(config_path=args.config) if args.config else Settings()
    cli = MoynCLI(settings, transport)

    try:
        success = cli.dispatch(args.command, args.args)
    except KeyboardInterrupt:
        err_console.print("\n[muted]Interrupted[/muted]")
        return 130

    return 0 if success else 1


def main():
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
