"""Base command class for CLI commands."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from moyn.core.api_client import APIClient
from moyn.core.config import ConfigStore, Settings
from moyn.core.errors import MoynError
from moyn.ui.console import print_error, print_warning

logger = logging.getLogger(__name__)

GLOBAL_OPTIONS = ("--config", "--verbose", "--version")


class BaseCommand(ABC):
    """Base class for all CLI commands."""
    
    name: str = "base"
    description: str = "Base command"
    usage: str = ""
    value_flags: frozenset[str] = frozenset()
    bool_flags: frozenset[str] = frozenset()
    
    def __init__(
        self,
        settings: Settings,
        store: ConfigStore,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings
        self.store = store
        self.transport = transport
    
    def api(self) -> APIClient:
        """API client for the stored session. Raises ConfigError if logged out."""
        session = self.store.require_session()
        return APIClient(session, timeout=self.settings.timeout, transport=self.transport)
    
    def run(self, args: list[str]) -> bool:
        """Execute the command, reporting any client error on stderr."""
        try:
            return self.execute(args)
        except MoynError as e:
            logger.debug("%s failed", self.name, exc_info=True)
            print_error(str(e))
            return False
    
    @abstractmethod
    def execute(self, args: list[str]) -> bool:
        """
        Execute the command.
        
        Args:
            args: Command arguments
            
        Returns:
            True if successful, False otherwise
        """
        pass
    
    def usage_error(self, message: str) -> bool:
        print_error(f"{message}\nUsage: {self.usage}")
        return False
    
    def parse_flags(self, args: list[str]) -> tuple[dict[str, Any], list[str]]:
        """Parse command-line flags from arguments.
        
        Flags in ``value_flags`` always take the next argument as their value,
        even when it starts with ``-``. Flags in ``bool_flags`` never do.
        Anything else is reported and ignored.
        """
        flags = {}
        remaining = []
        
        i = 0
        while i < len(args):
            arg = args[i]
            if arg.startswith("--") and len(arg) > 2:
                key, value = arg[2:], None
                if "=" in key:
                    key, value = key.split("=", 1)
            elif arg.startswith("-") and len(arg) == 2 and arg != "--":
                key, value = arg[1], None
            else:
                remaining.append(arg)
                i += 1
                continue
            
            if key in self.bool_flags:
                flags[key] = True
            elif key in self.value_flags:
                if value is None and i + 1 < len(args):
                    value = args[i + 1]
                    i += 1
                flags[key] = value if value is not None else True
            else:
                self._warn_unknown(arg.split("=", 1)[0])
            i += 1
        
        return flags, remaining
    
    def _warn_unknown(self, option: str) -> None:
        if option in GLOBAL_OPTIONS:
            print_warning(f"{option} is a global option; put it before the command: moyn {option} {self.name} ...")
        else:
            print_warning(f"Ignoring unknown option {option} for '{self.name}'")
    
    @staticmethod
    def flag(flags: dict[str, Any], *names: str) -> Optional[str]:
        """First string value among ``names`` (long and short spellings)."""
        for name in names:
            value = flags.get(name)
            if isinstance(value, str):
                return value
        return None
