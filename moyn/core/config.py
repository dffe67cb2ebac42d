"""CLI settings and the on-disk session store."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from moyn.core.errors import ConfigError
from moyn.core.models import DEFAULT_API_URL, Session

logger = logging.getLogger(__name__)

NOT_LOGGED_IN = "Not logged in. Run `moyn login` first."


def default_config_path() -> Path:
    """Location of the session file when MOYN_CONFIG_PATH is not set."""
    base = os.getenv("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "moyn" / "config.json"


class Settings(BaseSettings):
    """Settings read from MOYN_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="MOYN_", extra="ignore")

    config_path: Optional[Path] = None
    api_url: str = DEFAULT_API_URL
    timeout: float = 30.0
    token: Optional[str] = None

    @property
    def session_path(self) -> Path:
        return self.config_path or default_config_path()


class ConfigStore:
    """Reads and writes the session file (JSON with api_token and api_url)."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Optional[Session]:
        """Return the stored session, or None when nobody has logged in yet."""
        if not self.path.exists():
            logger.debug("No session file at %s", self.path)
            return None

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not read config {self.path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid config {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Invalid config {self.path}: expected a JSON object")

        try:
            return Session.model_validate(data)
        except PydanticValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise ConfigError(f"Invalid config {self.path}: bad or missing {fields}") from e

    def require_session(self) -> Session:
        session = self.load()
        if session is None:
            raise ConfigError(NOT_LOGGED_IN)
        return session

    def save(self, session: Session) -> None:
        payload = json.dumps(session.model_dump(), indent=2) + "\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Owner-only before the token is written, also for an existing file
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            try:
                if hasattr(os, "fchmod"):
                    os.fchmod(fd, 0o600)
            except OSError:
                os.close(fd)
                raise
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
        except OSError as e:
            raise ConfigError(f"Could not write config {self.path}: {e}") from e
        logger.debug("Saved session to %s", self.path)

    def clear(self) -> bool:
        """Delete the session file. Returns False if there was nothing to delete."""
        if not self.path.exists():
            return False
        try:
            self.path.unlink()
        except OSError as e:
            raise ConfigError(f"Could not remove config {self.path}: {e}") from e
        return True
