"""Error types raised by the moyn client."""

from __future__ import annotations

from typing import Optional


class MoynError(Exception):
    """Base class for every error the CLI reports to the user."""


class ParseError(MoynError):
    """Markdown frontmatter could not be parsed."""


class ConfigError(MoynError):
    """Session file is missing or malformed."""


class TransportError(MoynError):
    """The request never got an HTTP response."""


class APIError(MoynError):
    """The server answered with an error status."""

    def __init__(self, message: str, status_code: int = 0, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class Unauthorized(APIError):
    """401/403 - token missing, invalid or not allowed."""


class NotFound(APIError):
    """404 - the post or space does not exist."""


class ValidationError(APIError):
    """Any other 4xx, or input rejected before it was sent."""


class ServerError(APIError):
    """5xx, or a successful response we could not understand."""


def error_for_status(status_code: int, detail: Optional[str] = None) -> APIError:
    """Map an HTTP error status to the matching error type."""
    suffix = f": {detail}" if detail else ""

    if status_code in (401, 403):
        return Unauthorized(
            f"Unauthorized (HTTP {status_code}){suffix}. Run `moyn login` again.",
            status_code,
            detail,
        )
    if status_code == 404:
        return NotFound(f"Not found (HTTP 404){suffix}", status_code, detail)
    if status_code >= 500:
        return ServerError(f"Server error (HTTP {status_code}){suffix}", status_code, detail)
    return ValidationError(f"Request rejected (HTTP {status_code}){suffix}", status_code, detail)
