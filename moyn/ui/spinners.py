"""Spinner shown while a request is in flight."""

from __future__ import annotations

import sys
from collections.abc import Generator
from contextlib import contextmanager

from moyn.ui.console import console

SPINNER_STYLES = {
    "default": "dots",
    "loading": "dots12",
    "upload": "arc",
}


@contextmanager
def create_spinner(message: str, style: str = "default") -> Generator[None, None, None]:
    """Context manager for showing a spinner during a request.

    Only animates on a terminal; piped output stays clean.
    """
    if not sys.stdout.isatty():
        yield
        return

    with console.status(
        f"[primary]{message}[/primary]",
        spinner=SPINNER_STYLES.get(style, "dots"),
        spinner_style="primary",
    ):
        yield
