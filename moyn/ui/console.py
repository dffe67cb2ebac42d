"""Rich console instances and message helpers."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.text import Text
from rich.panel import Panel
from rich import box
from moyn.ui.theme import get_theme


# Regular output goes to stdout, errors and logs to stderr
console = Console(theme=get_theme().to_rich_theme(), highlight=False)
err_console = Console(theme=get_theme().to_rich_theme(), stderr=True, highlight=False)


def print_error(message: str, title: str = "Error") -> None:
    """Print an error panel on stderr."""
    content = Text()
    content.append(message, style="#FF5252")
    
    err_console.print(Panel(
        content,
        title=f"[#FF5252 bold]✖ {title}[/#FF5252 bold]",
        border_style="#FF5252",
        box=box.ROUNDED,
        padding=(0, 2),
    ))


def print_success(message: str) -> None:
    """Print a one-line success message."""
    console.print(f"[success]✔[/success] {escape(message)}", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a one-line warning on stderr."""
    err_console.print(f"[warning]⚠[/warning] {escape(message)}", soft_wrap=True)
