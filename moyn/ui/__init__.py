"""UI components for the moyn CLI."""

from moyn.ui.console import (
    console,
    err_console,
    print_error,
    print_success,
    print_warning,
)
from moyn.ui.panels import create_posts_table, create_space_panel, create_spaces_table
from moyn.ui.spinners import create_spinner
from moyn.ui.theme import Theme, get_theme

__all__ = [
    # Theme
    "Theme",
    "get_theme",
    # Console
    "console",
    "err_console",
    "print_error",
    "print_success",
    "print_warning",
    # Panels
    "create_posts_table",
    "create_spaces_table",
    "create_space_panel",
    # Spinners
    "create_spinner",
]
