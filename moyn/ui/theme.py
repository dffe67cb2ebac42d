"""Theme and color definitions for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from rich.style import Style
from rich.theme import Theme as RichTheme


@dataclass
class Theme:
    """Color theme for the CLI."""
    
    primary: str = "#4FC3F7"      # Sky blue - main accent
    secondary: str = "#FFB74D"    # Amber - secondary accent
    
    # Status colors
    success: str = "#00E676"
    error: str = "#FF5252"
    warning: str = "#FFB347"
    info: str = "#B388FF"
    
    # Text colors
    text: str = "#E8E8E8"
    muted: str = "#888888"
    accent: str = "#00CED1"
    
    def to_rich_theme(self) -> RichTheme:
        """Convert to Rich theme."""
        return RichTheme({
            "primary": Style(color=self.primary),
            "secondary": Style(color=self.secondary),
            "primary.bold": Style(color=self.primary, bold=True),
            
            "success": Style(color=self.success, bold=True),
            "error": Style(color=self.error, bold=True),
            "warning": Style(color=self.warning),
            "info": Style(color=self.info),
            
            "text": Style(color=self.text),
            "muted": Style(color=self.muted),
            "accent": Style(color=self.accent),
            
            # Semantic styles
            "command": Style(color=self.primary, bold=True),
            "path": Style(color=self.secondary),
            "number": Style(color=self.warning),
            "slug": Style(color=self.secondary),
            "url": Style(color=self.accent, underline=True),
            "visibility.public": Style(color=self.success),
            "visibility.unlisted": Style(color=self.warning),
            "visibility.private": Style(color=self.muted),
        })


# Default theme instance
_theme = Theme()


def get_theme() -> Theme:
    """Get the current theme."""
    return _theme
