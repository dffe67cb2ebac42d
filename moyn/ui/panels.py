"""Tables and panels for posts and spaces."""

from __future__ import annotations

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.markup import escape
from rich.text import Text

from moyn.core.models import PostSummary, Space


def _visibility_text(visibility: str) -> Text:
    return Text(visibility, style=f"visibility.{visibility}")


def create_posts_table(posts: list[PostSummary]) -> Table:
    """ID / TITLE / URL listing of posts."""
    table = Table(show_header=True, header_style="primary.bold", box=box.SIMPLE_HEAD)
    table.add_column("ID", style="number", justify="right", no_wrap=True)
    table.add_column("TITLE", style="text", max_width=40, overflow="ellipsis", no_wrap=True)
    table.add_column("URL", style="url", overflow="fold")
    
    for post in posts:
        title = Text(post.title)
        if post.published is False:
            title.append(" (draft)", style="muted")
        table.add_row(str(post.id), title, post.url)
    
    return table


def create_spaces_table(spaces: list[Space]) -> Table:
    """SLUG / NAME / VISIBILITY / URL listing of spaces."""
    table = Table(show_header=True, header_style="primary.bold", box=box.SIMPLE_HEAD)
    table.add_column("SLUG", style="slug", max_width=20, overflow="ellipsis", no_wrap=True)
    table.add_column("NAME", style="text", max_width=30, overflow="ellipsis", no_wrap=True)
    table.add_column("VISIBILITY", no_wrap=True)
    table.add_column("URL", style="url", overflow="fold")
    
    for space in spaces:
        table.add_row(space.slug, space.name, _visibility_text(space.visibility), space.url)
    
    return table


def create_space_panel(space: Space) -> Panel:
    """Detailed view of one space."""
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Field", style="muted", no_wrap=True)
    table.add_column("Value", style="text", overflow="fold")
    
    table.add_row("Slug", Text(space.slug, style="slug"))
    table.add_row("Visibility", _visibility_text(space.visibility))
    if space.description:
        table.add_row("Description", space.description)
    table.add_row("URL", Text(space.url, style="url"))
    if space.token_url:
        table.add_row("Share URL", Text(space.token_url, style="url"))
    if space.access_token:
        table.add_row("Access Token", space.access_token)
    
    return Panel(
        table,
        title=f"[primary]Space: {escape(space.name)}[/primary]",
        title_align="left",
        border_style="primary",
        padding=(0, 1),
    )
