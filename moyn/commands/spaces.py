"""Space commands - list, create and show spaces."""

from __future__ import annotations

import json

from rich.markup import escape

from moyn.commands.base import BaseCommand
from moyn.core.errors import NotFound
from moyn.core.models import Visibility
from moyn.ui.console import console, print_error, print_success
from moyn.ui.panels import create_space_panel, create_spaces_table
from moyn.ui.spinners import create_spinner


class SpacesCommand(BaseCommand):
    """List all spaces you own or are a member of."""

    name = "spaces"
    description = "List your spaces"
    usage = "moyn spaces [--json]"
    bool_flags = frozenset({"json"})

    def execute(self, args: list[str]) -> bool:
        flags, _ = self.parse_flags(args)

        with self.api() as api, create_spinner("Fetching spaces...", style="loading"):
            spaces = api.list_spaces()

        if flags.get("json", False):
            console.print_json(json.dumps([s.model_dump() for s in spaces]))
            return True

        if not spaces:
            console.print("No spaces yet. Create one with [command]moyn space create --name NAME[/command]")
            return True

        console.print(create_spaces_table(spaces))
        return True


class SpaceCommand(BaseCommand):
    """Create a space or show one by slug."""

    name = "space"
    description = "Manage spaces"
    usage = (
        "moyn space create --name NAME [--slug SLUG] [--description TEXT] "
        "[--visibility public|unlisted|private]\n"
        "       moyn space show <slug>"
    )
    value_flags = frozenset({"name", "n", "slug", "s", "description", "d", "visibility", "v"})

    def execute(self, args: list[str]) -> bool:
        if not args:
            return self.usage_error("Missing space action")

        action, rest = args[0], args[1:]
        if action == "create":
            return self._create(rest)
        if action == "show":
            return self._show(rest)
        return self.usage_error(f"Unknown space action: {action}")

    def _create(self, args: list[str]) -> bool:
        flags, _ = self.parse_flags(args)

        name = self.flag(flags, "name", "n")
        if not name:
            return self.usage_error("--name is required")

        visibility = self.flag(flags, "visibility", "v") or Visibility.PRIVATE.value
        if visibility not in Visibility.choices():
            print_error(
                f"Invalid visibility '{visibility}'. Must be one of: "
                + ", ".join(Visibility.choices())
            )
            return False

        with self.api() as api, create_spinner(f"Creating space {name}...", style="loading"):
            space = api.create_space(
                name,
                visibility=Visibility(visibility),
                slug=self.flag(flags, "slug", "s"),
                description=self.flag(flags, "description", "d"),
            )

        print_success(f"Created space: {space.name}")
        console.print(f"  URL: [url]{escape(space.url)}[/url]")
        if space.token_url:
            console.print(f"  Share URL: [url]{escape(space.token_url)}[/url]")
        console.print()
        console.print("Publish to this space:")
        console.print(f"  Add `space: {space.slug}` to your markdown frontmatter", markup=False)
        return True

    def _show(self, args: list[str]) -> bool:
        _, remaining = self.parse_flags(args)
        if not remaining:
            return self.usage_error("Missing space slug")

        slug = remaining[0]
        try:
            with self.api() as api, create_spinner(f"Fetching space {slug}...", style="loading"):
                space = api.show_space(slug)
        except NotFound:
            print_error(f"Space '{slug}' not found or you don't have access.")
            return False

        console.print(create_space_panel(space))
        return True
