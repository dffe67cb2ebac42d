"""Post commands - publish, list and delete posts."""

from __future__ import annotations

import json
from pathlib import Path

from rich.markup import escape

from moyn.commands.base import BaseCommand
from moyn.core.errors import NotFound
from moyn.core.frontmatter import load_post
from moyn.ui.console import console, print_error, print_success
from moyn.ui.panels import create_posts_table
from moyn.ui.spinners import create_spinner


class PublishCommand(BaseCommand):
    """Publish a markdown file as a post."""

    name = "publish"
    description = "Publish a markdown file as a post"
    usage = "moyn publish <file>"

    def execute(self, args: list[str]) -> bool:
        _, remaining = self.parse_flags(args)
        if not remaining:
            return self.usage_error("Missing markdown file")

        path = Path(remaining[0])
        if not path.is_file():
            print_error(f"File not found: {path}")
            return False

        post = load_post(path)

        with self.api() as api, create_spinner(f"Publishing {path.name}...", style="upload"):
            result = api.publish(post)

        if post.published:
            print_success(f"Published: {result.title}")
        else:
            print_success(f"Saved draft: {result.title}")
            console.print("  [muted]Add `published: true` to the frontmatter to make it public.[/muted]")
        console.print(f"  ID:  {result.id}", highlight=False)
        if result.url:
            console.print(f"  URL: [url]{escape(result.url)}[/url]")
        if post.space:
            console.print(f"  Space: [slug]{escape(post.space)}[/slug]")
        return True


class PostsCommand(BaseCommand):
    """List your posts."""

    name = "posts"
    description = "List your posts"
    usage = "moyn posts [--json]"
    bool_flags = frozenset({"json"})

    def execute(self, args: list[str]) -> bool:
        flags, _ = self.parse_flags(args)

        with self.api() as api, create_spinner("Fetching posts...", style="loading"):
            posts = api.list_posts()

        if flags.get("json", False):
            console.print_json(json.dumps([p.model_dump() for p in posts]))
            return True

        if not posts:
            console.print("No posts yet.")
            return True

        console.print(create_posts_table(posts))
        return True


class DeleteCommand(BaseCommand):
    """Delete a post by ID."""

    name = "delete"
    description = "Delete a post by ID"
    usage = "moyn delete <id>"

    def execute(self, args: list[str]) -> bool:
        _, remaining = self.parse_flags(args)
        if not remaining:
            return self.usage_error("Missing post ID")

        try:
            post_id = int(remaining[0])
        except ValueError:
            return self.usage_error(f"Invalid post ID: {remaining[0]}")

        try:
            with self.api() as api, create_spinner(f"Deleting post {post_id}...", style="loading"):
                api.delete_post(post_id)
        except NotFound:
            print_error(f"Post {post_id} not found.")
            return False

        print_success(f"Post {post_id} deleted.")
        return True
