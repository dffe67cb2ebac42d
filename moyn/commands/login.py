"""Login and logout commands - manage the stored session."""

from __future__ import annotations

from rich.prompt import Prompt

from moyn.commands.base import BaseCommand
from moyn.core.api_client import login
from moyn.ui.console import console, print_success, print_warning
from moyn.ui.spinners import create_spinner


class LoginCommand(BaseCommand):
    """Store an API token after checking it against the server."""

    name = "login"
    description = "Store your API token"
    usage = "moyn login [--token TOKEN] [--url URL] [--no-verify]"
    value_flags = frozenset({"token", "t", "url", "u"})
    bool_flags = frozenset({"no-verify"})

    def execute(self, args: list[str]) -> bool:
        flags, _ = self.parse_flags(args)
        verify = not flags.get("no-verify", False)

        token = self.flag(flags, "token", "t") or self.settings.token
        url = self.flag(flags, "url", "u")

        if token is None:
            token = Prompt.ask(
                "[primary]❯[/primary] [text]Enter your API token (from your profile page)[/text]",
                console=console,
                password=True,
            )
            if url is None:
                url = Prompt.ask(
                    "[primary]❯[/primary] [text]Enter API URL[/text]",
                    console=console,
                    default=self.settings.api_url,
                )

        with create_spinner("Verifying token...", style="loading"):
            session = login(
                token,
                url or self.settings.api_url,
                verify=verify,
                timeout=self.settings.timeout,
                transport=self.transport,
            )

        self.store.save(session)
        print_success(f"Logged in to {session.api_url}")
        if not verify:
            console.print("  [muted]Token was not checked against the server.[/muted]")
        return True


class LogoutCommand(BaseCommand):
    """Forget the stored session."""

    name = "logout"
    description = "Remove the stored API token"
    usage = "moyn logout"

    def execute(self, args: list[str]) -> bool:
        if self.store.clear():
            print_success("Logged out.")
        else:
            print_warning("Not logged in.")
        return True
