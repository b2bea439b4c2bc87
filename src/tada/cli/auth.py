"""Credential commands: tada login|logout|whoami"""

from datetime import datetime, timezone
from typing import Optional

import typer

from tada import auth
from tada.cli.context import EXIT_USAGE, get_context
from tada.errors import CredentialsError, EmptyTokenError
from tada.ui.theme import Role, colorize


def mask(token: str) -> str:
    if len(token) <= 12:
        return "*" * len(token)
    return f"{token[:4]}...{token[-4:]}"


def register(app: typer.Typer):
    @app.command()
    def login(
        ctx: typer.Context,
        token: str = typer.Argument(..., help="API token (a 'Bearer ' prefix is stripped)"),
        expires: Optional[str] = typer.Option(None, "--expires", help="Expiry as ISO 8601"),
    ):
        """Store a token in the local credentials file."""
        cli = get_context(ctx)

        expires_at = None
        if expires:
            try:
                expires_at = datetime.fromisoformat(expires)
            except ValueError:
                cli.die(f"login: invalid --expires value: {expires}", EXIT_USAGE)
            if expires_at.tzinfo is None:
                expires_at = expires_at.replace(tzinfo=timezone.utc)

        try:
            auth.set_token(token, expires_at)
        except EmptyTokenError as e:
            cli.die(f"login: {e}", EXIT_USAGE)
        except CredentialsError as e:
            cli.die(f"login: {e}")
        cli.output.ok("logged in")

    @app.command()
    def logout(ctx: typer.Context):
        """Forget the stored token."""
        cli = get_context(ctx)
        try:
            removed = auth.delete_token()
        except CredentialsError as e:
            cli.die(f"logout: {e}")
        cli.output.ok("logged out" if removed else "not logged in")

    @app.command()
    def whoami(ctx: typer.Context):
        """Show which token is active and where it came from."""
        cli = get_context(ctx)
        try:
            info = auth.get_token()
        except CredentialsError as e:
            cli.die(f"whoami: {e}")
        if info is None:
            cli.die("not logged in")

        theme = cli.theme
        cli.output.line(f"{colorize(Role.ACCENT, 'token', theme)}   {mask(info.token)}")
        cli.output.line(f"{colorize(Role.ACCENT, 'source', theme)}  {info.source}")
        if info.expires_at is not None:
            when = info.expires_at.isoformat()
            if info.expired:
                cli.output.line(f"{colorize(Role.ACCENT, 'expires', theme)} {colorize(Role.ERROR, when + ' (expired)', theme)}")
            else:
                cli.output.line(f"{colorize(Role.ACCENT, 'expires', theme)} {when}")
