import logging

import click
from rich.console import Console
from rich.text import Text

from ... import _conf, feedback
from ...credential import AbstractCredential, Password, PlayerName, Username
from ..exc import InvalidCredentialError

__all__ = ["check"]

logger = logging.getLogger(__name__)


def get_settings(ctx: click.Context) -> _conf.Settings:
    if not (settings := ctx.find_object(_conf.Settings)):
        raise RuntimeError("Configuration not found")
    return settings


def report(kind: str, credential: AbstractCredential) -> None:  # type: ignore[type-arg]
    """Prints the outcome and raises if the credential is invalid."""
    console = Console(soft_wrap=True)
    state = credential.validate()
    logger.debug("checked %s: %r", kind, state)

    if not state:
        console.print(Text("valid", style="green"))
        return

    for line in feedback.explain(state, credential.requires):
        console.print(Text("%s %s" % (kind.capitalize(), line), style="yellow"))

    raise InvalidCredentialError(
        "Run `credential-guard requirements %s` for details." % kind.replace(" ", "-"),
        ctx=InvalidCredentialError.Context(
            kind=kind, state=feedback.format_state(state)
        ),
    )


@click.group()
def check() -> None:
    """
    Check a credential against the configured requirements.

    Prints `valid` and exits with status 0 if the credential meets every requirement,
    otherwise explains each violation and exits with status 65.
    """


@check.command()
@click.argument("value")
@click.pass_context
def username(ctx: click.Context, value: str) -> None:
    """Check a username."""
    report("username", Username(value, get_settings(ctx).username))


@check.command()
@click.argument("value", required=False)
@click.pass_context
def password(ctx: click.Context, value: str | None) -> None:
    """
    Check a password.

    If VALUE is omitted the password is prompted for without echoing it.
    """
    if value is None:
        value = click.prompt(
            "Password", hide_input=True, default="", show_default=False
        )
    report("password", Password(value, get_settings(ctx).password))


@check.command("player-name")
@click.argument("value")
@click.pass_context
def player_name(ctx: click.Context, value: str) -> None:
    """Check a player name."""
    report("player name", PlayerName(value, get_settings(ctx).player_name))
