import logging

import click
from rich.console import Console
from rich.text import Text

from ... import feedback
from ...credential import PlayerName, Username
from ..exc import InvalidCredentialError
from .check import get_settings

__all__ = ["sanitize"]

logger = logging.getLogger(__name__)

_STRICT_HELP = "Exit with status 65 if the sanitized value is still invalid."


def emit(kind: str, credential: Username | PlayerName, strict: bool) -> None:
    sanitized = type(credential)(credential.sanitized(), credential.requires)
    logger.debug("sanitized %s %r to %r", kind, credential.value, sanitized.value)

    Console(soft_wrap=True).print(Text(sanitized.value or ""))

    # sanitizing never pads a value up to the minimum length
    if strict and (state := sanitized.validate()):
        raise InvalidCredentialError(
            "; ".join(feedback.explain(state, sanitized.requires)),
            ctx=InvalidCredentialError.Context(
                kind=kind, state=feedback.format_state(state)
            ),
        )


@click.group()
def sanitize() -> None:
    """
    Rewrite invalid input into a best-effort valid form.

    Sanitizing does not guarantee a valid result, a value that is too short stays too
    short. Use --strict to fail in that case.
    """


@sanitize.command()
@click.argument("value")
@click.option("--strict", is_flag=True, default=False, help=_STRICT_HELP)
@click.pass_context
def username(ctx: click.Context, value: str, strict: bool) -> None:
    """
    Lower-case a username, replace invalid characters with the first valid symbol
    and cap it to the maximum length.
    """
    emit("username", Username(value, get_settings(ctx).username), strict)


@sanitize.command("player-name")
@click.argument("value")
@click.option("--strict", is_flag=True, default=False, help=_STRICT_HELP)
@click.pass_context
def player_name(ctx: click.Context, value: str, strict: bool) -> None:
    """Remove whitespace from a player name and cap it to the maximum length."""
    emit("player name", PlayerName(value, get_settings(ctx).player_name), strict)
